import copy
from typing import Any, Dict, Optional

from pagecraft.domain.exceptions import FieldError, InvariantViolation, SchemaValidationError
from pagecraft.domain.sections.registry import validate, validate_variants
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .common import load_section, resolve_store

ALLOWED_UPDATE_FIELDS = ("content", "is_visible", "variants")


def apply_section_update(section: Dict[str, Any], data: Dict[str, Any]):
    """
    Returns (next_section, changed_fields) for a manual edit.

    Content and variants are validated against the section's own type; the
    type and template only change through a template switch.
    """
    next_section = copy.deepcopy(section)
    changed_fields = []

    if "content" in data:
        content = validate(section["type"], data["content"])
        if content != section["content"]:
            next_section["content"] = content
            changed_fields.append("content")

    if "is_visible" in data:
        if not isinstance(data["is_visible"], bool):
            raise SchemaValidationError("section", [FieldError(path="is_visible", message="must be a boolean")])
        if data["is_visible"] != section["is_visible"]:
            next_section["is_visible"] = data["is_visible"]
            changed_fields.append("is_visible")

    if "variants" in data:
        variants = validate_variants(section["type"], data["variants"]) if data["variants"] else None
        if variants != section.get("variants"):
            next_section["variants"] = variants
            # content no longer mirrors a stored variant
            next_section["selected_variant"] = None
            changed_fields.append("variants")

    return next_section, changed_fields


def update_section(
    *,
    section_id: str,
    data: Dict[str, Any],
    store=None,
    expected_updated_at=None,
    actor_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Update mutable fields on a section.

    Design rules:
    - Only whitelisted fields are mutable
    - No silent no-op updates
    - Invariants always revalidated by the store
    """
    unknown = sorted(set(data) - set(ALLOWED_UPDATE_FIELDS))
    if unknown:
        raise SchemaValidationError(
            "section",
            [FieldError(path=name, message="cannot be updated here") for name in unknown],
        )

    store = resolve_store(store)
    section = load_section(store, section_id, expected_updated_at)

    next_section, changed_fields = apply_section_update(section, data)

    if not changed_fields:
        # Explicitly fail instead of silently succeeding
        raise InvariantViolation("No changes provided for update")

    with transactional():
        saved = store.save(next_section, expected_updated_at=expected_updated_at)

        log_action(
            action="section.update",
            entity_type="section",
            entity_id=section_id,
            page_id=section["page_id"],
            actor_id=actor_id,
            payload={
                "fields": changed_fields,
            },
        )

    return saved
