import copy
import logging
from typing import Any, Dict, Optional, Tuple

from pagecraft.domain.exceptions import FieldError, InvariantViolation, SchemaValidationError
from pagecraft.domain.styles import overrides as styles
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .common import load_section, resolve_store

log = logging.getLogger(__name__)


def apply_style_patch(section: Dict[str, Any], patch: Dict[str, Any]) -> Tuple[Dict[str, Any], list]:
    """
    Layers a style patch onto a section; returns (next_section, warnings).

    Raises SchemaValidationError when the patch itself is invalid.
    """
    result = styles.validate(patch, section["type"])
    if not result.valid:
        raise SchemaValidationError(
            "style overrides",
            [FieldError(path="styleOverrides", message=e) for e in result.errors],
        )

    next_section = copy.deepcopy(section)
    next_section["style_overrides"] = styles.merge(section.get("style_overrides"), patch) or None
    return next_section, result.warnings


def _save(store, section_id, next_section, expected_updated_at, actor_id, action, payload):
    with transactional():
        saved = store.save(next_section, expected_updated_at=expected_updated_at)

        log_action(
            action=action,
            entity_type="section",
            entity_id=section_id,
            page_id=next_section["page_id"],
            actor_id=actor_id,
            payload=payload,
        )

    return saved


def update_style_overrides(
    *,
    section_id: str,
    overrides: Dict[str, Any],
    store=None,
    expected_updated_at=None,
    actor_id: Optional[str] = None,
) -> Tuple[Dict[str, Any], list]:
    """Merges a manual style patch into the section's existing overrides."""
    store = resolve_store(store)
    section = load_section(store, section_id, expected_updated_at)

    next_section, warnings = apply_style_patch(section, overrides)
    if next_section["style_overrides"] == (section.get("style_overrides") or None):
        raise InvariantViolation("No changes provided for update")

    for warning in warnings:
        log.warning("[styles] section=%s %s", section_id, warning)

    saved = _save(
        store, section_id, next_section, expected_updated_at, actor_id,
        action="section.update_styles",
        payload={"patch": overrides, "warnings": warnings},
    )
    return saved, warnings


def clear_style_overrides(
    *,
    section_id: str,
    store=None,
    expected_updated_at=None,
    actor_id: Optional[str] = None,
) -> Dict[str, Any]:
    store = resolve_store(store)
    section = load_section(store, section_id, expected_updated_at)

    if not styles.has_any(section.get("style_overrides")):
        raise InvariantViolation("Section has no style overrides to clear")

    next_section = copy.deepcopy(section)
    next_section["style_overrides"] = None

    return _save(
        store, section_id, next_section, expected_updated_at, actor_id,
        action="section.clear_styles",
        payload={"previous": section.get("style_overrides")},
    )
