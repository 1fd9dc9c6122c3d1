import logging
from typing import Any, Dict, List, Optional

from pagecraft.domain.exceptions import FieldError, SchemaValidationError, TemplateTypeMismatch
from pagecraft.domain.sections.registry import validate, validate_variants
from pagecraft.domain.sections.types import coerce_type
from pagecraft.domain.styles import overrides as styles
from pagecraft.domain.templates import registry as templates
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .common import resolve_store

log = logging.getLogger(__name__)


def build_section_document(
    *,
    page_id: str,
    section_type,
    content: Dict[str, Any],
    template_id: Optional[str] = None,
    order: int = 1,
    is_visible: bool = True,
    style_overrides: Optional[Dict[str, Any]] = None,
    variants: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Builds a validated, not yet persisted section document.

    The template defaults to the type's default template. Variants start
    unselected; content stays live until one is selected.
    """
    try:
        kind = coerce_type(section_type)
    except ValueError as exc:
        raise SchemaValidationError("section", [FieldError(path="type", message=str(exc))]) from exc

    template_id = template_id or templates.default_id_for(kind)
    definition = templates.get_definition(template_id)

    if definition.section_type is not kind:
        raise TemplateTypeMismatch(
            f"Template {template_id!r} renders {definition.section_type.value!r} sections, not {kind.value!r}"
        )

    normalized_variants = validate_variants(kind, variants) if variants else None

    if style_overrides:
        result = styles.validate(style_overrides, kind)
        if not result.valid:
            raise SchemaValidationError(
                "style overrides",
                [FieldError(path="styleOverrides", message=e) for e in result.errors],
            )

    return {
        "id": None,
        "page_id": page_id,
        "type": kind.value,
        "template_id": template_id,
        "order": order,
        "is_visible": bool(is_visible),
        "content": validate(kind, content),
        "style_overrides": styles.merge(None, style_overrides) or None,
        "variants": normalized_variants,
        "selected_variant": None,
    }


def create_section(
    *,
    page_id: str,
    section_type,
    content: Dict[str, Any],
    template_id: Optional[str] = None,
    is_visible: bool = True,
    style_overrides: Optional[Dict[str, Any]] = None,
    variants: Optional[List[Dict[str, Any]]] = None,
    store=None,
    actor_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Appends a new section at the end of a page."""
    store = resolve_store(store)

    with transactional():
        document = build_section_document(
            page_id=page_id,
            section_type=section_type,
            content=content,
            template_id=template_id,
            order=store.next_order(page_id),
            is_visible=is_visible,
            style_overrides=style_overrides,
            variants=variants,
        )

        created = store.create(document)

        log_action(
            action="section.create",
            entity_type="section",
            entity_id=created["id"],
            page_id=page_id,
            actor_id=actor_id,
            payload={
                "type": created["type"],
                "template_id": created["template_id"],
            },
        )

    log.info("[section] created section=%s page=%s type=%s", created["id"], page_id, created["type"])
    return created
