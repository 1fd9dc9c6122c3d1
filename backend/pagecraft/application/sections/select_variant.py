import copy
from typing import Any, Dict, Optional

from pagecraft.domain.exceptions import InvariantViolation
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .common import load_section, resolve_store


def apply_variant(section: Dict[str, Any], index: int) -> Dict[str, Any]:
    """Makes variant `index` the live content of the section."""
    variants = section.get("variants") or []

    if not variants:
        raise InvariantViolation("Section has no variants")

    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(variants):
        raise InvariantViolation(f"Variant {index} is out of range for {len(variants)} variant(s)")

    next_section = copy.deepcopy(section)
    next_section["content"] = copy.deepcopy(variants[index])
    next_section["selected_variant"] = index
    return next_section


def select_variant(
    *,
    section_id: str,
    index: int,
    store=None,
    expected_updated_at=None,
    actor_id: Optional[str] = None,
) -> Dict[str, Any]:
    store = resolve_store(store)
    section = load_section(store, section_id, expected_updated_at)

    next_section = apply_variant(section, index)

    with transactional():
        saved = store.save(next_section, expected_updated_at=expected_updated_at)

        log_action(
            action="section.select_variant",
            entity_type="section",
            entity_id=section_id,
            page_id=section["page_id"],
            actor_id=actor_id,
            payload={"from": section.get("selected_variant"), "to": index},
        )

    return saved
