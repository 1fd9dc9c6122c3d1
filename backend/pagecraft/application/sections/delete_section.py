from typing import Optional

from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .common import load_section, resolve_store


def delete_section(
    *,
    section_id: str,
    store=None,
    expected_updated_at=None,
    actor_id: Optional[str] = None,
) -> None:
    """
    Hard-delete a section.

    Remaining sections on the page are re-compacted to orders 1..N.
    """
    store = resolve_store(store)
    section = load_section(store, section_id, expected_updated_at)

    with transactional():
        store.delete(section_id)

        log_action(
            action="section.delete",
            entity_type="section",
            entity_id=section_id,
            page_id=section["page_id"],
            actor_id=actor_id,
            payload={
                "type": section["type"],
                "template_id": section["template_id"],
            },
        )
