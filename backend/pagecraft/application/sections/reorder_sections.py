from typing import Any, Dict, List, Optional

from pagecraft.domain.exceptions import FieldError, SchemaValidationError
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .common import resolve_store


def reorder_sections(
    *,
    page_id: str,
    section_ids: List[str],
    store=None,
    actor_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Applies a new section order to a page.

    section_ids must name every section of the page exactly once; orders
    become 1..N in that sequence.
    """
    if not isinstance(section_ids, list) or not all(isinstance(i, str) for i in section_ids):
        raise SchemaValidationError(
            "reorder",
            [FieldError(path="section_ids", message="must be a list of section ids")],
        )

    store = resolve_store(store)

    with transactional():
        sections = store.reorder(page_id, section_ids)

        log_action(
            action="page.reorder_sections",
            entity_type="page",
            entity_id=page_id,
            actor_id=actor_id,
            payload={"section_ids": section_ids},
        )

    return sections
