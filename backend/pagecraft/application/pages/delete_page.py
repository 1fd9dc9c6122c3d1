import logging
from typing import Optional

from pagecraft.domain.exceptions import PageNotFound
from pagecraft.extensions import db
from pagecraft.models.page import Page
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional

log = logging.getLogger(__name__)


def delete_page(
    *,
    page_id: str,
    actor_id: Optional[str] = None,
) -> None:
    """
    Hard-delete a page and its sections.

    Sections go through the relationship cascade; audit entries stay.
    """
    page = db.session.get(Page, page_id)
    if page is None:
        raise PageNotFound(page_id)

    section_count = len(page.sections)

    with transactional():
        db.session.delete(page)

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            actor_id=actor_id,
            payload={
                "slug": page.slug,
                "sections": section_count,
            },
        )

    log.info("[page] deleted page=%s sections=%d", page_id, section_count)
