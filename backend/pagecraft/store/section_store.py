import copy
import logging
from typing import Any, Dict, List, Protocol

from pagecraft.domain.exceptions import InvariantViolation, PageNotFound, SectionNotFound, StaleSectionError
from pagecraft.domain.invariants.page import assert_section_orders
from pagecraft.domain.invariants.section import assert_section
from pagecraft.extensions import db
from pagecraft.models.page import Page
from pagecraft.models.section import Section
from pagecraft.normalizers.section import normalize_section
from pagecraft.utils.optimistic_lock import is_modified_since, parse_ts
from pagecraft.utils.order import apply_order, compact_order

log = logging.getLogger(__name__)

# Fields a section document may change; identity and timestamps are owned by the store.
WRITABLE_FIELDS = (
    "type",
    "template_id",
    "order",
    "is_visible",
    "content",
    "style_overrides",
    "variants",
    "selected_variant",
)


class SectionStore(Protocol):
    def get(self, section_id: str) -> Dict[str, Any]:
        ...

    def save(self, document: Dict[str, Any], expected_updated_at=None) -> Dict[str, Any]:
        ...


class SqlSectionStore:
    """
    Section documents backed by Flask-SQLAlchemy.

    Writes only flush; committing is left to the caller's transactional()
    block so the audit entry lands in the same transaction.
    """

    def _row(self, section_id) -> Section:
        section = db.session.get(Section, section_id)
        if section is None:
            raise SectionNotFound(section_id)
        return section

    def _page(self, page_id) -> Page:
        page = db.session.get(Page, page_id)
        if page is None:
            raise PageNotFound(page_id)
        return page

    def get(self, section_id: str) -> Dict[str, Any]:
        return normalize_section(self._row(section_id))

    def list_for_page(self, page_id: str) -> List[Dict[str, Any]]:
        page = self._page(page_id)
        return [normalize_section(s) for s in sorted(page.sections, key=lambda s: s.order)]

    def save(self, document: Dict[str, Any], expected_updated_at=None) -> Dict[str, Any]:
        """
        Write a complete next-state document.

        When expected_updated_at is given and the row changed after it,
        nothing is written and StaleSectionError is raised.
        """
        section = self._row(document["id"])

        if expected_updated_at is not None and is_modified_since(
            section.updated_at, parse_ts(expected_updated_at)
        ):
            log.info("[store] stale write refused section=%s", section.id)
            raise StaleSectionError(section.id)

        assert_section(document)

        for field in WRITABLE_FIELDS:
            setattr(section, field, copy.deepcopy(document.get(field)))

        db.session.flush()
        return normalize_section(section)

    def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        page = self._page(document["page_id"])
        assert_section(document)

        section = Section()
        section.page = page
        for field in WRITABLE_FIELDS:
            setattr(section, field, copy.deepcopy(document.get(field)))

        db.session.add(section)
        db.session.flush()
        return normalize_section(section)

    def delete(self, section_id: str) -> None:
        section = self._row(section_id)
        page = section.page

        page.sections.remove(section)
        db.session.delete(section)
        db.session.flush()

        compact_order(page.sections)

    def reorder(self, page_id: str, ordered_ids: List[str]) -> List[Dict[str, Any]]:
        page = self._page(page_id)

        try:
            ordered = apply_order(page.sections, list(ordered_ids))
        except ValueError as exc:
            raise InvariantViolation(str(exc)) from exc

        assert_section_orders([s.order for s in ordered])

        return [normalize_section(s) for s in ordered]

    def business_context(self, page_id: str):
        return self._page(page_id).business_context

    def next_order(self, page_id: str) -> int:
        page = self._page(page_id)
        return len(page.sections) + 1
