from pagecraft.domain.exceptions import StaleSectionError
from pagecraft.store.section_store import SqlSectionStore
from pagecraft.utils.optimistic_lock import is_modified_since, parse_ts


def resolve_store(store=None):
    return store if store is not None else SqlSectionStore()


def load_section(store, section_id, expected_updated_at=None):
    """
    Reads a section for a write.
    Refuses early when the client's copy is already stale, before any LLM call.
    """
    section = store.get(section_id)

    if expected_updated_at is not None and section.get("updated_at"):
        if is_modified_since(parse_ts(section["updated_at"]), parse_ts(expected_updated_at)):
            raise StaleSectionError(section_id)

    return section
