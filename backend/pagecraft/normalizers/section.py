import copy


def _isoformat(ts):
    return ts.isoformat() if ts else None


def normalize_section(section):
    """
    Serializes a Section row into a section document.

    The document is a detached deep copy; core functions may mutate their
    own copies of it freely without touching the session.
    """
    return {
        "id": section.id,
        "page_id": section.page_id,
        "type": section.type,
        "template_id": section.template_id,
        "order": section.order,
        "is_visible": bool(section.is_visible),
        "content": copy.deepcopy(section.content or {}),
        "style_overrides": copy.deepcopy(section.style_overrides) or None,
        "variants": copy.deepcopy(section.variants) or None,
        "selected_variant": section.selected_variant,
        "created_at": _isoformat(section.created_at),
        "updated_at": _isoformat(section.updated_at),
    }
