from .section import normalize_section


def normalize_page(page, include_sections=True):
    data = {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "business_context": page.business_context,
        "theme": page.theme or {},
        "created_at": page.created_at.isoformat() if page.created_at else None,
        "updated_at": page.updated_at.isoformat() if page.updated_at else None,
    }

    if include_sections:
        sections = sorted(page.sections, key=lambda s: s.order)
        data["sections"] = [normalize_section(s) for s in sections]

    return data
