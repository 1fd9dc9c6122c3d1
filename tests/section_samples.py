"""Valid content for every section type, in wire (camelCase) form."""

HERO = {
    "headline": "Ship landing pages in minutes",
    "subheadline": "Describe your business and get a page that converts.",
    "cta": {"text": "Get Started", "url": "/signup"},
}

FEATURES = {
    "headline": "Everything you need",
    "features": [
        {"icon": "Rocket01Icon", "title": "Fast", "description": "Pages load in under a second."},
        {"icon": "Shield01Icon", "title": "Secure", "description": "Hosted with HTTPS by default."},
        {"icon": "Chart01Icon", "title": "Measurable", "description": "Built-in conversion analytics."},
    ],
}

PRICING = {
    "tiers": [
        {
            "name": "Starter",
            "price": "$19/mo",
            "description": "For side projects",
            "features": ["1 page", "Custom domain"],
            "cta": {"text": "Start", "url": "/signup?plan=starter"},
        },
        {
            "name": "Pro",
            "price": "$49/mo",
            "description": "For growing teams",
            "features": ["Unlimited pages", "A/B testing"],
            "cta": {"text": "Go Pro", "url": "/signup?plan=pro"},
            "highlighted": True,
        },
    ],
}

TESTIMONIALS = {
    "testimonials": [
        {"quote": "We doubled sign-ups in a week.", "author": "Dana Reyes", "role": "Founder"},
    ],
}

FAQ = {
    "items": [
        {"question": "Can I cancel anytime?", "answer": "Yes, with one click."},
        {"question": "Do you offer refunds?", "answer": "Within 30 days."},
        {"question": "Is there a free plan?", "answer": "Yes, for one page."},
    ],
}

CTA = {
    "headline": "Ready to launch?",
    "cta": {"text": "Get Started", "url": "#"},
}

MENU = {
    "categories": [
        {"name": "Starters", "items": [{"name": "Bruschetta", "price": "$8"}]},
    ],
}

PORTFOLIO = {
    "projects": [
        {"title": f"Project {n}", "description": "A rebrand.", "image": f"/img/p{n}.jpg"}
        for n in range(1, 4)
    ],
}

TEAM = {
    "members": [
        {"name": "Ari Cole", "role": "CEO"},
        {"name": "Sam Park", "role": "CTO", "social": {"linkedin": "https://linkedin.com/in/sam"}},
    ],
}

GALLERY = {
    "images": [{"src": f"/img/g{n}.jpg", "alt": f"Photo {n}"} for n in range(1, 5)],
}

CONTACT = {
    "contactInfo": {"email": "hello@example.com"},
}

STATS = {
    "stats": [{"value": "10K+", "label": "Customers"}, {"value": "99%", "label": "Uptime"}],
}

LOGOS = {
    "logos": [{"src": f"/img/l{n}.svg", "alt": f"Logo {n}"} for n in range(1, 4)],
}

ABOUT = {
    "content": "We started in a garage and never looked back.",
}

SERVICES = {
    "services": [
        {"title": "Design", "description": "Brand and web design."},
        {"title": "Build", "description": "Fast, accessible sites."},
        {"title": "Grow", "description": "SEO and analytics."},
    ],
}

BY_TYPE = {
    "hero": HERO,
    "features": FEATURES,
    "pricing": PRICING,
    "testimonials": TESTIMONIALS,
    "faq": FAQ,
    "cta": CTA,
    "menu": MENU,
    "portfolio": PORTFOLIO,
    "team": TEAM,
    "gallery": GALLERY,
    "contact": CONTACT,
    "stats": STATS,
    "logos": LOGOS,
    "about": ABOUT,
    "services": SERVICES,
}


def section_document(section_type="hero", template_id=None, content=None, **overrides):
    """Detached section document as the store would return it."""
    from pagecraft.domain.sections.registry import validate
    from pagecraft.domain.templates.registry import default_id_for

    document = {
        "id": "sec-1",
        "page_id": "page-1",
        "type": section_type,
        "template_id": template_id or default_id_for(section_type),
        "order": 1,
        "is_visible": True,
        "content": validate(section_type, content if content is not None else BY_TYPE[section_type]),
        "style_overrides": None,
        "variants": None,
        "selected_variant": None,
        "created_at": "2026-01-01T00:00:00+00:00",
        "updated_at": "2026-01-01T00:00:00+00:00",
    }
    document.update(overrides)
    return document
