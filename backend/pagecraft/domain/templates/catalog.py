"""
Per-section-type template sub-registries.

Each sub-registry maps template id -> TemplateDefinition and names its
default. The global registry is assembled from these in registry.py.
"""

from typing import Dict, Iterable, Tuple

from pagecraft.domain.sections.types import SectionType
from .definitions import (
    PreviewElement,
    TemplateDefinition,
    TemplateMetadata,
    TemplatePreview,
    create_template_id,
)

HEADLINE_TEXT_BUTTON = (
    PreviewElement(type="headline"),
    PreviewElement(type="text"),
    PreviewElement(type="button"),
)


def _template(
    section_type: SectionType,
    variant: str,
    *,
    name: str,
    description: str,
    tags: Iterable[str],
    layout: str,
    elements: Tuple[PreviewElement, ...] = (),
    accent: bool = False,
) -> Tuple[str, TemplateDefinition]:
    template_id = create_template_id(section_type, variant)
    definition = TemplateDefinition(
        metadata=TemplateMetadata(
            id=template_id,
            section_type=section_type,
            name=name,
            description=description,
            tags=tuple(tags),
        ),
        preview=TemplatePreview(layout=layout, elements=elements, accent=accent),
    )
    return template_id, definition


HERO_TEMPLATES = dict([
    _template(
        SectionType.HERO, "centered",
        name="Centered",
        description="Classic centered layout with headline, subheadline, and CTA buttons",
        tags=("classic", "centered", "versatile"),
        layout="centered",
        elements=(
            PreviewElement(type="headline", size="lg"),
            PreviewElement(type="text"),
            PreviewElement(type="button"),
        ),
    ),
    _template(
        SectionType.HERO, "gradient",
        name="Gradient",
        description="Bold gradient background using primary and secondary colors",
        tags=("modern", "bold", "colorful"),
        layout="centered",
        elements=(
            PreviewElement(type="headline", size="lg"),
            PreviewElement(type="text"),
            PreviewElement(type="button"),
        ),
        accent=True,
    ),
    _template(
        SectionType.HERO, "split",
        name="Split",
        description="Two-column layout with content on one side and image on the other",
        tags=("modern", "image-focused", "professional"),
        layout="split-left",
        elements=HEADLINE_TEXT_BUTTON,
    ),
    _template(
        SectionType.HERO, "minimal",
        name="Minimal",
        description="Ultra-clean layout with just the headline and CTA",
        tags=("minimal", "whitespace", "simple"),
        layout="centered",
        elements=(PreviewElement(type="headline", size="lg"), PreviewElement(type="button")),
    ),
    _template(
        SectionType.HERO, "video",
        name="Video",
        description="Immersive full-screen hero with video or image background",
        tags=("immersive", "media", "bold"),
        layout="centered",
        elements=(
            PreviewElement(type="headline", size="lg"),
            PreviewElement(type="text"),
            PreviewElement(type="button"),
        ),
        accent=True,
    ),
])

FEATURES_TEMPLATES = dict([
    _template(
        SectionType.FEATURES, "grid",
        name="Grid",
        description="Clean grid layout with centered icons and text",
        tags=("clean", "centered", "minimal"),
        layout="grid",
    ),
    _template(
        SectionType.FEATURES, "cards",
        name="Cards",
        description="Feature cards with subtle borders and backgrounds",
        tags=("cards", "bordered", "modern"),
        layout="cards",
    ),
    _template(
        SectionType.FEATURES, "alternating",
        name="Alternating",
        description="Zigzag layout alternating features left and right with visuals",
        tags=("storytelling", "zigzag", "visual"),
        layout="alternating",
    ),
    _template(
        SectionType.FEATURES, "icons-left",
        name="Icons Left",
        description="Clean list layout with icons aligned to the left",
        tags=("list", "icons", "benefits"),
        layout="rows",
    ),
])

PRICING_TEMPLATES = dict([
    _template(
        SectionType.PRICING, "simple",
        name="Simple",
        description="Clean pricing cards with features list and CTA",
        tags=("clean", "cards", "modern"),
        layout="cards",
    ),
    _template(
        SectionType.PRICING, "comparison",
        name="Comparison",
        description="Pricing tiers as columns with feature rows for easy comparison",
        tags=("table", "comparison", "detailed"),
        layout="cards",
        accent=True,
    ),
    _template(
        SectionType.PRICING, "toggle",
        name="Toggle",
        description="Monthly/annual billing toggle with animated pricing cards",
        tags=("toggle", "animated", "savings"),
        layout="cards",
    ),
])

TESTIMONIALS_TEMPLATES = dict([
    _template(
        SectionType.TESTIMONIALS, "grid",
        name="Grid",
        description="Clean grid of testimonial cards with quotes and author info",
        tags=("grid", "cards", "clean"),
        layout="grid",
    ),
    _template(
        SectionType.TESTIMONIALS, "carousel",
        name="Carousel",
        description="One testimonial at a time with previous/next navigation",
        tags=("carousel", "focused", "avatar"),
        layout="centered",
        elements=(PreviewElement(type="text"), PreviewElement(type="avatar")),
    ),
    _template(
        SectionType.TESTIMONIALS, "quotes",
        name="Quotes",
        description="Stacked large quote blocks with prominent quotation marks",
        tags=("editorial", "quotes", "large"),
        layout="rows",
    ),
])

FAQ_TEMPLATES = dict([
    _template(
        SectionType.FAQ, "accordion",
        name="Accordion",
        description="Expandable FAQ items with smooth animation",
        tags=("accordion", "expandable", "clean"),
        layout="rows",
    ),
    _template(
        SectionType.FAQ, "two-column",
        name="Two Column",
        description="FAQ items in a two-column grid with every answer visible",
        tags=("grid", "scannable", "open"),
        layout="grid",
    ),
    _template(
        SectionType.FAQ, "tabs",
        name="Tabs",
        description="Questions as clickable tabs with the answer displayed below",
        tags=("tabs", "interactive", "compact"),
        layout="cards",
    ),
])

CTA_TEMPLATES = dict([
    _template(
        SectionType.CTA, "simple",
        name="Simple",
        description="Bold CTA section with headline and button",
        tags=("bold", "centered", "action"),
        layout="banner",
        accent=True,
    ),
    _template(
        SectionType.CTA, "banner",
        name="Banner",
        description="Compact horizontal banner with headline and button side-by-side",
        tags=("compact", "inline", "banner"),
        layout="banner",
        accent=True,
    ),
    _template(
        SectionType.CTA, "split",
        name="Split",
        description="Two-column CTA with content on one side and a visual on the other",
        tags=("split", "image", "visual"),
        layout="split-left",
        elements=HEADLINE_TEXT_BUTTON,
    ),
])

MENU_TEMPLATES = dict([
    _template(
        SectionType.MENU, "categorized",
        name="Categorized",
        description="Menu items organized by category with prices",
        tags=("categories", "prices", "restaurant"),
        layout="rows",
    ),
    _template(
        SectionType.MENU, "cards",
        name="Cards",
        description="Menu items as picture cards grouped by category",
        tags=("cards", "images", "restaurant"),
        layout="cards",
    ),
])

PORTFOLIO_TEMPLATES = dict([
    _template(
        SectionType.PORTFOLIO, "grid",
        name="Grid",
        description="Portfolio projects in a hover-reveal grid",
        tags=("grid", "projects", "hover-effect"),
        layout="grid",
    ),
    _template(
        SectionType.PORTFOLIO, "cards",
        name="Cards",
        description="Project cards with image, title, and description",
        tags=("cards", "projects", "descriptive"),
        layout="cards",
    ),
])

TEAM_TEMPLATES = dict([
    _template(
        SectionType.TEAM, "grid",
        name="Grid",
        description="Team member cards in a responsive grid",
        tags=("grid", "cards", "social-links"),
        layout="grid",
    ),
    _template(
        SectionType.TEAM, "cards",
        name="Cards",
        description="Larger profile cards with bios",
        tags=("cards", "bios", "profiles"),
        layout="cards",
    ),
])

GALLERY_TEMPLATES = dict([
    _template(
        SectionType.GALLERY, "grid",
        name="Grid",
        description="Image gallery grid with lightbox",
        tags=("grid", "images", "lightbox"),
        layout="grid",
    ),
    _template(
        SectionType.GALLERY, "masonry",
        name="Masonry",
        description="Staggered masonry wall of images",
        tags=("masonry", "images", "dynamic"),
        layout="cards",
    ),
])

CONTACT_TEMPLATES = dict([
    _template(
        SectionType.CONTACT, "form-left",
        name="Form Left",
        description="Contact form on left, contact info on right",
        tags=("form", "two-column", "contact-info"),
        layout="split-left",
        elements=(PreviewElement(type="headline"), PreviewElement(type="text")),
    ),
    _template(
        SectionType.CONTACT, "centered",
        name="Centered",
        description="Centered contact form with info below",
        tags=("form", "centered", "simple"),
        layout="centered",
        elements=(PreviewElement(type="headline"), PreviewElement(type="text")),
    ),
])

STATS_TEMPLATES = dict([
    _template(
        SectionType.STATS, "row",
        name="Row",
        description="Key metrics displayed in a responsive row",
        tags=("numbers", "metrics", "centered"),
        layout="grid",
    ),
    _template(
        SectionType.STATS, "cards",
        name="Cards",
        description="Metrics in individual highlighted cards",
        tags=("numbers", "cards", "highlighted"),
        layout="cards",
    ),
])

LOGOS_TEMPLATES = dict([
    _template(
        SectionType.LOGOS, "strip",
        name="Strip",
        description="Logo strip with hover effects",
        tags=("logos", "trust", "partners"),
        layout="grid",
    ),
    _template(
        SectionType.LOGOS, "grid",
        name="Grid",
        description="Logos arranged in a bordered grid",
        tags=("logos", "grid", "partners"),
        layout="cards",
    ),
])

ABOUT_TEMPLATES = dict([
    _template(
        SectionType.ABOUT, "text-left",
        name="Text Left",
        description="Image on left, text content on right",
        tags=("image", "text", "two-column"),
        layout="split-left",
        elements=(
            PreviewElement(type="headline"),
            PreviewElement(type="text"),
            PreviewElement(type="text"),
        ),
    ),
    _template(
        SectionType.ABOUT, "centered",
        name="Centered",
        description="Centered story block with headline and text",
        tags=("centered", "text", "story"),
        layout="centered",
        elements=(PreviewElement(type="headline"), PreviewElement(type="text")),
    ),
])

SERVICES_TEMPLATES = dict([
    _template(
        SectionType.SERVICES, "grid",
        name="Grid",
        description="Service cards in a responsive grid layout",
        tags=("grid", "cards", "hover-effect"),
        layout="grid",
    ),
    _template(
        SectionType.SERVICES, "cards",
        name="Cards",
        description="Detailed service cards with pricing and links",
        tags=("cards", "pricing", "detailed"),
        layout="cards",
    ),
])


# (sub-registry, default template id) per section type
SUB_REGISTRIES: Dict[SectionType, Tuple[Dict[str, TemplateDefinition], str]] = {
    SectionType.HERO: (HERO_TEMPLATES, "hero-centered"),
    SectionType.FEATURES: (FEATURES_TEMPLATES, "features-grid"),
    SectionType.PRICING: (PRICING_TEMPLATES, "pricing-simple"),
    SectionType.TESTIMONIALS: (TESTIMONIALS_TEMPLATES, "testimonials-grid"),
    SectionType.FAQ: (FAQ_TEMPLATES, "faq-accordion"),
    SectionType.CTA: (CTA_TEMPLATES, "cta-simple"),
    SectionType.MENU: (MENU_TEMPLATES, "menu-categorized"),
    SectionType.PORTFOLIO: (PORTFOLIO_TEMPLATES, "portfolio-grid"),
    SectionType.TEAM: (TEAM_TEMPLATES, "team-grid"),
    SectionType.GALLERY: (GALLERY_TEMPLATES, "gallery-grid"),
    SectionType.CONTACT: (CONTACT_TEMPLATES, "contact-form-left"),
    SectionType.STATS: (STATS_TEMPLATES, "stats-row"),
    SectionType.LOGOS: (LOGOS_TEMPLATES, "logos-strip"),
    SectionType.ABOUT: (ABOUT_TEMPLATES, "about-text-left"),
    SectionType.SERVICES: (SERVICES_TEMPLATES, "services-grid"),
}
