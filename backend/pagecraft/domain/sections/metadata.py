from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Literal, Tuple

from .types import SectionType, assert_exhaustive


@dataclass(frozen=True)
class SectionMetadata:
    display_name: str
    description: str
    icon: str
    industries: Tuple[str, ...]  # "all" means universal
    position: Literal["top", "middle", "bottom", "any"]


SECTION_METADATA = MappingProxyType({
    SectionType.HERO: SectionMetadata(
        display_name="Hero",
        description="The main banner with headline, subheadline, and call-to-action",
        icon="Home01Icon",
        industries=("all",),
        position="top",
    ),
    SectionType.FEATURES: SectionMetadata(
        display_name="Features",
        description="Grid or list of product/service features with icons",
        icon="GridIcon",
        industries=("saas", "agency", "ecommerce", "startup"),
        position="middle",
    ),
    SectionType.PRICING: SectionMetadata(
        display_name="Pricing",
        description="Pricing tiers with features comparison",
        icon="DollarCircleIcon",
        industries=("saas", "agency", "freelancer"),
        position="middle",
    ),
    SectionType.TESTIMONIALS: SectionMetadata(
        display_name="Testimonials",
        description="Customer quotes and social proof",
        icon="QuoteUpIcon",
        industries=("all",),
        position="middle",
    ),
    SectionType.FAQ: SectionMetadata(
        display_name="FAQ",
        description="Frequently asked questions with expandable answers",
        icon="HelpCircleIcon",
        industries=("all",),
        position="bottom",
    ),
    SectionType.CTA: SectionMetadata(
        display_name="Call to Action",
        description="Final conversion section with prominent button",
        icon="CursorClick01Icon",
        industries=("all",),
        position="bottom",
    ),
    SectionType.MENU: SectionMetadata(
        display_name="Menu",
        description="Food/drink menu with categories and prices",
        icon="Restaurant01Icon",
        industries=("restaurant", "cafe", "bar", "bakery"),
        position="middle",
    ),
    SectionType.PORTFOLIO: SectionMetadata(
        display_name="Portfolio",
        description="Showcase of past work or projects",
        icon="Image01Icon",
        industries=("agency", "freelancer", "photographer", "designer"),
        position="middle",
    ),
    SectionType.TEAM: SectionMetadata(
        display_name="Team",
        description="Team member profiles with photos and roles",
        icon="UserGroup01Icon",
        industries=("agency", "startup", "consulting", "law"),
        position="middle",
    ),
    SectionType.GALLERY: SectionMetadata(
        display_name="Gallery",
        description="Image gallery or portfolio grid",
        icon="ImageGalleryIcon",
        industries=("restaurant", "photographer", "real-estate", "event"),
        position="middle",
    ),
    SectionType.CONTACT: SectionMetadata(
        display_name="Contact",
        description="Contact form and business information",
        icon="Mail01Icon",
        industries=("all",),
        position="bottom",
    ),
    SectionType.STATS: SectionMetadata(
        display_name="Stats",
        description="Key metrics and numbers that build credibility",
        icon="ChartLineData01Icon",
        industries=("saas", "agency", "startup", "consulting"),
        position="middle",
    ),
    SectionType.LOGOS: SectionMetadata(
        display_name="Client Logos",
        description="Trusted by / As seen in logo strip",
        icon="Building02Icon",
        industries=("saas", "agency", "startup", "consulting"),
        position="middle",
    ),
    SectionType.ABOUT: SectionMetadata(
        display_name="About",
        description="Company story, mission, or background",
        icon="InformationCircleIcon",
        industries=("all",),
        position="middle",
    ),
    SectionType.SERVICES: SectionMetadata(
        display_name="Services",
        description="List of services offered with descriptions",
        icon="Settings01Icon",
        industries=("agency", "freelancer", "consulting", "law", "medical"),
        position="middle",
    ),
})

assert_exhaustive(SECTION_METADATA, label="SECTION_METADATA")


_S = SectionType

# Suggested section sequences per industry
INDUSTRY_PRESETS = MappingProxyType({
    "saas": (_S.HERO, _S.LOGOS, _S.FEATURES, _S.STATS, _S.PRICING, _S.TESTIMONIALS, _S.FAQ, _S.CTA),
    "agency": (_S.HERO, _S.SERVICES, _S.PORTFOLIO, _S.TEAM, _S.TESTIMONIALS, _S.STATS, _S.CONTACT),
    "restaurant": (_S.HERO, _S.ABOUT, _S.MENU, _S.GALLERY, _S.TESTIMONIALS, _S.CONTACT),
    "ecommerce": (_S.HERO, _S.FEATURES, _S.STATS, _S.TESTIMONIALS, _S.FAQ, _S.CTA),
    "freelancer": (_S.HERO, _S.ABOUT, _S.SERVICES, _S.PORTFOLIO, _S.TESTIMONIALS, _S.PRICING, _S.CONTACT),
    "startup": (_S.HERO, _S.FEATURES, _S.STATS, _S.TEAM, _S.TESTIMONIALS, _S.PRICING, _S.CTA),
    "consulting": (_S.HERO, _S.ABOUT, _S.SERVICES, _S.TEAM, _S.TESTIMONIALS, _S.STATS, _S.CONTACT),
    "photographer": (_S.HERO, _S.ABOUT, _S.PORTFOLIO, _S.GALLERY, _S.TESTIMONIALS, _S.CONTACT),
    "real-estate": (_S.HERO, _S.FEATURES, _S.GALLERY, _S.TESTIMONIALS, _S.STATS, _S.CONTACT),
    "medical": (_S.HERO, _S.ABOUT, _S.SERVICES, _S.TEAM, _S.TESTIMONIALS, _S.FAQ, _S.CONTACT),
    "law": (_S.HERO, _S.ABOUT, _S.SERVICES, _S.TEAM, _S.TESTIMONIALS, _S.CONTACT),
    "event": (_S.HERO, _S.ABOUT, _S.GALLERY, _S.TESTIMONIALS, _S.FAQ, _S.CONTACT),
})


def sections_for_industry(industry: str) -> List[SectionType]:
    """Preset for the industry, or every universal section type."""
    preset = INDUSTRY_PRESETS.get((industry or "").strip().lower())
    if preset:
        return list(preset)

    return [
        section_type
        for section_type, meta in SECTION_METADATA.items()
        if "all" in meta.industries
    ]


def display_name(section_type: SectionType) -> str:
    meta = SECTION_METADATA.get(section_type)
    return meta.display_name if meta else str(section_type)
