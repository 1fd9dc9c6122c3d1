"""
Content shapes for every section type.

Field names are snake_case in Python and camelCase on the wire
(stored documents, prompts, AI responses).
Top-level content is closed: unknown keys are reported.
Nested records are open: unknown keys are stripped.
"""

from types import MappingProxyType
from typing import Dict, List, Literal, Optional, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .types import SectionType, assert_exhaustive


class ContentItem(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SectionContent(ContentItem):
    model_config = ConfigDict(extra="forbid")


# -------------------------------------------------
# Shared records
# -------------------------------------------------

class Link(ContentItem):
    text: str
    url: str


class HeroLink(ContentItem):
    text: str = Field(description="Button text, 2-4 words")
    url: str = "#"


# -------------------------------------------------
# Section content
# -------------------------------------------------

class HeroContent(SectionContent):
    headline: str = Field(description="Main headline, 3-8 words")
    subheadline: str = Field(description="Supporting text, 1-2 sentences")
    cta: HeroLink
    secondary_cta: Optional[Link] = None
    background_image: Optional[str] = None
    layout: Literal["centered", "split-left", "split-right"] = "centered"


class Feature(ContentItem):
    icon: str = Field(description="Icon name, e.g., 'Rocket01Icon'")
    title: str
    description: str


class FeaturesContent(SectionContent):
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    features: List[Feature] = Field(min_length=3, max_length=6)
    layout: Literal["grid", "alternating", "cards"] = "grid"


class PricingTier(ContentItem):
    name: str
    price: str = Field(description="e.g., '$29/mo' or 'Custom'")
    description: str
    features: List[str]
    cta: Link
    highlighted: bool = False


class PricingContent(SectionContent):
    headline: str = "Simple, transparent pricing"
    subheadline: Optional[str] = None
    tiers: List[PricingTier] = Field(min_length=1, max_length=4)


class Testimonial(ContentItem):
    quote: str
    author: str
    role: Optional[str] = None
    company: Optional[str] = None
    avatar: Optional[str] = None


class TestimonialsContent(SectionContent):
    headline: Optional[str] = None
    testimonials: List[Testimonial] = Field(min_length=1, max_length=6)
    layout: Literal["carousel", "grid", "featured"] = "grid"


class FaqItem(ContentItem):
    question: str
    answer: str


class FaqContent(SectionContent):
    headline: str = "Frequently Asked Questions"
    items: List[FaqItem] = Field(min_length=3, max_length=10)


class CtaContent(SectionContent):
    headline: str
    subheadline: Optional[str] = None
    cta: Link
    style: Literal["simple", "gradient", "image-bg"] = "simple"


class MenuItem(ContentItem):
    name: str
    description: Optional[str] = None
    price: str
    image: Optional[str] = None
    tags: Optional[List[str]] = Field(default=None, description="e.g. vegetarian, spicy")


class MenuCategory(ContentItem):
    name: str
    items: List[MenuItem]


class MenuContent(SectionContent):
    headline: str = "Our Menu"
    categories: List[MenuCategory]


class Project(ContentItem):
    title: str
    description: str
    image: str
    category: Optional[str] = None
    link: Optional[str] = None


class PortfolioContent(SectionContent):
    headline: str = "Our Work"
    projects: List[Project] = Field(min_length=3, max_length=12)
    layout: Literal["grid", "masonry", "carousel"] = "grid"


class SocialLinks(ContentItem):
    twitter: Optional[str] = None
    linkedin: Optional[str] = None


class TeamMember(ContentItem):
    name: str
    role: str
    bio: Optional[str] = None
    image: Optional[str] = None
    social: Optional[SocialLinks] = None


class TeamContent(SectionContent):
    headline: str = "Meet Our Team"
    members: List[TeamMember] = Field(min_length=2, max_length=12)


class GalleryImage(ContentItem):
    src: str
    alt: str
    caption: Optional[str] = None


class GalleryContent(SectionContent):
    headline: Optional[str] = None
    images: List[GalleryImage] = Field(min_length=4, max_length=20)
    layout: Literal["grid", "masonry", "carousel"] = "grid"


class ContactInfo(ContentItem):
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


FormField = Literal["name", "email", "phone", "company", "message"]


class ContactContent(SectionContent):
    headline: str = "Get in Touch"
    subheadline: Optional[str] = None
    show_form: bool = True
    form_fields: List[FormField] = Field(default_factory=lambda: ["name", "email", "message"])
    contact_info: Optional[ContactInfo] = None
    show_map: bool = False


class Stat(ContentItem):
    value: str = Field(description="e.g., '10K+', '99%', '$2M'")
    label: str


class StatsContent(SectionContent):
    headline: Optional[str] = None
    stats: List[Stat] = Field(min_length=2, max_length=6)


class Logo(ContentItem):
    src: str
    alt: str
    url: Optional[str] = None


class LogosContent(SectionContent):
    headline: str = "Trusted by"
    logos: List[Logo] = Field(min_length=3, max_length=12)


class AboutContent(SectionContent):
    headline: str = "About Us"
    content: str = Field(description="Main about text, 2-4 paragraphs")
    image: Optional[str] = None
    layout: Literal["text-left", "text-right", "centered"] = "text-left"


class Service(ContentItem):
    icon: Optional[str] = None
    title: str
    description: str
    price: Optional[str] = None
    link: Optional[str] = None


class ServicesContent(SectionContent):
    headline: str = "Our Services"
    subheadline: Optional[str] = None
    services: List[Service] = Field(min_length=3, max_length=8)
    layout: Literal["grid", "list", "cards"] = "grid"


CONTENT_SCHEMAS: "MappingProxyType[SectionType, Type[SectionContent]]" = MappingProxyType({
    SectionType.HERO: HeroContent,
    SectionType.FEATURES: FeaturesContent,
    SectionType.PRICING: PricingContent,
    SectionType.TESTIMONIALS: TestimonialsContent,
    SectionType.FAQ: FaqContent,
    SectionType.CTA: CtaContent,
    SectionType.MENU: MenuContent,
    SectionType.PORTFOLIO: PortfolioContent,
    SectionType.TEAM: TeamContent,
    SectionType.GALLERY: GalleryContent,
    SectionType.CONTACT: ContactContent,
    SectionType.STATS: StatsContent,
    SectionType.LOGOS: LogosContent,
    SectionType.ABOUT: AboutContent,
    SectionType.SERVICES: ServicesContent,
})

assert_exhaustive(CONTENT_SCHEMAS, label="CONTENT_SCHEMAS")


# -------------------------------------------------
# Page-level records
# -------------------------------------------------

class Theme(ContentItem):
    model_config = ConfigDict(extra="forbid")

    primary_color: str = "#6366f1"
    secondary_color: str = "#8b5cf6"
    accent_color: str = "#f59e0b"
    background_color: str = "#ffffff"
    text_color: str = "#1f2937"
    font_family: str = "Inter"
    border_radius: Optional[str] = None


class BusinessContext(ContentItem):
    name: str
    description: str
    industry: Optional[str] = None
    target_audience: Optional[str] = None
    unique_value: Optional[str] = None


def theme_defaults() -> Dict[str, str]:
    return Theme().model_dump(by_alias=True, exclude_none=True)
