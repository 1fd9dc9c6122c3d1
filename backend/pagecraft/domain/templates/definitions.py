from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pagecraft.domain.sections.types import SectionType


class _Frozen(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TemplateMetadata(_Frozen):
    id: str  # e.g. "hero-centered"
    section_type: SectionType
    name: str
    description: str
    tags: Tuple[str, ...] = ()
    thumbnail: Optional[str] = None


PreviewLayout = Literal[
    "centered",
    "split-left",
    "split-right",
    "grid",
    "cards",
    "rows",
    "banner",
    "alternating",
    "accordion",
    "carousel",
    "masonry",
    "comparison",
    "minimal",
]


class PreviewElement(_Frozen):
    type: Literal["headline", "text", "button", "image", "card", "icon", "avatar", "badge"]
    position: Optional[str] = None
    size: Optional[Literal["sm", "md", "lg"]] = None


class TemplatePreview(_Frozen):
    """Outline the template picker paints as a thumbnail."""

    layout: PreviewLayout
    elements: Tuple[PreviewElement, ...] = ()
    accent: bool = False


class TemplateDefinition(_Frozen):
    metadata: TemplateMetadata
    preview: TemplatePreview

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def section_type(self) -> SectionType:
        return self.metadata.section_type


def create_template_id(section_type, variant: str) -> str:
    return f"{SectionType(section_type).value}-{variant}"


def section_type_from_template_id(template_id: str) -> Optional[str]:
    """
    First hyphen-delimited segment of a template id.

    "hero-centered" -> "hero"; ids without a hyphen yield None.
    The segment is not checked against SectionType.
    """
    if not isinstance(template_id, str):
        return None

    parts = template_id.split("-")
    if len(parts) < 2 or not parts[0]:
        return None

    return parts[0]
