"""
Element selector vocabulary and grammar.

A selector addresses an element a template renders:

    selector := segment ("." segment)*
    segment  := ident ("[" (index | "*") "]")?
    ident    := [A-Za-z_][A-Za-z0-9_-]*

"[*]" in the vocabulary matches any concrete index.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Optional, Tuple, Union

from pagecraft.domain.sections.types import SectionType, assert_exhaustive, coerce_type

WILDCARD = "*"

_SEGMENT = re.compile(r"([A-Za-z_][A-Za-z0-9_-]*)(?:\[(\d+|\*)\])?")


class SelectorSyntaxError(ValueError):
    pass


@dataclass(frozen=True)
class Segment:
    name: str
    index: Optional[Union[int, str]] = None

    def __str__(self) -> str:
        if self.index is None:
            return self.name
        return f"{self.name}[{self.index}]"


@lru_cache(maxsize=1024)
def parse_selector(selector: str) -> Tuple[Segment, ...]:
    if not isinstance(selector, str) or not selector:
        raise SelectorSyntaxError("selector must be a non-empty string")

    segments = []
    for raw in selector.split("."):
        match = _SEGMENT.fullmatch(raw)
        if not match:
            raise SelectorSyntaxError(f"invalid selector segment {raw!r} in {selector!r}")

        name, index = match.groups()
        if index is not None and index != WILDCARD:
            index = int(index)
        segments.append(Segment(name=name, index=index))

    return tuple(segments)


def is_valid_selector(selector: str) -> bool:
    try:
        parse_selector(selector)
    except SelectorSyntaxError:
        return False
    return True


def _segment_matches(candidate: Segment, pattern: Segment) -> bool:
    if candidate.name != pattern.name:
        return False
    if pattern.index == WILDCARD:
        return candidate.index is not None
    return candidate.index == pattern.index


def selector_matches(selector: str, pattern: str) -> bool:
    candidate = parse_selector(selector)
    expected = parse_selector(pattern)

    if len(candidate) != len(expected):
        return False

    return all(_segment_matches(c, p) for c, p in zip(candidate, expected))


ELEMENT_SELECTORS = MappingProxyType({
    SectionType.HERO: (
        "headline",
        "subheadline",
        "cta",
        "cta.button",
        "secondaryCta",
        "secondaryCta.button",
        "container",
        "background",
    ),
    SectionType.FEATURES: (
        "headline",
        "subheadline",
        "features",
        "features[*].icon",
        "features[*].title",
        "features[*].description",
        "features[*].card",
    ),
    SectionType.PRICING: (
        "headline",
        "subheadline",
        "tiers",
        "tiers[*].card",
        "tiers[*].name",
        "tiers[*].price",
        "tiers[*].description",
        "tiers[*].features",
        "tiers[*].cta",
    ),
    SectionType.TESTIMONIALS: (
        "headline",
        "testimonials",
        "testimonials[*].card",
        "testimonials[*].quote",
        "testimonials[*].author",
        "testimonials[*].role",
        "testimonials[*].avatar",
    ),
    SectionType.FAQ: ("headline", "items", "items[*].question", "items[*].answer"),
    SectionType.CTA: ("headline", "subheadline", "cta", "cta.button", "container"),
    SectionType.MENU: (
        "headline",
        "categories",
        "categories[*].name",
        "categories[*].items",
        "categories[*].items[*].name",
        "categories[*].items[*].price",
    ),
    SectionType.PORTFOLIO: (
        "headline",
        "projects",
        "projects[*].card",
        "projects[*].title",
        "projects[*].description",
        "projects[*].image",
    ),
    SectionType.TEAM: (
        "headline",
        "members",
        "members[*].card",
        "members[*].name",
        "members[*].role",
        "members[*].bio",
        "members[*].image",
    ),
    SectionType.GALLERY: ("headline", "images", "images[*]", "images[*].caption"),
    SectionType.CONTACT: (
        "headline",
        "subheadline",
        "form",
        "form.fields",
        "form.submit",
        "contactInfo",
        "contactInfo.email",
        "contactInfo.phone",
        "contactInfo.address",
    ),
    SectionType.STATS: ("headline", "stats", "stats[*].value", "stats[*].label"),
    SectionType.LOGOS: ("headline", "logos", "logos[*]"),
    SectionType.ABOUT: ("headline", "content", "image", "container"),
    SectionType.SERVICES: (
        "headline",
        "subheadline",
        "services",
        "services[*].card",
        "services[*].icon",
        "services[*].title",
        "services[*].description",
        "services[*].price",
    ),
})

assert_exhaustive(ELEMENT_SELECTORS, label="ELEMENT_SELECTORS")

for _vocabulary in ELEMENT_SELECTORS.values():
    for _selector in _vocabulary:
        parse_selector(_selector)


def selectors_for(section_type) -> Tuple[str, ...]:
    return ELEMENT_SELECTORS[coerce_type(section_type)]


def in_vocabulary(section_type, selector: str) -> bool:
    """True when the selector parses and matches a declared selector of the type."""
    if not is_valid_selector(selector):
        return False
    return any(selector_matches(selector, pattern) for pattern in selectors_for(section_type))
