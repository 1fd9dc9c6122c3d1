from enum import Enum
from typing import List


class SectionType(str, Enum):
    """Closed set of section kinds a landing page can contain."""

    HERO = "hero"
    FEATURES = "features"
    PRICING = "pricing"
    TESTIMONIALS = "testimonials"
    FAQ = "faq"
    CTA = "cta"
    MENU = "menu"
    PORTFOLIO = "portfolio"
    TEAM = "team"
    GALLERY = "gallery"
    CONTACT = "contact"
    STATS = "stats"
    LOGOS = "logos"
    ABOUT = "about"
    SERVICES = "services"

    def __str__(self) -> str:
        return self.value


def is_valid_type(name) -> bool:
    return isinstance(name, str) and name in SectionType._value2member_map_


def section_types() -> List[SectionType]:
    return list(SectionType)


def coerce_type(name) -> SectionType:
    """
    Resolve a section type name.

    Raises ValueError for names outside the closed set.
    """
    if isinstance(name, SectionType):
        return name
    if not is_valid_type(name):
        raise ValueError(f"Unknown section type: {name!r}")
    return SectionType(name)


def assert_exhaustive(table, *, label: str) -> None:
    """
    Guards per-type tables at import time.
    Every SectionType must have exactly one entry, and nothing else may.
    """
    keys = {str(k) for k in table}
    missing = [t for t in SectionType if t.value not in keys]
    extra = [k for k in keys if not is_valid_type(k)]

    if missing or extra or len(keys) != len(table):
        raise RuntimeError(
            f"{label} is not exhaustive over SectionType "
            f"(missing={sorted(m.value for m in missing)}, extra={sorted(map(str, extra))})"
        )
