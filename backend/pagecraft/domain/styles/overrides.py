import copy
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pagecraft.domain.templates.selectors import in_vocabulary, is_valid_selector
from .classes import merge_classes

SECTION_KEY = "section"
ELEMENTS_KEY = "elements"

CSS_DECLARATION_CHARS = (";", "{", "}")


@dataclass
class StyleValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"valid": self.valid, "errors": list(self.errors), "warnings": list(self.warnings)}


def empty() -> dict:
    return {}


def get_element(overrides: Optional[dict], selector: str) -> Optional[str]:
    if not overrides:
        return None
    return (overrides.get(ELEMENTS_KEY) or {}).get(selector)


def has_element(overrides: Optional[dict], selector: str) -> bool:
    return bool(get_element(overrides, selector))


def has_any(overrides: Optional[dict]) -> bool:
    if not overrides:
        return False
    section = overrides.get(SECTION_KEY)
    if isinstance(section, str) and section.strip():
        return True
    return any(v for v in (overrides.get(ELEMENTS_KEY) or {}).values())


def apply_element(base_classes: Optional[str], selector: str, overrides: Optional[dict]) -> str:
    """Template classes for an element with its override merged on top."""
    return merge_classes(base_classes, get_element(overrides, selector))


def apply_section(base_classes: Optional[str], overrides: Optional[dict]) -> str:
    section = overrides.get(SECTION_KEY) if overrides else None
    return merge_classes(base_classes, section)


def _merge_slot(existing: Optional[str], incoming: Optional[str]) -> Optional[str]:
    if incoming is None:
        return existing
    if not incoming.strip():
        return None  # an empty value clears the slot
    return merge_classes(existing, incoming) or None


def merge(existing: Optional[dict], incoming: Optional[dict]) -> dict:
    """
    Layer incoming overrides over existing ones.

    Both sides must already be valid. Classes for the same slot are merged
    with conflict resolution, so "text-4xl" followed by "text-6xl" keeps only
    "text-6xl". An incoming empty string removes the slot. Neither argument
    is mutated.
    """
    existing = copy.deepcopy(existing) if existing else {}
    incoming = incoming or {}

    result: dict = {}

    section = _merge_slot(existing.get(SECTION_KEY), incoming.get(SECTION_KEY))
    if section:
        result[SECTION_KEY] = section

    elements: Dict[str, str] = dict(existing.get(ELEMENTS_KEY) or {})
    for selector, classes in (incoming.get(ELEMENTS_KEY) or {}).items():
        merged = _merge_slot(elements.get(selector), classes)
        if merged:
            elements[selector] = merged
        else:
            elements.pop(selector, None)

    if elements:
        result[ELEMENTS_KEY] = elements

    return result


def _looks_like_css(value: str) -> bool:
    return any(ch in value for ch in CSS_DECLARATION_CHARS)


def validate(candidate, section_type=None) -> StyleValidationResult:
    """
    Check a proposed style patch.

    Errors make the patch unusable. Selectors outside the type's vocabulary
    are reported as warnings so the caller can decide; they are not dropped.
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not isinstance(candidate, dict):
        return StyleValidationResult(False, ["styleOverrides must be an object"])

    unknown_keys = set(candidate) - {SECTION_KEY, ELEMENTS_KEY}
    for key in sorted(unknown_keys):
        errors.append(f"unknown key {key!r}; expected 'section' or 'elements'")

    section = candidate.get(SECTION_KEY)
    elements = candidate.get(ELEMENTS_KEY)

    has_section = False
    if section is not None:
        if not isinstance(section, str):
            errors.append("section must be a string of utility classes")
        elif _looks_like_css(section):
            errors.append("section must contain utility classes, not CSS declarations")
        else:
            # an explicit empty string clears the slot
            has_section = True

    has_elements = False
    if elements is not None:
        if not isinstance(elements, dict):
            errors.append("elements must be an object mapping selectors to classes")
        else:
            has_elements = bool(elements)
            for selector, classes in elements.items():
                if not isinstance(selector, str) or not is_valid_selector(selector):
                    errors.append(f"invalid selector {selector!r}")
                    continue

                if not isinstance(classes, str):
                    errors.append(f"elements[{selector!r}] must be a string of utility classes")
                    continue

                if _looks_like_css(classes):
                    errors.append(f"elements[{selector!r}] must contain utility classes, not CSS declarations")
                    continue

                if section_type is not None and not in_vocabulary(section_type, selector):
                    warnings.append(f"selector {selector!r} is not a known element of {str(section_type)!r} sections")

    if not errors and not has_section and not has_elements:
        errors.append("style patch is empty; provide 'section' or at least one element")

    return StyleValidationResult(not errors, errors, warnings)
