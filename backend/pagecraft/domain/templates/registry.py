from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from pagecraft.domain.exceptions import UnknownTemplateError
from pagecraft.domain.sections.types import SectionType, assert_exhaustive, coerce_type
from .catalog import SUB_REGISTRIES
from .definitions import (
    TemplateDefinition,
    TemplateMetadata,
    TemplatePreview,
    section_type_from_template_id,
)


class TemplateRegistry:
    """
    Read-only lookup table of every template.

    Built once from the per-type sub-registries; never mutated afterwards.
    """

    __slots__ = ("_templates", "_defaults", "_by_type")

    def __init__(
        self,
        templates: Mapping[str, TemplateDefinition],
        defaults: Mapping[SectionType, str],
    ):
        by_type: Dict[SectionType, List[TemplateDefinition]] = {t: [] for t in SectionType}
        for definition in templates.values():
            by_type[definition.section_type].append(definition)

        self._templates = MappingProxyType(dict(templates))
        self._defaults = MappingProxyType(dict(defaults))
        self._by_type = MappingProxyType({k: tuple(v) for k, v in by_type.items()})

    def get(self, template_id: str) -> Optional[TemplateMetadata]:
        definition = self._templates.get(template_id)
        return definition.metadata if definition else None

    def definition(self, template_id: str) -> TemplateDefinition:
        try:
            return self._templates[template_id]
        except (KeyError, TypeError):
            raise UnknownTemplateError(template_id) from None

    def list_for(self, section_type) -> List[TemplateMetadata]:
        return [d.metadata for d in self._by_type[coerce_type(section_type)]]

    def default_id_for(self, section_type) -> str:
        return self._defaults[coerce_type(section_type)]

    def exists(self, template_id: str) -> bool:
        return isinstance(template_id, str) and template_id in self._templates

    def all_ids(self) -> Tuple[str, ...]:
        return tuple(self._templates)

    def preview_for(self, template_id: str) -> TemplatePreview:
        return self.definition(template_id).preview

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id) -> bool:
        return self.exists(template_id)


def build_registry(sub_registries) -> TemplateRegistry:
    """
    Merge per-type sub-registries into one registry.

    Fails loudly on duplicate ids, on an id whose prefix disagrees with its
    declared section type, on a type with no templates, and on a default id
    that does not exist.
    """
    assert_exhaustive(sub_registries, label="template sub-registries")

    templates: Dict[str, TemplateDefinition] = {}
    defaults: Dict[SectionType, str] = {}

    for section_type, (sub_registry, default_id) in sub_registries.items():
        section_type = coerce_type(section_type)

        if not sub_registry:
            raise RuntimeError(f"No templates registered for section type {section_type.value!r}")

        for template_id, definition in sub_registry.items():
            if template_id in templates:
                raise RuntimeError(f"Duplicate template id {template_id!r}")
            if template_id != definition.id:
                raise RuntimeError(f"Template registered as {template_id!r} declares id {definition.id!r}")
            if definition.section_type != section_type:
                raise RuntimeError(
                    f"Template {template_id!r} declares type {definition.section_type.value!r} "
                    f"but is registered under {section_type.value!r}"
                )
            if section_type_from_template_id(template_id) != section_type.value:
                raise RuntimeError(f"Template id {template_id!r} is not namespaced by {section_type.value!r}")

            templates[template_id] = definition

        if default_id not in sub_registry:
            raise RuntimeError(f"Default template {default_id!r} for {section_type.value!r} does not exist")

        defaults[section_type] = default_id

    return TemplateRegistry(templates, defaults)


REGISTRY = build_registry(SUB_REGISTRIES)


# -------------------------------------------------
# Module-level accessors
# -------------------------------------------------

def get(template_id: str) -> Optional[TemplateMetadata]:
    return REGISTRY.get(template_id)


def get_definition(template_id: str) -> TemplateDefinition:
    return REGISTRY.definition(template_id)


def list_for(section_type) -> List[TemplateMetadata]:
    return REGISTRY.list_for(section_type)


def default_id_for(section_type) -> str:
    return REGISTRY.default_id_for(section_type)


def exists(template_id: str) -> bool:
    return REGISTRY.exists(template_id)


def all_ids() -> Tuple[str, ...]:
    return REGISTRY.all_ids()


def preview_for(template_id: str) -> TemplatePreview:
    return REGISTRY.preview_for(template_id)


def section_type_of(template_id: str) -> SectionType:
    """Declared section type of a registered template."""
    return REGISTRY.definition(template_id).section_type
