import pytest

from pagecraft.domain.exceptions import UnknownTemplateError
from pagecraft.domain.sections.types import SectionType
from pagecraft.domain.templates import registry as templates
from pagecraft.domain.templates.catalog import HERO_TEMPLATES, SUB_REGISTRIES
from pagecraft.domain.templates.definitions import (
    TemplateDefinition,
    TemplateMetadata,
    TemplatePreview,
    create_template_id,
    section_type_from_template_id,
)


def _definition(template_id, section_type):
    return TemplateDefinition(
        metadata=TemplateMetadata(
            id=template_id,
            section_type=section_type,
            name=template_id,
            description="test",
        ),
        preview=TemplatePreview(layout="centered"),
    )


def test_every_type_has_an_existing_default():
    for section_type in SectionType:
        default_id = templates.default_id_for(section_type)
        metadata = templates.get(default_id)

        assert metadata is not None
        assert metadata.section_type is section_type


def test_lookup_by_id_and_type():
    metadata = templates.get("pricing-comparison")

    assert metadata.section_type is SectionType.PRICING
    assert templates.exists("pricing-comparison")
    assert "pricing-comparison" in templates.REGISTRY
    assert metadata in templates.list_for("pricing")
    assert {m.id for m in templates.list_for(SectionType.HERO)} == {
        "hero-centered", "hero-gradient", "hero-split", "hero-minimal", "hero-video",
    }


def test_unknown_ids():
    assert templates.get("hero-nope") is None
    assert not templates.exists("hero-nope")
    assert not templates.exists(None)

    with pytest.raises(UnknownTemplateError):
        templates.get_definition("hero-nope")


def test_ids_are_namespaced_by_type():
    for template_id in templates.all_ids():
        assert section_type_from_template_id(template_id) == templates.section_type_of(template_id).value


def test_section_type_from_template_id():
    assert section_type_from_template_id("hero-centered") == "hero"
    assert section_type_from_template_id("contact-form-left") == "contact"
    assert section_type_from_template_id("hero") is None
    assert section_type_from_template_id("") is None


def test_create_template_id():
    assert create_template_id(SectionType.FAQ, "tabs") == "faq-tabs"
    assert create_template_id("cta", "banner") == "cta-banner"


def test_preview_is_available_for_every_template():
    for template_id in templates.all_ids():
        assert templates.preview_for(template_id).layout


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        templates.REGISTRY._templates["hero-new"] = _definition("hero-new", SectionType.HERO)


def test_metadata_is_frozen():
    metadata = templates.get("hero-centered")
    with pytest.raises(Exception):
        metadata.section_type = SectionType.CTA


def test_build_rejects_duplicate_ids():
    subs = dict(SUB_REGISTRIES)
    subs[SectionType.CTA] = ({"hero-centered": HERO_TEMPLATES["hero-centered"]}, "hero-centered")

    with pytest.raises(RuntimeError):
        templates.build_registry(subs)


def test_build_rejects_type_prefix_mismatch():
    subs = dict(SUB_REGISTRIES)
    subs[SectionType.CTA] = ({"hero-banner": _definition("hero-banner", SectionType.CTA)}, "hero-banner")

    with pytest.raises(RuntimeError):
        templates.build_registry(subs)


def test_build_rejects_missing_default():
    subs = dict(SUB_REGISTRIES)
    subs[SectionType.HERO] = (HERO_TEMPLATES, "hero-missing")

    with pytest.raises(RuntimeError):
        templates.build_registry(subs)


def test_build_rejects_empty_and_missing_types():
    subs = dict(SUB_REGISTRIES)
    subs[SectionType.FAQ] = ({}, "faq-accordion")
    with pytest.raises(RuntimeError):
        templates.build_registry(subs)

    subs = dict(SUB_REGISTRIES)
    del subs[SectionType.FAQ]
    with pytest.raises(RuntimeError):
        templates.build_registry(subs)
