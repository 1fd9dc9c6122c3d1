import copy

import pytest

from pagecraft.application.sections.create_section import build_section_document
from pagecraft.application.sections.select_variant import apply_variant
from pagecraft.application.sections.update_section import apply_section_update
from pagecraft.application.sections.update_style_overrides import apply_style_patch
from pagecraft.domain.exceptions import (
    InvariantViolation,
    SchemaValidationError,
    TemplateTypeMismatch,
)
from pagecraft.domain.invariants.page import assert_page, assert_section_orders
from pagecraft.domain.invariants.section import assert_section

from section_samples import HERO, section_document


def test_build_section_document_defaults():
    document = build_section_document(page_id="p1", section_type="faq", content={
        "items": [{"question": f"Q{n}?", "answer": "A."} for n in range(3)],
    })

    assert document["template_id"] == "faq-accordion"
    assert document["content"]["headline"] == "Frequently Asked Questions"
    assert document["variants"] is None
    assert document["selected_variant"] is None
    assert document["style_overrides"] is None
    assert_section(document)


def test_build_section_document_with_variants():
    document = build_section_document(
        page_id="p1",
        section_type="hero",
        content=HERO,
        variants=[HERO, dict(HERO, headline="Alt")],
        style_overrides={"section": "py-24"},
    )

    assert document["selected_variant"] is None
    assert document["variants"][1]["layout"] == "centered"
    assert document["style_overrides"] == {"section": "py-24"}


def test_build_section_document_template_must_match_type():
    with pytest.raises(TemplateTypeMismatch):
        build_section_document(page_id="p1", section_type="hero", content=HERO, template_id="cta-simple")


def test_apply_section_update_reports_changed_fields():
    section = section_document("hero")

    next_section, changed = apply_section_update(section, {
        "content": dict(HERO, headline="New"),
        "is_visible": True,
    })

    assert changed == ["content"]
    assert next_section["content"]["headline"] == "New"
    assert section["content"]["headline"] == HERO["headline"]


def test_replacing_variants_drops_the_selection():
    variants = [HERO, dict(HERO, headline="B"), dict(HERO, headline="C")]
    section = section_document("hero", content=variants[2], variants=variants, selected_variant=2)

    next_section, changed = apply_section_update(section, {"variants": [variants[0], dict(HERO, headline="D")]})

    assert changed == ["variants"]
    assert next_section["selected_variant"] is None
    assert next_section["content"]["headline"] == "C"
    assert_section(next_section)

    cleared, _ = apply_section_update(section, {"variants": []})
    assert cleared["variants"] is None
    assert cleared["selected_variant"] is None


def test_apply_style_patch():
    section = section_document("hero", style_overrides={"elements": {"headline": "text-4xl"}})

    next_section, warnings = apply_style_patch(section, {"elements": {"headline": "text-6xl"}})

    assert next_section["style_overrides"] == {"elements": {"headline": "text-6xl"}}
    assert warnings == []

    with pytest.raises(SchemaValidationError):
        apply_style_patch(section, {"elements": {"headline": "a { b }"}})


def test_clearing_the_last_slot_leaves_no_overrides():
    section = section_document("hero", style_overrides={"section": "py-24"})

    next_section, _ = apply_style_patch(section, {"section": "", "elements": {"headline": ""}})

    assert next_section["style_overrides"] is None


def test_apply_variant():
    section = section_document("hero", variants=[HERO, dict(HERO, headline="B")], selected_variant=0)

    selected = apply_variant(section, 1)

    assert selected["content"]["headline"] == "B"
    assert selected["selected_variant"] == 1
    assert section["selected_variant"] == 0


@pytest.mark.parametrize("index", [-1, 2, True])
def test_apply_variant_out_of_range(index):
    section = section_document("hero", variants=[HERO, HERO], selected_variant=0)

    with pytest.raises(InvariantViolation):
        apply_variant(section, index)


def test_apply_variant_without_variants():
    with pytest.raises(InvariantViolation):
        apply_variant(section_document("hero"), 0)


# ------------------------
# Invariants
# ------------------------

def test_assert_section_accepts_valid_documents():
    assert_section(section_document("hero"))
    assert_section(section_document("services", template_id="services-cards"))


@pytest.mark.parametrize("overrides, error", [
    ({"type": "footer"}, InvariantViolation),
    ({"template_id": "cta-simple"}, InvariantViolation),
    ({"template_id": "hero-nope"}, InvariantViolation),
    ({"selected_variant": 0}, InvariantViolation),
    ({"style_overrides": {"elements": {"headline": 1}}}, InvariantViolation),
    ({"content": {"headline": "Only"}}, SchemaValidationError),
])
def test_assert_section_rejects(overrides, error):
    document = section_document("hero")
    document.update(overrides)

    with pytest.raises(error):
        assert_section(document)


def test_section_orders_must_be_consecutive():
    assert_section_orders([2, 1, 3])
    assert_section_orders([])

    for orders in ([0, 1], [1, 1], [1, 3]):
        with pytest.raises(InvariantViolation):
            assert_section_orders(orders)


def test_assert_page():
    first = section_document("hero")
    second = section_document("cta", id="sec-2", order=2)

    assert_page({"sections": [first, second]})

    broken = copy.deepcopy(second)
    broken["order"] = 3
    with pytest.raises(InvariantViolation):
        assert_page({"sections": [first, broken]})
