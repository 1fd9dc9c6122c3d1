import copy

import pytest

from pagecraft.domain.styles import overrides as styles
from pagecraft.domain.styles.classes import merge_classes


# ------------------------
# Class merging
# ------------------------

@pytest.mark.parametrize("base, override, expected", [
    ("text-4xl font-bold", "text-6xl", "font-bold text-6xl"),
    ("text-gray-900 text-xl", "text-red-500", "text-xl text-red-500"),
    ("px-2 py-1", "p-4", "p-4"),
    ("p-4", "px-2", "p-4 px-2"),
    ("mx-auto mb-4", "mb-8", "mx-auto mb-8"),
    ("text-lg leading-8", "text-4xl", "text-4xl"),
])
def test_later_class_wins_within_a_family(base, override, expected):
    assert merge_classes(base, override) == expected


def test_variant_prefixes_are_separate_families():
    assert merge_classes("text-xl md:text-2xl", "text-3xl") == "md:text-2xl text-3xl"


def test_duplicates_collapse():
    assert merge_classes("font-bold italic", "font-bold") == "italic font-bold"


def test_unknown_classes_are_kept():
    merged = merge_classes("glass-card custom-glow", "text-lg")

    assert set(merged.split()) == {"glass-card", "custom-glow", "text-lg"}


def test_falsy_inputs_are_skipped():
    assert merge_classes(None, "", "text-lg", None) == "text-lg"
    assert merge_classes() == ""
    assert merge_classes("   ") == ""


@pytest.mark.parametrize("a, b, c", [
    ("text-xl", "font-bold", "py-8"),
    ("bg-white p-4", "rounded-xl", "shadow-lg tracking-wide"),
    ("md:text-4xl", "hover:underline", "leading-tight"),
])
def test_merging_is_associative_for_independent_families(a, b, c):
    left = merge_classes(merge_classes(a, b), c)
    right = merge_classes(a, merge_classes(b, c))

    assert left == right == merge_classes(a, b, c)


def test_merging_is_associative_when_families_repeat():
    a, b, c = "text-xl font-bold", "text-2xl", "font-black"

    assert merge_classes(merge_classes(a, b), c) == merge_classes(a, merge_classes(b, c))


# ------------------------
# Applying overrides
# ------------------------

def test_apply_element_and_section():
    overrides = {
        "section": "py-32 bg-gray-900",
        "elements": {"headline": "text-6xl md:text-8xl font-black"},
    }

    assert styles.apply_element("text-4xl font-bold text-gray-900", "headline", overrides) == (
        "text-gray-900 text-6xl md:text-8xl font-black"
    )
    assert styles.apply_element("text-lg", "subheadline", overrides) == "text-lg"
    assert styles.apply_section("py-20 bg-white", overrides) == "py-32 bg-gray-900"
    assert styles.apply_section("py-20", None) == "py-20"


def test_accessors():
    overrides = {"elements": {"cta.button": "rounded-full"}}

    assert styles.get_element(overrides, "cta.button") == "rounded-full"
    assert styles.get_element(overrides, "headline") is None
    assert styles.has_element(overrides, "cta.button")
    assert styles.has_any(overrides)
    assert not styles.has_any(styles.empty())
    assert not styles.has_any({"section": "  ", "elements": {}})


# ------------------------
# Merging override sets
# ------------------------

def test_merge_extends_and_overrides_per_selector():
    existing = {"section": "py-20", "elements": {"headline": "text-4xl font-bold", "cta.button": "rounded"}}
    incoming = {"elements": {"headline": "text-6xl", "subheadline": "italic"}}

    merged = styles.merge(existing, incoming)

    assert merged == {
        "section": "py-20",
        "elements": {
            "headline": "font-bold text-6xl",
            "cta.button": "rounded",
            "subheadline": "italic",
        },
    }


def test_merge_does_not_mutate_inputs():
    existing = {"elements": {"headline": "text-4xl"}}
    incoming = {"elements": {"headline": "text-6xl"}}
    snapshot = copy.deepcopy((existing, incoming))

    styles.merge(existing, incoming)

    assert (existing, incoming) == snapshot


def test_empty_string_clears_a_slot():
    existing = {"section": "py-20", "elements": {"headline": "text-4xl", "cta.button": "rounded"}}

    merged = styles.merge(existing, {"section": "", "elements": {"headline": ""}})

    assert merged == {"elements": {"cta.button": "rounded"}}


def test_merge_into_nothing():
    assert styles.merge(None, {"section": "py-8"}) == {"section": "py-8"}
    assert styles.merge(None, None) == {}


# ------------------------
# Validation
# ------------------------

def test_valid_patch():
    result = styles.validate({"elements": {"headline": "text-6xl font-black"}}, "hero")

    assert result.valid
    assert result.errors == []
    assert result.warnings == []


def test_section_only_patch_is_valid():
    assert styles.validate({"section": "py-32"}).valid


def test_empty_elements_without_section_is_a_no_op():
    result = styles.validate({"elements": {}})

    assert not result.valid
    assert result.errors


def test_patch_without_slots_is_invalid():
    assert not styles.validate({}).valid


@pytest.mark.parametrize("candidate", [
    {"section": ""},
    {"section": "   ", "elements": {}},
    {"elements": {"headline": ""}},
])
def test_explicit_clears_are_valid(candidate):
    assert styles.validate(candidate).valid


@pytest.mark.parametrize("candidate", [
    None,
    [],
    "text-xl",
    {"section": 5},
    {"elements": ["headline"]},
    {"elements": {"headline": 42}},
    {"elements": {"headline": ["text-xl"]}},
    {"elements": {"headline": {"fontSize": "2rem"}}},
    {"elements": {"features[x].title": "text-xl"}},
    {"elements": {"headline": "font-size: 2rem;"}},
    {"section": "body { color: red }"},
    {"sections": "py-8"},
])
def test_malformed_patches_are_errors(candidate):
    result = styles.validate(candidate, "hero")

    assert not result.valid
    assert result.errors


def test_out_of_vocabulary_selector_is_a_warning():
    result = styles.validate({"elements": {"tagline": "italic", "headline": "font-bold"}}, "hero")

    assert result.valid
    assert len(result.warnings) == 1
    assert "tagline" in result.warnings[0]


def test_indexed_selectors_match_wildcards():
    result = styles.validate({"elements": {"features[2].title": "text-xl"}}, "features")

    assert result.valid
    assert result.warnings == []


def test_vocabulary_is_not_checked_without_a_type():
    assert styles.validate({"elements": {"tagline": "italic"}}).warnings == []
