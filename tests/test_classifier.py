import pytest

from pagecraft.ai.classifier import EditKind, classify, style_terms


@pytest.mark.parametrize("comment", [
    "Make the headline bigger",
    "Use a darker background",
    "The buttons should be rounded",
    "Add more padding around the section",
    "Center the title",
    "headline text should be centered",
    "Change the colors to match our brand",
    "make it smaller on mobile",
    "Increase the line-height of the paragraphs",
    "MAKE IT BOLD",
])
def test_presentation_requests_are_style(comment):
    assert classify(comment) is EditKind.STYLE


@pytest.mark.parametrize("comment", [
    "Make the copy shorter",
    "Mention our 24/7 support",
    "Highlight our free trial",
    "Change the headline to 'Fresh bread daily'",
    "Add a question about refunds",
    "Rewrite this in a friendlier tone",
    "",
])
def test_everything_else_is_content(comment):
    assert classify(comment) is EditKind.CONTENT


def test_suffix_folding():
    assert style_terms("centered colors") == {"center", "color"}
    assert style_terms("spacing and borders") == {"spacing", "space", "border"}
    assert style_terms("fresh sourdough") == set()


def test_whole_words_only():
    # "highlight" contains "light"; "bolded" folds to "bold"
    assert style_terms("highlight") == set()
    assert style_terms("bolded") == {"bold"}


def test_force_overrides_the_heuristic():
    assert classify("Make the headline bigger", force="content") is EditKind.CONTENT
    assert classify("Mention our support", force="style") is EditKind.STYLE
    assert classify("Make it bigger", force=EditKind.CONTENT) is EditKind.CONTENT


def test_unknown_forced_kind():
    with pytest.raises(ValueError):
        classify("anything", force="layout")
