import pytest

from pagecraft.ai.parsing import extract_json_object, strip_code_fences
from pagecraft.ai.responses import MappingResponse, StyleEditResponse, parse_envelope
from pagecraft.domain.exceptions import AIResponseParseError, AIResponseSemanticError


def test_bare_json():
    assert extract_json_object('{"a": 1}') == {"a": 1}


def test_fenced_json():
    raw = '```json\n{"mappedContent": {"headline": "Hi"}}\n```'
    assert extract_json_object(raw) == {"mappedContent": {"headline": "Hi"}}
    assert strip_code_fences("```\n{}\n```") == "{}"


def test_json_inside_prose():
    raw = 'Sure! Here is the result:\n{"explanation": "done", "n": [1, 2]}\nLet me know.'
    assert extract_json_object(raw) == {"explanation": "done", "n": [1, 2]}


def test_braces_inside_strings_do_not_confuse_extraction():
    raw = 'Use {placeholders} like this: {"text": "a } b { c", "ok": true}'
    assert extract_json_object(raw) == {"text": "a } b { c", "ok": True}


def test_escaped_quotes_inside_strings():
    raw = 'Result: {"quote": "She said \\"wow}\\"", "x": 1}'
    assert extract_json_object(raw) == {"quote": 'She said "wow}"', "x": 1}


def test_first_parseable_object_wins():
    raw = '{not json} then {"first": 1} and {"second": 2}'
    assert extract_json_object(raw) == {"first": 1}


def test_nested_object_returns_outermost():
    raw = 'ok {"outer": {"inner": {"deep": 1}}}'
    assert extract_json_object(raw) == {"outer": {"inner": {"deep": 1}}}


@pytest.mark.parametrize("raw", [
    None,
    "",
    "   ",
    "I'm sorry, I can't help with that.",
    "[1, 2, 3]",
    '{"unterminated": ',
])
def test_unrecoverable_replies(raw):
    with pytest.raises(AIResponseParseError):
        extract_json_object(raw)


def test_parse_envelope_accepts_camel_case():
    response = parse_envelope(
        StyleEditResponse,
        '{"explanation": "Bigger", "level": "element", "styleOverrides": {"elements": {"headline": "text-6xl"}}}',
    )

    assert response.explanation == "Bigger"
    assert response.level == "element"
    assert response.style_overrides == {"elements": {"headline": "text-6xl"}}


def test_parse_envelope_ignores_extra_keys():
    response = parse_envelope(MappingResponse, '{"mappedContent": {}, "confidence": 0.9}')

    assert response.mapped_content == {}
    assert response.notes is None


def test_parse_envelope_missing_field_is_semantic():
    with pytest.raises(AIResponseSemanticError) as excinfo:
        parse_envelope(StyleEditResponse, '{"explanation": "I made it bigger"}')

    assert [e.path for e in excinfo.value.errors] == ["styleOverrides"]


def test_parse_envelope_wrong_type_is_semantic():
    with pytest.raises(AIResponseSemanticError):
        parse_envelope(MappingResponse, '{"mappedContent": "headline: Hi"}')


def test_parse_envelope_without_json_is_a_parse_error():
    with pytest.raises(AIResponseParseError):
        parse_envelope(MappingResponse, "no idea")
