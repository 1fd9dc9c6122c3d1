from __future__ import annotations

import json
import re
from typing import Any, Dict, Iterable, List, Sequence, Tuple, Type, Union

from pydantic import ValidationError
from pydantic_core import PydanticUndefined

from pagecraft.domain.exceptions import FieldError, SchemaValidationError
from .metadata import SECTION_METADATA
from .schemas import CONTENT_SCHEMAS, SectionContent
from .types import SectionType, coerce_type, is_valid_type, section_types

__all__ = [
    "validate",
    "defaults_for",
    "describe",
    "editing_context",
    "find_markup",
    "format_path",
    "is_valid_type",
    "schema_for",
    "section_types",
    "validate_variants",
]

_MARKUP = re.compile(r"</?[a-zA-Z][a-zA-Z0-9-]*(\s[^<>]*)?/?>")


def schema_for(section_type: Union[str, SectionType]) -> Type[SectionContent]:
    return CONTENT_SCHEMAS[coerce_type(section_type)]


def format_path(loc: Sequence[Union[str, int]]) -> str:
    """
    Render a location as a selector-style path.

    ("features", 2, "title") -> "features[2].title"
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path or "content"


def _field_errors(exc: ValidationError) -> List[FieldError]:
    return [
        FieldError(path=format_path(err["loc"]), message=err["msg"])
        for err in exc.errors(include_url=False)
    ]


def validate(section_type: Union[str, SectionType], content: Any) -> Dict[str, Any]:
    """
    Validate content against the schema of a section type.

    Returns the normalized content: wire (camelCase) keys, defaults filled,
    unknown nested keys stripped. Raises SchemaValidationError listing
    every offending field.
    """
    try:
        kind = coerce_type(section_type)
    except ValueError as exc:
        raise SchemaValidationError(
            "content",
            [FieldError(path="type", message=str(exc))],
        ) from exc

    model = CONTENT_SCHEMAS[kind]

    try:
        parsed = model.model_validate(content)
    except ValidationError as exc:
        raise SchemaValidationError(f"{kind.value} content", _field_errors(exc)) from exc

    return parsed.model_dump(mode="json", by_alias=True, exclude_none=True)


def validate_variants(section_type: Union[str, SectionType], variants: Iterable[Any]) -> List[Dict[str, Any]]:
    """Validate every stored variant; errors are prefixed with the variant index."""
    normalized: List[Dict[str, Any]] = []
    errors: List[FieldError] = []

    for index, variant in enumerate(variants):
        try:
            normalized.append(validate(section_type, variant))
        except SchemaValidationError as exc:
            errors.extend(
                FieldError(path=f"variants[{index}].{e.path}", message=e.message)
                for e in exc.errors
            )

    if errors:
        raise SchemaValidationError(f"{coerce_type(section_type).value} variants", errors)

    return normalized


def defaults_for(section_type: Union[str, SectionType]) -> Dict[str, Any]:
    """Declared defaults of the optional top-level fields, keyed by wire name."""
    model = schema_for(section_type)
    defaults: Dict[str, Any] = {}

    for name, field in model.model_fields.items():
        if field.is_required():
            continue
        if field.default_factory is not None:
            value = field.default_factory()
        elif field.default is PydanticUndefined:
            continue
        else:
            value = field.default
        if value is None:
            continue
        defaults[field.alias or name] = value

    return defaults


def describe(section_type: Union[str, SectionType]) -> Dict[str, Any]:
    """JSON schema of a section type's content, as shown to the model."""
    return schema_for(section_type).model_json_schema(by_alias=True)


def editing_context(section_type: Union[str, SectionType]) -> str:
    kind = coerce_type(section_type)
    meta = SECTION_METADATA[kind]

    return (
        f'You are editing a "{meta.display_name}" section.\n'
        f"{meta.description}\n\n"
        "Schema:\n"
        f"```json\n{json.dumps(describe(kind), indent=2)}\n```\n\n"
        "When updating, maintain the same structure but modify content as requested."
    )


def _walk_strings(value: Any, loc: Tuple[Union[str, int], ...] = ()):
    if isinstance(value, str):
        yield loc, value
    elif isinstance(value, dict):
        for key, item in value.items():
            yield from _walk_strings(item, loc + (key,))
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield from _walk_strings(item, loc + (index,))


def find_markup(content: Any) -> List[FieldError]:
    """Report every text field that carries HTML-like tags."""
    return [
        FieldError(path=format_path(loc), message="markup is not allowed in content text")
        for loc, text in _walk_strings(content)
        if _MARKUP.search(text)
    ]
