from typing import Any, Dict, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from pagecraft.domain.exceptions import AIResponseSemanticError, FieldError
from pagecraft.domain.sections.registry import format_path
from .parsing import extract_json_object


class Envelope(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class StyleEditResponse(Envelope):
    explanation: str = ""
    level: Optional[Literal["section", "element", "both"]] = None
    # shape is checked by the style validator so warnings survive
    style_overrides: Dict[str, Any]


class ContentEditResponse(Envelope):
    explanation: str = ""
    updated_content: Dict[str, Any]


class MappingResponse(Envelope):
    mapped_content: Dict[str, Any]
    notes: Optional[str] = None


E = TypeVar("E", bound=Envelope)


def parse_envelope(model: Type[E], raw: str) -> E:
    """
    Extract and shape-check a model reply.

    Raises AIResponseParseError when there is no JSON object and
    AIResponseSemanticError when the object has the wrong shape.
    """
    payload = extract_json_object(raw)

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = [
            FieldError(path=format_path(err["loc"]), message=err["msg"])
            for err in exc.errors(include_url=False)
        ]
        raise AIResponseSemanticError(
            f"Completion response is not a valid {model.__name__}", errors
        ) from exc
