from dataclasses import dataclass
from typing import Any, Dict, List, Optional


class PagecraftError(Exception):
    """Base class for every error raised by the section core."""

    status_code = 400

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": str(self),
        }


class InvariantViolation(PagecraftError):
    pass


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"path": self.path, "message": self.message}

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class SchemaValidationError(PagecraftError):
    """
    Content or style patch does not match its declared shape.

    Carries every offending field, never only the first one.
    """

    status_code = 422

    def __init__(self, subject: str, errors: List[FieldError]):
        self.subject = subject
        self.errors = list(errors)
        super().__init__(
            f"{subject} failed validation with {len(self.errors)} error(s): "
            + "; ".join(str(e) for e in self.errors)
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["subject"] = self.subject
        data["errors"] = [e.to_dict() for e in self.errors]
        return data


class UnknownTemplateError(PagecraftError):
    status_code = 404

    def __init__(self, template_id: Optional[str]):
        self.template_id = template_id
        super().__init__(f"Unknown template: {template_id!r}")


class TemplateTypeMismatch(PagecraftError):
    status_code = 409


class IllegalSwitchTransition(PagecraftError):
    status_code = 500


class AIResponseParseError(PagecraftError):
    """The completion text holds no extractable JSON object."""

    status_code = 422
    user_message = "I couldn't read the AI response. Please try again with more specific details."


class AIResponseSemanticError(PagecraftError):
    """The completion parsed but answered with the wrong shape."""

    status_code = 422
    user_message = "The AI didn't understand the request. Please rephrase it and try again."

    def __init__(self, message: str, errors: Optional[List[FieldError]] = None):
        self.errors = list(errors or [])
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = [e.to_dict() for e in self.errors]
        return data


class ProviderFailure(PagecraftError):
    """The completion service errored or timed out. Not recoverable locally."""

    status_code = 502


class SectionNotFound(PagecraftError):
    status_code = 404

    def __init__(self, section_id):
        self.section_id = section_id
        super().__init__(f"Section not found: {section_id}")


class PageNotFound(PagecraftError):
    status_code = 404

    def __init__(self, page_id):
        self.page_id = page_id
        super().__init__(f"Page not found: {page_id}")


class StaleSectionError(PagecraftError):
    status_code = 409

    def __init__(self, section_id):
        self.section_id = section_id
        super().__init__("Conflict detected. Section has been modified.")


class SlugTaken(PagecraftError):
    status_code = 409

    def __init__(self, slug):
        self.slug = slug
        super().__init__(f"A page with slug {slug!r} already exists")
