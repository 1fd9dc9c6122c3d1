from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError

from pagecraft.domain.exceptions import FieldError, InvariantViolation, PageNotFound, SchemaValidationError, SlugTaken
from pagecraft.domain.sections.schemas import BusinessContext, Theme
from pagecraft.extensions import db
from pagecraft.models.page import Page
from pagecraft.normalizers.page import normalize_page
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .create_page import validate_page_part

ALLOWED_UPDATE_FIELDS = ("title", "slug", "theme", "business_context")


def _next_values(data: Dict[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    errors = []

    for name in ("title", "slug"):
        if name in data:
            if not isinstance(data[name], str) or not data[name].strip():
                errors.append(FieldError(path=name, message="must be a non-empty string"))
            else:
                values[name] = data[name]

    if errors:
        raise SchemaValidationError("page", errors)

    if "theme" in data:
        # a theme is replaced whole; missing keys fall back to defaults
        values["theme"] = validate_page_part(Theme, "theme", data["theme"] or {})

    if "business_context" in data:
        values["business_context"] = (
            validate_page_part(BusinessContext, "business_context", data["business_context"])
            if data["business_context"] is not None
            else None
        )

    return values


def update_page(
    *,
    page_id: str,
    data: Dict[str, Any],
    actor_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Update mutable fields on a page.

    Design rules:
    - Only whitelisted fields are mutable
    - Theme and business context go through the same models as on create
    - No silent no-op updates
    """
    unknown = sorted(set(data) - set(ALLOWED_UPDATE_FIELDS))
    if unknown:
        raise SchemaValidationError(
            "page",
            [FieldError(path=name, message="cannot be updated here") for name in unknown],
        )

    page = db.session.get(Page, page_id)
    if page is None:
        raise PageNotFound(page_id)

    values = _next_values(data)
    changed_fields = [name for name, value in values.items() if getattr(page, name) != value]

    if not changed_fields:
        # Explicitly fail instead of silently succeeding
        raise InvariantViolation("No changes provided for update")

    try:
        with transactional():
            for name in changed_fields:
                setattr(page, name, values[name])

            log_action(
                action="page.update",
                entity_type="page",
                entity_id=page.id,
                actor_id=actor_id,
                payload={
                    "fields": changed_fields,
                },
            )
    except IntegrityError as exc:
        raise SlugTaken(values["slug"]) from exc

    return normalize_page(page)
