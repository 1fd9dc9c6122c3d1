import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from pagecraft.domain.exceptions import FieldError, PageNotFound, SchemaValidationError, SlugTaken
from pagecraft.domain.sections.registry import format_path
from pagecraft.domain.sections.schemas import BusinessContext, Theme
from pagecraft.extensions import db
from pagecraft.models.page import Page
from pagecraft.normalizers.page import normalize_page
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional

log = logging.getLogger(__name__)


def validate_page_part(model, subject, value):
    try:
        return model.model_validate(value).model_dump(mode="json", by_alias=True, exclude_none=True)
    except ValidationError as exc:
        raise SchemaValidationError(subject, [
            FieldError(path=format_path((subject,) + tuple(err["loc"])), message=err["msg"])
            for err in exc.errors(include_url=False)
        ]) from exc


def create_page(
    *,
    data: Dict[str, Any],
    actor_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create an empty landing page.

    Edge cases handled:
    - Missing required fields
    - Duplicate slug
    - Theme and business context validated, theme defaults filled
    """

    title = data.get("title")
    slug = data.get("slug")

    missing = [name for name, value in (("title", title), ("slug", slug)) if not value]
    if missing:
        raise SchemaValidationError("page", [FieldError(path=name, message="is required") for name in missing])

    theme = validate_page_part(Theme, "theme", data.get("theme") or {})

    business_context = None
    if data.get("business_context") is not None:
        business_context = validate_page_part(BusinessContext, "business_context", data["business_context"])

    page = Page()
    page.title = title
    page.slug = slug
    page.theme = theme
    page.business_context = business_context

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()  # ensures page.id is available

            log_action(
                action="page.create",
                entity_type="page",
                entity_id=page.id,
                actor_id=actor_id,
                payload={
                    "title": page.title,
                    "slug": page.slug,
                },
            )
    except IntegrityError as exc:
        raise SlugTaken(slug) from exc

    log.info("[page] created page=%s slug=%s", page.id, page.slug)
    return normalize_page(page)


def get_page(*, page_id: str) -> Dict[str, Any]:
    page = db.session.get(Page, page_id)
    if page is None:
        raise PageNotFound(page_id)
    return normalize_page(page)
