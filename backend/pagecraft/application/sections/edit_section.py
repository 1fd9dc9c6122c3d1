import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pagecraft.ai.classifier import EditKind, classify
from pagecraft.ai.prompts.content_edit import CONTENT_SYSTEM_PROMPT, build_content_prompt
from pagecraft.ai.prompts.style_modification import STYLE_SYSTEM_PROMPT, build_style_prompt
from pagecraft.ai.responses import ContentEditResponse, StyleEditResponse, parse_envelope
from pagecraft.domain.exceptions import (
    AIResponseParseError,
    AIResponseSemanticError,
    FieldError,
    SchemaValidationError,
)
from pagecraft.domain.sections.registry import find_markup, validate
from pagecraft.domain.styles import overrides as styles
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .common import load_section, resolve_store

log = logging.getLogger(__name__)

STYLE_FAILURE_MESSAGE = "I encountered an error generating the style changes."
CONTENT_FAILURE_MESSAGE = "I couldn't turn that request into a valid content change."


@dataclass
class EditOutcome:
    kind: EditKind
    applied: bool
    section: Dict[str, Any]
    explanation: str = ""
    message: Optional[str] = None
    proposed: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    saved: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "applied": self.applied,
            "saved": self.saved,
            "explanation": self.explanation,
            "message": self.message,
            "proposed": self.proposed,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": list(self.warnings),
            "section": self.section,
        }


def _rejected(kind, original, message, *, explanation="", errors=None):
    return EditOutcome(
        kind=kind,
        applied=False,
        section=original,
        explanation=explanation,
        message=message,
        errors=list(errors or []),
    )


def _plan_style_edit(section, comment, client) -> EditOutcome:
    original = copy.deepcopy(section)
    prompt = build_style_prompt(section["type"], section.get("style_overrides"), comment)
    raw = client.complete(prompt, system_prompt=STYLE_SYSTEM_PROMPT)

    try:
        response = parse_envelope(StyleEditResponse, raw)
    except AIResponseParseError as exc:
        log.info("[edit] unparseable style response section=%s: %s", section["id"], exc)
        return _rejected(EditKind.STYLE, original, exc.user_message)
    except AIResponseSemanticError as exc:
        log.info("[edit] style response has wrong shape section=%s: %s", section["id"], exc)
        return _rejected(EditKind.STYLE, original, exc.user_message, errors=exc.errors)

    result = styles.validate(response.style_overrides, section["type"])
    if not result.valid:
        log.info("[edit] style patch rejected section=%s: %s", section["id"], "; ".join(result.errors))
        return _rejected(
            EditKind.STYLE,
            original,
            STYLE_FAILURE_MESSAGE,
            explanation=response.explanation,
            errors=[FieldError(path="styleOverrides", message=e) for e in result.errors],
        )

    for warning in result.warnings:
        log.warning("[edit] section=%s %s", section["id"], warning)

    next_section = copy.deepcopy(section)
    next_section["style_overrides"] = styles.merge(section.get("style_overrides"), response.style_overrides) or None

    return EditOutcome(
        kind=EditKind.STYLE,
        applied=True,
        section=next_section,
        explanation=response.explanation,
        proposed=copy.deepcopy(response.style_overrides),
        warnings=result.warnings,
    )


def _plan_content_edit(section, comment, client, business_context=None) -> EditOutcome:
    original = copy.deepcopy(section)
    prompt = build_content_prompt(section["type"], section["content"], comment, business_context)
    raw = client.complete(prompt, system_prompt=CONTENT_SYSTEM_PROMPT)

    try:
        response = parse_envelope(ContentEditResponse, raw)
    except AIResponseParseError as exc:
        log.info("[edit] unparseable content response section=%s: %s", section["id"], exc)
        return _rejected(EditKind.CONTENT, original, exc.user_message)
    except AIResponseSemanticError as exc:
        log.info("[edit] content response has wrong shape section=%s: %s", section["id"], exc)
        return _rejected(EditKind.CONTENT, original, exc.user_message, errors=exc.errors)

    try:
        content = validate(section["type"], response.updated_content)
    except SchemaValidationError as exc:
        log.info("[edit] updated content rejected section=%s: %s", section["id"], exc)
        return _rejected(
            EditKind.CONTENT,
            original,
            CONTENT_FAILURE_MESSAGE,
            explanation=response.explanation,
            errors=exc.errors,
        )

    markup = find_markup(content)
    if markup:
        log.info("[edit] updated content carries markup section=%s", section["id"])
        return _rejected(
            EditKind.CONTENT,
            original,
            CONTENT_FAILURE_MESSAGE,
            explanation=response.explanation,
            errors=markup,
        )

    next_section = copy.deepcopy(section)
    next_section["content"] = content

    return EditOutcome(
        kind=EditKind.CONTENT,
        applied=True,
        section=next_section,
        explanation=response.explanation,
        proposed=copy.deepcopy(content),
    )


def plan_section_edit(section, comment, *, client, kind=None, business_context=None) -> EditOutcome:
    """
    Turns a free-text comment into the next state of a section.

    Style edits only ever touch style_overrides; content edits only ever
    touch content. Malformed model output yields a rejected outcome carrying
    the unchanged section. Provider failures propagate.
    """
    if not isinstance(comment, str) or not comment.strip():
        raise SchemaValidationError("comment", [FieldError(path="comment", message="must not be empty")])

    try:
        edit_kind = classify(comment, force=kind)
    except ValueError as exc:
        raise SchemaValidationError(
            "comment",
            [FieldError(path="kind", message="must be 'style' or 'content'")],
        ) from exc

    log.debug("[edit] section=%s classified as %s", section["id"], edit_kind.value)

    if edit_kind is EditKind.STYLE:
        return _plan_style_edit(section, comment, client)
    return _plan_content_edit(section, comment, client, business_context)


def request_section_edit(
    *,
    section_id: str,
    comment: str,
    client,
    kind: Optional[str] = None,
    apply: bool = True,
    store=None,
    expected_updated_at=None,
    actor_id: Optional[str] = None,
) -> EditOutcome:
    store = resolve_store(store)
    section = load_section(store, section_id, expected_updated_at)

    outcome = plan_section_edit(
        section,
        comment,
        client=client,
        kind=kind,
        business_context=store.business_context(section["page_id"]),
    )

    if not outcome.applied:
        return outcome

    if not apply:
        log.info("[edit] preview section=%s kind=%s", section_id, outcome.kind.value)
        return outcome

    with transactional():
        outcome.section = store.save(outcome.section, expected_updated_at=expected_updated_at)
        outcome.saved = True

        log_action(
            action=f"section.edit_{outcome.kind.value}",
            entity_type="section",
            entity_id=section_id,
            page_id=section["page_id"],
            actor_id=actor_id,
            payload={
                "comment": comment,
                "explanation": outcome.explanation,
                "warnings": outcome.warnings,
            },
        )

    log.info("[edit] applied section=%s kind=%s", section_id, outcome.kind.value)
    return outcome
