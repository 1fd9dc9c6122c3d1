import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pagecraft.ai.prompts.content_mapping import MAPPING_SYSTEM_PROMPT, build_mapping_prompt
from pagecraft.ai.responses import MappingResponse, parse_envelope
from pagecraft.domain.exceptions import (
    AIResponseParseError,
    AIResponseSemanticError,
    FieldError,
    SchemaValidationError,
    TemplateTypeMismatch,
)
from pagecraft.domain.lifecycle.template_switch import SwitchState, SwitchTracker
from pagecraft.domain.sections.registry import find_markup, validate
from pagecraft.domain.templates import registry as templates
from pagecraft.domain.templates.definitions import section_type_from_template_id
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional
from .common import load_section, resolve_store

log = logging.getLogger(__name__)

MAPPING_FAILURE_MESSAGE = "The content could not be adapted to the new template."


@dataclass
class SwitchOutcome:
    state: SwitchState
    section: Dict[str, Any]
    path: List[str]
    reason: Optional[str] = None
    notes: Optional[str] = None
    errors: List[FieldError] = field(default_factory=list)
    transformed: bool = False
    changed: bool = True

    @property
    def applied(self) -> bool:
        return self.state is SwitchState.APPLIED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.state.value,
            "applied": self.applied,
            "transformed": self.transformed,
            "changed": self.changed,
            "path": list(self.path),
            "reason": self.reason,
            "notes": self.notes,
            "errors": [e.to_dict() for e in self.errors],
            "section": self.section,
        }


def _resolve(section, from_template_id, to_template_id):
    source = templates.get_definition(from_template_id)
    destination = templates.get_definition(to_template_id)

    if section["template_id"] != from_template_id:
        raise TemplateTypeMismatch(
            f"Section {section['id']} uses template {section['template_id']!r}, not {from_template_id!r}"
        )

    if source.section_type.value != section["type"]:
        raise TemplateTypeMismatch(
            f"Template {from_template_id!r} renders {source.section_type.value!r} sections, "
            f"but section {section['id']} is {section['type']!r}"
        )

    return source, destination


def _reject(tracker, original, reason, errors=None):
    tracker.advance(SwitchState.REJECTED)
    return SwitchOutcome(
        state=tracker.state,
        section=original,
        path=tracker.path(),
        reason=reason,
        errors=list(errors or []),
        transformed=True,
    )


def plan_switch(section, *, from_template_id, to_template_id, client) -> SwitchOutcome:
    """
    Computes the next state of a section switching templates.

    Same-type switches only change template_id and never call the model.
    Cross-type switches ask the model to remap the content and apply
    template_id, type and content together, or nothing at all. The input
    document is never mutated.
    """
    tracker = SwitchTracker()
    original = copy.deepcopy(section)

    _, destination = _resolve(section, from_template_id, to_template_id)

    source_type = section_type_from_template_id(from_template_id)
    dest_type = section_type_from_template_id(to_template_id)

    if source_type == dest_type:
        tracker.advance(SwitchState.COMPATIBLE)

        if to_template_id == from_template_id:
            tracker.advance(SwitchState.APPLIED)
            return SwitchOutcome(state=tracker.state, section=original, path=tracker.path(), changed=False)

        next_section = copy.deepcopy(section)
        next_section["template_id"] = to_template_id
        # selectors may not exist in the new template
        next_section["style_overrides"] = None

        tracker.advance(SwitchState.APPLIED)
        return SwitchOutcome(state=tracker.state, section=next_section, path=tracker.path())

    tracker.advance(SwitchState.INCOMPATIBLE)

    prompt = build_mapping_prompt(from_template_id, to_template_id, section["content"])
    raw = client.complete(prompt, system_prompt=MAPPING_SYSTEM_PROMPT)

    try:
        response = parse_envelope(MappingResponse, raw)
    except AIResponseParseError as exc:
        log.info("[switch] unparseable mapping section=%s: %s", section["id"], exc)
        return _reject(tracker, original, exc.user_message)
    except AIResponseSemanticError as exc:
        log.info("[switch] mapping has wrong shape section=%s: %s", section["id"], exc)
        return _reject(tracker, original, exc.user_message, exc.errors)

    tracker.advance(SwitchState.MAPPED)

    try:
        content = validate(destination.section_type, response.mapped_content)
    except SchemaValidationError as exc:
        log.info("[switch] mapped content rejected section=%s: %s", section["id"], exc)
        return _reject(tracker, original, MAPPING_FAILURE_MESSAGE, exc.errors)

    markup = find_markup(content)
    if markup:
        log.info("[switch] mapped content carries markup section=%s", section["id"])
        return _reject(tracker, original, MAPPING_FAILURE_MESSAGE, markup)

    next_section = copy.deepcopy(section)
    next_section["template_id"] = to_template_id
    next_section["type"] = destination.section_type.value
    next_section["content"] = content
    next_section["style_overrides"] = None
    # variants belong to the old schema
    next_section["variants"] = None
    next_section["selected_variant"] = None

    tracker.advance(SwitchState.APPLIED)
    return SwitchOutcome(
        state=tracker.state,
        section=next_section,
        path=tracker.path(),
        notes=response.notes,
        transformed=True,
    )


def switch_template(
    *,
    section_id: str,
    from_template_id: str,
    to_template_id: str,
    client,
    store=None,
    expected_updated_at=None,
    actor_id: Optional[str] = None,
) -> SwitchOutcome:
    store = resolve_store(store)
    section = load_section(store, section_id, expected_updated_at)

    outcome = plan_switch(
        section,
        from_template_id=from_template_id,
        to_template_id=to_template_id,
        client=client,
    )

    if not outcome.applied:
        log.info("[switch] rejected section=%s %s -> %s: %s",
                 section_id, from_template_id, to_template_id, outcome.reason)
        return outcome

    if not outcome.changed:
        log.info("[switch] section=%s already uses %s", section_id, to_template_id)
        return outcome

    with transactional():
        outcome.section = store.save(outcome.section, expected_updated_at=expected_updated_at)

        log_action(
            action="section.switch_template",
            entity_type="section",
            entity_id=section_id,
            page_id=section["page_id"],
            actor_id=actor_id,
            payload={
                "from": from_template_id,
                "to": to_template_id,
                "transformed": outcome.transformed,
                "notes": outcome.notes,
            },
        )

    log.info("[switch] applied section=%s %s -> %s transformed=%s",
             section_id, from_template_id, to_template_id, outcome.transformed)
    return outcome
