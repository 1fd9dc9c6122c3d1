from flask import abort, jsonify

from pagecraft.application.sections.common import resolve_store
from pagecraft.application.sections.create_section import create_section as create_section_use_case
from pagecraft.application.sections.delete_section import delete_section as delete_section_use_case
from pagecraft.application.sections.edit_section import request_section_edit
from pagecraft.application.sections.select_variant import select_variant as select_variant_use_case
from pagecraft.application.sections.switch_template import switch_template as switch_template_use_case
from pagecraft.application.sections.update_section import update_section as update_section_use_case
from pagecraft.application.sections.update_style_overrides import (
    clear_style_overrides,
    update_style_overrides,
)
from pagecraft.models.audit_log import AuditLog
from pagecraft.normalizers.audit import normalize_history_entry
from . import v1_bp
from .common import completion_client, json_body, lock_timestamp, section_response


# ------------------------
# Sections
# ------------------------

@v1_bp.route("/pages/<page_id>/sections", methods=["GET"])
def list_sections(page_id):
    return jsonify({"sections": resolve_store().list_for_page(page_id)})


@v1_bp.route("/pages/<page_id>/sections", methods=["POST"])
def create_section(page_id):
    data = json_body()

    if not data.get("type"):
        abort(400, description="Section type is required")

    section = create_section_use_case(
        page_id=page_id,
        section_type=data["type"],
        content=data.get("content"),
        template_id=data.get("template_id"),
        is_visible=data.get("is_visible", True),
        style_overrides=data.get("style_overrides"),
        variants=data.get("variants"),
    )
    return section_response(section, status_code=201)


@v1_bp.route("/sections/<section_id>", methods=["GET"])
def get_section(section_id):
    return section_response(resolve_store().get(section_id))


@v1_bp.route("/sections/<section_id>", methods=["PATCH"])
def update_section(section_id):
    section = update_section_use_case(
        section_id=section_id,
        data=json_body(),
        expected_updated_at=lock_timestamp(),
    )
    return section_response(section)


@v1_bp.route("/sections/<section_id>", methods=["DELETE"])
def delete_section(section_id):
    delete_section_use_case(section_id=section_id, expected_updated_at=lock_timestamp())
    return jsonify({"message": "Section deleted"}), 200


# ------------------------
# Templates
# ------------------------

@v1_bp.route("/sections/<section_id>/template", methods=["POST"])
def switch_template(section_id):
    data = json_body()

    to_template_id = data.get("to_template_id")
    if not to_template_id:
        abort(400, description="to_template_id is required")

    expected = lock_timestamp()
    store = resolve_store()
    from_template_id = data.get("from_template_id") or store.get(section_id)["template_id"]

    outcome = switch_template_use_case(
        section_id=section_id,
        from_template_id=from_template_id,
        to_template_id=to_template_id,
        client=completion_client(),
        store=store,
        expected_updated_at=expected,
    )
    return section_response(outcome.section, extra=outcome.to_dict())


# ------------------------
# Styles
# ------------------------

@v1_bp.route("/sections/<section_id>/styles", methods=["PUT"])
def put_styles(section_id):
    data = json_body()
    overrides = data.get("style_overrides", data)

    section, warnings = update_style_overrides(
        section_id=section_id,
        overrides=overrides,
        expected_updated_at=lock_timestamp(),
    )
    return section_response(section, extra={"warnings": warnings})


@v1_bp.route("/sections/<section_id>/styles", methods=["DELETE"])
def delete_styles(section_id):
    section = clear_style_overrides(section_id=section_id, expected_updated_at=lock_timestamp())
    return section_response(section)


# ------------------------
# Comments (free-text edits)
# ------------------------

@v1_bp.route("/sections/<section_id>/comments", methods=["POST"])
def comment_on_section(section_id):
    data = json_body()

    apply = data.get("apply", True)
    if not isinstance(apply, bool):
        abort(400, description="apply must be a boolean")

    outcome = request_section_edit(
        section_id=section_id,
        comment=data.get("comment"),
        kind=data.get("kind"),
        apply=apply,
        client=completion_client(),
        expected_updated_at=lock_timestamp(),
    )
    return section_response(outcome.section, extra=outcome.to_dict())


# ------------------------
# Variants
# ------------------------

@v1_bp.route("/sections/<section_id>/variants/<int:index>/select", methods=["POST"])
def select_variant(section_id, index):
    section = select_variant_use_case(
        section_id=section_id,
        index=index,
        expected_updated_at=lock_timestamp(),
    )
    return section_response(section)


# ------------------------
# History
# ------------------------

@v1_bp.route("/sections/<section_id>/history", methods=["GET"])
def section_history(section_id):
    entries = AuditLog.history_for("section", section_id)
    return jsonify({"history": [normalize_history_entry(entry) for entry in entries]})
