from flask import jsonify

from pagecraft.application.pages.create_page import create_page as create_page_use_case
from pagecraft.application.pages.create_page import get_page as get_page_use_case
from pagecraft.application.pages.delete_page import delete_page as delete_page_use_case
from pagecraft.application.pages.update_page import update_page as update_page_use_case
from pagecraft.application.sections.reorder_sections import reorder_sections
from pagecraft.models.audit_log import AuditLog
from pagecraft.normalizers.audit import normalize_history_entry
from . import v1_bp
from .common import json_body


@v1_bp.route("/pages", methods=["POST"])
def create_page():
    page = create_page_use_case(data=json_body())
    return jsonify(page), 201


@v1_bp.route("/pages/<page_id>", methods=["GET"])
def get_page(page_id):
    return jsonify(get_page_use_case(page_id=page_id))


@v1_bp.route("/pages/<page_id>", methods=["PATCH"])
def update_page(page_id):
    return jsonify(update_page_use_case(page_id=page_id, data=json_body()))


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
def delete_page(page_id):
    delete_page_use_case(page_id=page_id)
    return jsonify({"message": "Page deleted"}), 200


@v1_bp.route("/pages/<page_id>/history", methods=["GET"])
def page_history(page_id):
    entries = AuditLog.history_for("page", page_id)
    return jsonify({"history": [normalize_history_entry(entry) for entry in entries]})


@v1_bp.route("/pages/<page_id>/sections/reorder", methods=["PUT"])
def reorder_page_sections(page_id):
    data = json_body()
    sections = reorder_sections(page_id=page_id, section_ids=data.get("section_ids"))
    return jsonify({"sections": sections})
