from flask import abort, jsonify, request

from pagecraft.domain.sections.metadata import SECTION_METADATA, sections_for_industry
from pagecraft.domain.sections.registry import defaults_for, describe
from pagecraft.domain.sections.types import SectionType, is_valid_type
from pagecraft.domain.templates import registry as templates
from pagecraft.domain.templates.selectors import selectors_for
from . import v1_bp


def _section_type_or_404(name):
    if not is_valid_type(name):
        abort(404, description=f"Unknown section type: {name}")
    return SectionType(name)


def _describe_type(section_type: SectionType):
    meta = SECTION_METADATA[section_type]
    return {
        "type": section_type.value,
        "display_name": meta.display_name,
        "description": meta.description,
        "icon": meta.icon,
        "industries": list(meta.industries),
        "position": meta.position,
        "default_template_id": templates.default_id_for(section_type),
    }


@v1_bp.route("/section-types", methods=["GET"])
def list_section_types():
    industry = request.args.get("industry")

    data = {"section_types": [_describe_type(t) for t in SectionType]}
    if industry:
        data["suggested"] = [t.value for t in sections_for_industry(industry)]

    return jsonify(data)


@v1_bp.route("/section-types/<name>", methods=["GET"])
def get_section_type(name):
    section_type = _section_type_or_404(name)

    data = _describe_type(section_type)
    data["schema"] = describe(section_type)
    data["defaults"] = defaults_for(section_type)
    data["selectors"] = list(selectors_for(section_type))

    return jsonify(data)


@v1_bp.route("/section-types/<name>/templates", methods=["GET"])
def list_templates(name):
    section_type = _section_type_or_404(name)

    return jsonify({
        "section_type": section_type.value,
        "default_template_id": templates.default_id_for(section_type),
        "templates": [
            {
                **metadata.model_dump(mode="json", by_alias=False),
                "preview": templates.preview_for(metadata.id).model_dump(mode="json", by_alias=False),
            }
            for metadata in templates.list_for(section_type)
        ],
    })


@v1_bp.route("/templates/<template_id>", methods=["GET"])
def get_template(template_id):
    definition = templates.get_definition(template_id)
    return jsonify(definition.model_dump(mode="json", by_alias=False))
