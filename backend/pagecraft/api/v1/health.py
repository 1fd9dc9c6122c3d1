from flask import jsonify
from pagecraft.domain.templates import registry as templates
from . import v1_bp


@v1_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "pagecraft",
        "templates": len(templates.REGISTRY),
    })
