import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from pagecraft.domain.exceptions import PagecraftError, ProviderFailure

log = logging.getLogger(__name__)


def register_error_handlers(app):
    @app.errorhandler(PagecraftError)
    def handle_pagecraft_error(error):
        if isinstance(error, ProviderFailure):
            log.error("[api] completion service failure: %s", error)
        elif error.status_code >= 500:
            log.error("[api] %s: %s", type(error).__name__, error)

        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        response = jsonify({
            "error": error.name,
            "message": error.description,
        })
        response.status_code = error.code
        return response
