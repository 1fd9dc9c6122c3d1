from flask import abort, jsonify, request
from werkzeug.http import http_date

from pagecraft.ai.client import get_completion_client
from pagecraft.utils.optimistic_lock import parse_ts, requested_unmodified_since


def json_body():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    return data


def completion_client():
    return get_completion_client()


def lock_timestamp():
    return requested_unmodified_since()


def section_response(document, status_code=200, extra=None):
    """JSON response for one section, with Last-Modified for later If-Unmodified-Since."""
    body = dict(extra or {})
    body["section"] = document

    response = jsonify(body)
    response.status_code = status_code

    if document.get("updated_at"):
        response.headers["Last-Modified"] = http_date(parse_ts(document["updated_at"]))

    return response
