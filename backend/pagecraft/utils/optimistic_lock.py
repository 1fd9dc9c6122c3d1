from flask import request, abort
from datetime import timezone
from dateutil.parser import parse, ParserError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def parse_ts(value):
    if value is None:
        return None
    if isinstance(value, str):
        value = parse(value)
    return normalize_ts(value)


def is_modified_since(updated_at, client_ts) -> bool:
    """
    True when the stored timestamp is newer than what the client read.
    HTTP dates carry whole seconds, so sub-second precision is ignored.
    """
    server_ts = normalize_ts(updated_at).replace(microsecond=0)
    return server_ts > normalize_ts(client_ts).replace(microsecond=0)


def requested_unmodified_since():
    """
    Reads the If-Unmodified-Since header.
    Returns None when the client did not ask for a lock.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return None  # No optimistic lock requested

    try:
        return parse_ts(client_ts)
    except (ParserError, ValueError, OverflowError):
        abort(400, description="Invalid If-Unmodified-Since header")
