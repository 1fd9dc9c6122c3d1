import json
import re
from typing import Any, Dict, Optional

from pagecraft.domain.exceptions import AIResponseParseError

_FENCE = re.compile(r"^```(?:json|JSON)?\s*\n?([\s\S]*?)\n?```\s*$")


def strip_code_fences(text: str) -> str:
    text = text.strip()
    match = _FENCE.match(text)
    return match.group(1).strip() if match else text


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    try:
        value = json.loads(text)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


def _balanced_objects(text: str):
    """Yield every top-level {...} span, skipping braces inside strings."""
    depth = 0
    start = None
    in_string = False
    escaped = False

    for i, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"' and depth > 0:
            in_string = True
        elif ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                yield text[start:i + 1]


def extract_json_object(raw: Optional[str]) -> Dict[str, Any]:
    """
    Pull the JSON object out of a model reply.

    Accepts bare JSON, fenced JSON, or JSON surrounded by prose. Raises
    AIResponseParseError when no object can be recovered.
    """
    if not raw or not raw.strip():
        raise AIResponseParseError("Empty response from the completion service")

    text = strip_code_fences(raw)

    parsed = _loads_object(text)
    if parsed is not None:
        return parsed

    for candidate in _balanced_objects(text):
        parsed = _loads_object(candidate)
        if parsed is not None:
            return parsed

    raise AIResponseParseError("No JSON object found in the completion response")
