import json
import re
from typing import Any

from plagcheck.collaborators.exceptions import ResponseParseError

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def parse_json_object(raw: str) -> dict[str, Any]:
    """Extract the JSON object from a model reply, tolerating code fences and prose.

    Raises:
        ResponseParseError: if no JSON object can be decoded.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    match = _JSON_OBJECT_RE.search(cleaned)
    if match is None:
        raise ResponseParseError("No JSON object in response")
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise ResponseParseError("JSON response must be an object")
    return parsed
