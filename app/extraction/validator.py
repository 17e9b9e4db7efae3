"""Turns a raw model reply into ExtractedFields."""

import json
import re
from typing import Any

from app.extraction.exceptions import ExtractionError, ExtractionValidationError
from app.extraction.models import FIELD_NAMES, ExtractedFields

_FENCED = re.compile(r"^```[a-zA-Z]*\s*\n(?P<body>.*?)\n?```\s*$", re.DOTALL)


def parse_response(raw: str) -> dict[str, Any]:
    """Decode a JSON object reply, tolerating a surrounding markdown fence.

    Raises:
        ExtractionError: if the reply is not a JSON object.
    """
    text = raw.strip()
    fenced = _FENCED.match(text)
    if fenced:
        text = fenced.group("body").strip()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Invalid JSON response: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ExtractionError("JSON response must be an object")
    return data


def validate_and_build(data: dict[str, Any]) -> ExtractedFields:
    """Validate raw parsed JSON and build ExtractedFields.

    Missing or null fields become empty strings. Unknown keys are ignored.

    Raises:
        ExtractionValidationError: if a known field holds a non-string value.
    """
    if not isinstance(data, dict):
        raise ExtractionValidationError("Extraction result must be an object")
    values: dict[str, str] = {}
    for wire_name, attr_name in FIELD_NAMES.items():
        values[attr_name] = _build_text(data.get(wire_name), wire_name)
    return ExtractedFields(**values)


def _build_text(raw: Any, wire_name: str) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ExtractionValidationError(
            f"'{wire_name}' must be a string, got {type(raw).__name__}"
        )
    return raw.strip()
