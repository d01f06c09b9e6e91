"""Fast JSON parsing for blueprint documents."""

from typing import Any

import msgspec
import orjson
from json_repair import repair_json

from .errors import JSONParseError


def extract_json_boundaries(text: str) -> tuple[str, int, int] | None:
    """
    Extract JSON string and boundaries from text.

    Accepts a top-level object or array, optionally wrapped in a markdown
    code fence.

    Args:
        text: Text potentially containing JSON

    Returns:
        (extracted_text, start, end) or None if not found
    """
    working_text = text

    # Remove markdown code blocks
    if "```" in working_text:
        if "```json" in working_text:
            start_marker = working_text.find("```json") + 7
        else:
            start_marker = working_text.find("```") + 3

        end_marker = working_text.find("```", start_marker)
        if end_marker != -1:
            working_text = working_text[start_marker:end_marker].strip()

    starts = [i for i in (working_text.find("{"), working_text.find("[")) if i != -1]
    if not starts:
        return None
    start = min(starts)
    closer = "}" if working_text[start] == "{" else "]"
    end = working_text.rfind(closer)

    if end == -1:
        return None

    return (working_text, start, end + 1)


def extract_json(text: str, repair: bool = True) -> dict[str, Any] | list[Any]:
    """
    Extract and parse a JSON object or array from text.

    Args:
        text: Text containing JSON
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON object or array

    Raises:
        JSONParseError: If parsing fails
    """
    text = text.strip()

    boundaries = extract_json_boundaries(text)
    if boundaries is None:
        raise JSONParseError("No JSON object or array found in text")

    extracted_text, start, end = boundaries
    json_str = extracted_text[start:end]

    # Try msgspec first (fastest)
    try:
        return msgspec.json.decode(json_str.encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e

    # Last resort: repair, then decode the repaired text
    try:
        repaired = repair_json(json_str)
        result = orjson.loads(repaired)
    except (orjson.JSONDecodeError, ValueError) as repair_error:
        raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error

    if not isinstance(result, (dict, list)):
        raise JSONParseError(f"Expected object or array, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any) -> str:
    """Encode object to a compact JSON string."""
    try:
        return orjson.dumps(obj).decode("utf-8")
    except TypeError as e:
        raise JSONParseError(f"Object is not JSON serialisable: {e}", e) from e
