"""Input limits shared by the declarative builders."""

from dataclasses import dataclass
from typing import Any

from .errors import ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate JSON size before parsing.

    Args:
        data: JSON string to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        ValidationError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise ValidationError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 40, current_depth: int = 0) -> None:
    """
    Validate nesting depth to prevent runaway recursion.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        ValidationError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise ValidationError(f"Nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
