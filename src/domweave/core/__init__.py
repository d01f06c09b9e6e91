"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    DomweaveError,
    ValidationError,
    InvalidTagError,
    SelectorError,
    BlueprintError,
    HierarchyError,
    JSONParseError,
)
from .validate import ValidationResult, validate_json_size, validate_json_depth
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import extract_json, safe_json_dumps


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "DomweaveError",
    "ValidationError",
    "InvalidTagError",
    "SelectorError",
    "BlueprintError",
    "HierarchyError",
    "JSONParseError",
    # Validation
    "ValidationResult",
    "validate_json_size",
    "validate_json_depth",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "safe_json_dumps",
]
