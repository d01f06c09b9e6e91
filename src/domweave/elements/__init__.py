"""Validated element construction."""

from .tags import HtmlTag, TagIdentifier, check_tag, is_valid_tag, valid_tags, validate
from .appliers import (
    INDEX_KEY,
    apply_attributes,
    apply_classes,
    apply_data_sources,
    apply_event_handlers,
    apply_index,
    apply_properties,
    parse_data_sources,
)
from .factory import ElementConfig, ElementFactory, create, get_factory, parse_config

__all__ = [
    # Tags
    "HtmlTag",
    "TagIdentifier",
    "check_tag",
    "is_valid_tag",
    "valid_tags",
    "validate",
    # Appliers
    "INDEX_KEY",
    "apply_attributes",
    "apply_classes",
    "apply_data_sources",
    "apply_event_handlers",
    "apply_index",
    "apply_properties",
    "parse_data_sources",
    # Factory
    "ElementConfig",
    "ElementFactory",
    "create",
    "get_factory",
    "parse_config",
]
