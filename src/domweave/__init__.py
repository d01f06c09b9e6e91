"""domweave - declarative element construction and reactive text bindings."""

from .core import (
    BlueprintError,
    DomweaveError,
    HierarchyError,
    InvalidTagError,
    SelectorError,
    Settings,
    ValidationError,
    configure_logging,
    get_settings,
)
from .dom import Document, Event, TextNode, UiNode, to_html
from .elements import ElementConfig, ElementFactory, HtmlTag, TagIdentifier, check_tag, create, validate
from .reactive import BindingHandle, bind
from .blueprint import BlueprintBuilder, build_blueprint, validate_blueprint

__version__: str = "0.1.0"

__all__ = [
    # Core surface
    "validate",
    "create",
    "bind",
    "check_tag",
    # Types
    "BindingHandle",
    "Document",
    "ElementConfig",
    "ElementFactory",
    "Event",
    "HtmlTag",
    "TagIdentifier",
    "TextNode",
    "UiNode",
    # Blueprints
    "BlueprintBuilder",
    "build_blueprint",
    "validate_blueprint",
    # Rendering
    "to_html",
    # Errors
    "BlueprintError",
    "DomweaveError",
    "HierarchyError",
    "InvalidTagError",
    "SelectorError",
    "ValidationError",
    # Config / logging
    "Settings",
    "configure_logging",
    "get_settings",
]
