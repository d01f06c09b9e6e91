"""Node tree model, host document, selectors and rendering."""

from .node import ClassList, Dataset, Event, EventHandler, Node, Style, TextNode, UiNode
from .document import Document
from .selector import SelectorList, parse_selector
from .render import to_html

__all__ = [
    "ClassList",
    "Dataset",
    "Document",
    "Event",
    "EventHandler",
    "Node",
    "SelectorList",
    "Style",
    "TextNode",
    "UiNode",
    "parse_selector",
    "to_html",
]
