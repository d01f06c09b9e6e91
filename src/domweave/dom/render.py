"""Serialise node trees to HTML."""

import re
from html import escape

from .node import Node, TextNode, UiNode

VOID_ELEMENTS = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "source", "track", "wbr",
    }
)

_UPPER = re.compile(r"([A-Z])")


def dataset_attribute_name(key: str) -> str:
    """``fooBar`` -> ``data-foo-bar``."""
    return "data-" + _UPPER.sub(lambda m: "-" + m.group(1).lower(), key)


def _attribute_pairs(node: UiNode) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    if len(node.class_list):
        pairs.append(("class", node.class_list.value))
    pairs.extend(node.attributes.items())
    pairs.extend((dataset_attribute_name(key), value) for key, value in node.dataset.items())
    if len(node.style):
        pairs.append(("style", node.style.css_text))
    return pairs


def to_html(node: Node) -> str:
    """
    Render ``node`` and its subtree as HTML.

    Classes become ``class``, dataset entries ``data-*``, inline style
    ``style``. Properties and event listeners are not rendered.

    Args:
        node: Element or text node

    Returns:
        HTML string
    """
    if isinstance(node, TextNode):
        return escape(node.data, quote=False)
    if not isinstance(node, UiNode):
        raise TypeError(f"Cannot render {type(node).__name__}")

    parts = []
    for name, value in _attribute_pairs(node):
        parts.append(f" {name}" if value == "" else f' {name}="{escape(value)}"')
    opening = f"<{node.tag}{''.join(parts)}>"

    if node.tag in VOID_ELEMENTS:
        return opening

    inner = "".join(to_html(child) for child in node.child_nodes)
    return f"{opening}{inner}</{node.tag}>"
