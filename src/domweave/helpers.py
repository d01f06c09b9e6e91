"""DOM helpers.

Thin wrappers over the node and document primitives. Lookups take an
explicit scope (a :class:`Document` or a :class:`UiNode`) instead of a
global document. Style and class helpers silently do nothing when the
element, property or value is missing.
"""

from typing import Any, Iterable

from .dom import Document, Node, UiNode

Scope = Document | UiNode


def add_element(parent: UiNode, child: Node) -> None:
    """Append ``child`` to ``parent``."""
    parent.append_child(child)


def remove_element(parent: UiNode, child: Node) -> None:
    """Remove ``child`` from ``parent``."""
    parent.remove_child(child)


def find_by_id(scope: Scope, element_id: str) -> UiNode | None:
    return scope.get_element_by_id(element_id)


def find_by_class(scope: Scope, class_name: str) -> list[UiNode]:
    return scope.get_elements_by_class_name(class_name)


def find_all_by_class(scope: Scope, class_name: str) -> list[UiNode]:
    return scope.query_selector_all(f".{class_name}")


def find_by_tag(scope: Scope, tag: str) -> list[UiNode]:
    return scope.query_selector_all(tag)


def find_by_selector(scope: Scope, selector: str) -> UiNode | None:
    return scope.query_selector(selector)


def find_all_by_selector(scope: Scope, selector: str) -> list[UiNode]:
    return scope.query_selector_all(selector)


def set_style(element: UiNode | None, prop: str, value: Any) -> None:
    if element is not None and prop and value:
        element.style[prop] = value


def get_style(element: UiNode | None, prop: str) -> str:
    """Inline style value, or ``""``. There is no cascade."""
    if element is not None and prop:
        return element.style[prop]
    return ""


def delete_style(element: UiNode | None, prop: str) -> None:
    if element is not None and prop:
        element.style[prop] = ""


def toggle_class(element: UiNode | None, class_name: str) -> None:
    if element is not None and class_name:
        element.class_list.toggle(class_name)


def add_classes(element: UiNode | None, class_names: Iterable[str] | None) -> None:
    if element is not None and class_names:
        element.class_list.add(*class_names)


def remove_classes(element: UiNode | None, class_names: Iterable[str] | None) -> None:
    if element is not None and class_names:
        element.class_list.remove(*class_names)


__all__ = [
    "add_element",
    "remove_element",
    "find_by_id",
    "find_by_class",
    "find_all_by_class",
    "find_by_tag",
    "find_by_selector",
    "find_all_by_selector",
    "set_style",
    "get_style",
    "delete_style",
    "toggle_class",
    "add_classes",
    "remove_classes",
]
