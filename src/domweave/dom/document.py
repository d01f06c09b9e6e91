"""Host document: node creation primitives and document-wide queries."""

from typing import Any, Iterator

from .node import TextNode, UiNode
from .selector import parse_selector


class Document:
    """
    Root of a node tree.

    Owns ``document_element`` (``<html>``) with ``head`` and ``body``
    children. ``create_element`` is the unvalidated host primitive; validated
    construction goes through :func:`domweave.elements.create`.
    """

    def __init__(self) -> None:
        self.document_element = self.create_element("html")
        self.head = self.create_element("head")
        self.body = self.create_element("body")
        self.document_element.append_child(self.head)
        self.document_element.append_child(self.body)

    def create_element(self, tag: str) -> UiNode:
        node = UiNode(tag)
        node.owner_document = self
        return node

    def create_text_node(self, data: Any) -> TextNode:
        node = TextNode(data)
        node.owner_document = self
        return node

    def iter_elements(self) -> Iterator[UiNode]:
        """All elements, ``document_element`` first, in document order."""
        yield self.document_element
        yield from self.document_element.iter_descendants()

    def get_element_by_id(self, element_id: str) -> UiNode | None:
        return next((node for node in self.iter_elements() if node.id == element_id), None)

    def get_elements_by_class_name(self, class_names: str) -> list[UiNode]:
        wanted = class_names.split()
        if not wanted:
            return []
        return [
            node
            for node in self.iter_elements()
            if all(name in node.class_list for name in wanted)
        ]

    def get_elements_by_tag_name(self, tag: str) -> list[UiNode]:
        if tag == "*":
            return list(self.iter_elements())
        return [node for node in self.iter_elements() if node.tag.lower() == tag.lower()]

    def query_selector(self, selector: str) -> UiNode | None:
        matcher = parse_selector(selector)
        return next((node for node in self.iter_elements() if matcher.matches(node)), None)

    def query_selector_all(self, selector: str) -> list[UiNode]:
        matcher = parse_selector(selector)
        return [node for node in self.iter_elements() if matcher.matches(node)]

    def clear(self) -> None:
        """Remove everything under ``body``."""
        self.body.text_content = ""

    def __repr__(self) -> str:
        return f"Document({self.body!r})"
