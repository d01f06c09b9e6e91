"""DOM node model.

An owned tree of :class:`UiNode` elements and :class:`TextNode` leaves with
explicit parent/child edges. Each element carries:

- an immutable tag
- a class list (ordered, duplicate free)
- a dataset (string-valued metadata store, separate from attributes)
- generic attributes
- a property bag for arbitrary named properties
- inline style declarations
- event listeners

``text_content`` follows DOM semantics: reading concatenates the text of all
descendants, writing replaces every child with a single text leaf.
"""

import re
from collections import UserDict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

from ..core import HierarchyError
from .selector import parse_selector

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def css_property_name(name: str) -> str:
    """Normalise a camelCase CSS property name to kebab-case."""
    if name.startswith("--"):
        return name
    return _CAMEL_BOUNDARY.sub("-", name).lower()


# ============================================================================
# Events
# ============================================================================


@dataclass
class Event:
    """Event delivered to listeners by :meth:`UiNode.dispatch_event`."""

    type: str
    target: "UiNode | None" = None
    detail: Any = None


EventHandler = Callable[[Event], Any]


# ============================================================================
# Node facets
# ============================================================================


class ClassList:
    """Ordered set of class tokens."""

    def __init__(self, tokens: tuple[str, ...] = ()) -> None:
        self._tokens: list[str] = []
        self.add(*tokens)

    @staticmethod
    def _check(token: str) -> None:
        if not token or any(ch.isspace() for ch in token):
            raise ValueError(f"Invalid class token: {token!r}")

    def add(self, *tokens: str) -> None:
        for token in tokens:
            self._check(token)
            if token not in self._tokens:
                self._tokens.append(token)

    def remove(self, *tokens: str) -> None:
        for token in tokens:
            self._check(token)
            if token in self._tokens:
                self._tokens.remove(token)

    def toggle(self, token: str, force: bool | None = None) -> bool:
        """Flip membership of ``token``; return whether it is now present."""
        self._check(token)
        present = token in self._tokens
        wanted = not present if force is None else force
        if wanted and not present:
            self._tokens.append(token)
        elif not wanted and present:
            self._tokens.remove(token)
        return wanted

    def contains(self, token: str) -> bool:
        return token in self._tokens

    def clear(self) -> None:
        self._tokens.clear()

    @property
    def value(self) -> str:
        return " ".join(self._tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"ClassList({self._tokens!r})"


class Dataset(UserDict):
    """Metadata store; values are always strings."""

    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(key, str(value))


class Style:
    """Inline CSS declarations.

    Accepts both ``backgroundColor`` and ``background-color``. Assigning an
    empty value removes the declaration.
    """

    def __init__(self) -> None:
        self._declarations: dict[str, str] = {}

    def set_property(self, name: str, value: Any) -> None:
        key = css_property_name(name)
        if value is None or value == "":
            self._declarations.pop(key, None)
        else:
            self._declarations[key] = str(value)

    def get_property_value(self, name: str) -> str:
        return self._declarations.get(css_property_name(name), "")

    def remove_property(self, name: str) -> str:
        return self._declarations.pop(css_property_name(name), "")

    @property
    def css_text(self) -> str:
        return " ".join(f"{key}: {value};" for key, value in self._declarations.items())

    def __getitem__(self, name: str) -> str:
        return self.get_property_value(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_property(name, value)

    def __delitem__(self, name: str) -> None:
        self.remove_property(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and css_property_name(name) in self._declarations

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._declarations))

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"Style({self.css_text!r})"


# ============================================================================
# Nodes
# ============================================================================


class Node:
    """Common base for elements and text leaves."""

    def __init__(self) -> None:
        self.parent: "UiNode | None" = None
        self.owner_document: Any = None

    @property
    def text_content(self) -> str:
        raise NotImplementedError

    @text_content.setter
    def text_content(self, value: Any) -> None:
        raise NotImplementedError


class TextNode(Node):
    """A run of text."""

    def __init__(self, data: Any = "") -> None:
        super().__init__()
        self.data = "" if data is None else str(data)

    @property
    def text_content(self) -> str:
        return self.data

    @text_content.setter
    def text_content(self, value: Any) -> None:
        self.data = "" if value is None else str(value)

    def __repr__(self) -> str:
        return repr(self.data)


class UiNode(Node):
    """An element in the tree."""

    # Properties that write through to node state instead of the property bag
    REFLECTED_PROPERTIES = frozenset({"id", "class_name", "title", "hidden", "text_content"})

    def __init__(self, tag: str) -> None:
        super().__init__()
        self._tag = str(getattr(tag, "value", tag))
        self.class_list = ClassList()
        self.dataset = Dataset()
        self.style = Style()
        self.properties: dict[str, Any] = {}
        self._attributes: dict[str, str] = {}
        self._listeners: dict[str, list[EventHandler]] = {}
        self._children: list[Node] = []

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def id(self) -> str:
        return self._attributes.get("id", "")

    @id.setter
    def id(self, value: Any) -> None:
        self._attributes["id"] = str(value)

    @property
    def class_name(self) -> str:
        return self.class_list.value

    @class_name.setter
    def class_name(self, value: Any) -> None:
        self.class_list.clear()
        self.class_list.add(*str(value).split())

    @property
    def title(self) -> str:
        return self._attributes.get("title", "")

    @title.setter
    def title(self, value: Any) -> None:
        self._attributes["title"] = str(value)

    @property
    def hidden(self) -> bool:
        return "hidden" in self._attributes

    @hidden.setter
    def hidden(self, value: Any) -> None:
        if value:
            self._attributes["hidden"] = ""
        else:
            self._attributes.pop("hidden", None)

    # ------------------------------------------------------------------
    # Attributes and properties
    # ------------------------------------------------------------------

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of generic attributes."""
        return MappingProxyType(self._attributes)

    def set_attribute(self, name: str, value: Any) -> None:
        if name == "class":
            self.class_name = value
        elif name == "style":
            for declaration in str(value).split(";"):
                key, sep, val = declaration.partition(":")
                if sep and key.strip():
                    self.style.set_property(key.strip(), val.strip())
        else:
            self._attributes[name] = str(value)

    def get_attribute(self, name: str) -> str | None:
        if name == "class":
            return self.class_name or None
        if name == "style":
            return self.style.css_text or None
        return self._attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return self.get_attribute(name) is not None

    def remove_attribute(self, name: str) -> None:
        if name == "class":
            self.class_list.clear()
        elif name == "style":
            self.style = Style()
        else:
            self._attributes.pop(name, None)

    def set_property(self, name: str, value: Any) -> None:
        """Assign a named property, writing through reflected ones."""
        if name in self.REFLECTED_PROPERTIES:
            setattr(self, name, value)
        else:
            self.properties[name] = value

    def get_property(self, name: str, default: Any = None) -> Any:
        if name in self.REFLECTED_PROPERTIES:
            return getattr(self, name)
        return self.properties.get(name, default)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found normally
        properties = self.__dict__.get("properties")
        if properties is not None and name in properties:
            return properties[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    @property
    def child_nodes(self) -> tuple[Node, ...]:
        return tuple(self._children)

    @property
    def children(self) -> tuple["UiNode", ...]:
        return tuple(child for child in self._children if isinstance(child, UiNode))

    def append_child(self, child: Node) -> Node:
        """Attach ``child`` as the last child, detaching it from any previous parent."""
        if isinstance(child, UiNode) and child.contains(self):
            raise HierarchyError(f"Cannot append {child!r} inside its own subtree")
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self._children.append(child)
        return child

    def remove_child(self, child: Node) -> Node:
        if child.parent is not self:
            raise HierarchyError(f"{child!r} is not a child of {self!r}")
        self._children = [node for node in self._children if node is not child]
        child.parent = None
        return child

    def contains(self, other: Node | None) -> bool:
        """True if ``other`` is this node or one of its descendants."""
        node = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def iter_descendants(self) -> Iterator["UiNode"]:
        """Yield descendant elements in document (pre-order) order."""
        for child in self._children:
            if isinstance(child, UiNode):
                yield child
                yield from child.iter_descendants()

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self._children)

    @text_content.setter
    def text_content(self, value: Any) -> None:
        for child in self._children:
            child.parent = None
        self._children = []
        text = "" if value is None else str(value)
        if text:
            self.append_child(TextNode(text))

    # ------------------------------------------------------------------
    # Queries (scoped to descendants)
    # ------------------------------------------------------------------

    def matches(self, selector: str) -> bool:
        return parse_selector(selector).matches(self)

    def query_selector(self, selector: str) -> "UiNode | None":
        matcher = parse_selector(selector)
        return next((node for node in self.iter_descendants() if matcher.matches(node)), None)

    def query_selector_all(self, selector: str) -> list["UiNode"]:
        matcher = parse_selector(selector)
        return [node for node in self.iter_descendants() if matcher.matches(node)]

    def get_element_by_id(self, element_id: str) -> "UiNode | None":
        return next((node for node in self.iter_descendants() if node.id == element_id), None)

    def get_elements_by_class_name(self, class_names: str) -> list["UiNode"]:
        wanted = class_names.split()
        if not wanted:
            return []
        return [
            node
            for node in self.iter_descendants()
            if all(name in node.class_list for name in wanted)
        ]

    def get_elements_by_tag_name(self, tag: str) -> list["UiNode"]:
        if tag == "*":
            return list(self.iter_descendants())
        return [node for node in self.iter_descendants() if node.tag.lower() == tag.lower()]

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        """Register ``handler``; registering the same handler twice calls it twice."""
        self._listeners.setdefault(event_type, []).append(handler)

    def remove_event_listener(self, event_type: str, handler: EventHandler) -> bool:
        handlers = self._listeners.get(event_type, [])
        for i, registered in enumerate(handlers):
            if registered is handler:
                del handlers[i]
                return True
        return False

    def listeners(self, event_type: str) -> tuple[EventHandler, ...]:
        return tuple(self._listeners.get(event_type, ()))

    def dispatch_event(self, event: Event | str, detail: Any = None) -> Event:
        """Invoke listeners synchronously in registration order. No bubbling."""
        if isinstance(event, str):
            event = Event(type=event, detail=detail)
        event.target = self
        for handler in list(self._listeners.get(event.type, ())):
            handler(event)
        return event

    def __repr__(self) -> str:
        label = self._tag
        if self.id:
            label += f"#{self.id}"
        for token in self.class_list:
            label += f".{token}"
        return f"<{label}>"
