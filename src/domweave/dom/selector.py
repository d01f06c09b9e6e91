"""CSS selector subset used by the query helpers.

Supported syntax:
- type selectors (``div``) and the universal selector (``*``)
- ``#id``, ``.class``, ``[attr]`` and ``[attr=value]`` (value quoted or bare)
- descendant (whitespace) and child (``>``) combinators
- comma-separated selector groups

Anything else raises :class:`SelectorError`.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from ..core import SelectorError

_TOKEN = re.compile(
    r"""
    (?P<comma>\s*,\s*)
  | (?P<child>\s*>\s*)
  | (?P<descendant>\s+)
  | (?P<type>\*|[A-Za-z][\w-]*)
  | (?P<id>\#[\w-]+)
  | (?P<cls>\.[\w-]+)
  | (?P<attr>\[\s*(?P<aname>[\w:-]+)\s*(?:=\s*(?P<aval>"[^"]*"|'[^']*'|[^\]\s"']+)\s*)?\])
    """,
    re.VERBOSE,
)

_KINDS = ("comma", "child", "descendant", "type", "id", "cls", "attr")


@dataclass(frozen=True)
class Compound:
    """A run of simple selectors that must all match the same node."""

    tag: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str | None], ...] = ()

    def is_empty(self) -> bool:
        return self.tag is None and self.id is None and not self.classes and not self.attributes

    def matches(self, node: Any) -> bool:
        if self.tag is not None and self.tag != "*" and node.tag.lower() != self.tag.lower():
            return False
        if self.id is not None and node.id != self.id:
            return False
        for class_name in self.classes:
            if class_name not in node.class_list:
                return False
        for name, expected in self.attributes:
            actual = node.get_attribute(name)
            if actual is None:
                return False
            if expected is not None and actual != expected:
                return False
        return True


@dataclass(frozen=True)
class ComplexSelector:
    """Compounds joined by combinators, matched right to left."""

    compounds: tuple[Compound, ...]
    combinators: tuple[str, ...]

    def matches(self, node: Any) -> bool:
        return self._match_at(node, len(self.compounds) - 1)

    def _match_at(self, node: Any, index: int) -> bool:
        if not self.compounds[index].matches(node):
            return False
        if index == 0:
            return True

        ancestor = node.parent
        if self.combinators[index - 1] == ">":
            return ancestor is not None and self._match_at(ancestor, index - 1)

        while ancestor is not None:
            if self._match_at(ancestor, index - 1):
                return True
            ancestor = ancestor.parent
        return False


@dataclass(frozen=True)
class SelectorList:
    """Comma-separated selector groups; a node matches if any group does."""

    source: str
    groups: tuple[ComplexSelector, ...]

    def matches(self, node: Any) -> bool:
        return any(group.matches(node) for group in self.groups)


class _CompoundBuilder:
    def __init__(self) -> None:
        self.tag: str | None = None
        self.id: str | None = None
        self.classes: list[str] = []
        self.attributes: list[tuple[str, str | None]] = []

    def build(self) -> Compound:
        return Compound(self.tag, self.id, tuple(self.classes), tuple(self.attributes))


def _unquote(value: str | None) -> str | None:
    if value is not None and len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


@lru_cache(maxsize=256)
def parse_selector(selector: str) -> SelectorList:
    """
    Parse a selector string into a matcher.

    Args:
        selector: Selector text, e.g. ``"ul.menu > li[data-state=open]"``

    Returns:
        Parsed SelectorList

    Raises:
        SelectorError: If the selector is empty or uses unsupported syntax
    """
    text = selector.strip()
    if not text:
        raise SelectorError(selector, "selector is empty")

    groups: list[ComplexSelector] = []
    compounds: list[Compound] = []
    combinators: list[str] = []
    current = _CompoundBuilder()

    def close_compound() -> None:
        nonlocal current
        compound = current.build()
        if compound.is_empty():
            raise SelectorError(selector, "combinator or comma without a selector")
        compounds.append(compound)
        current = _CompoundBuilder()

    def close_group() -> None:
        close_compound()
        groups.append(ComplexSelector(tuple(compounds), tuple(combinators)))
        compounds.clear()
        combinators.clear()

    pos = 0
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None:
            raise SelectorError(selector, f"unexpected {text[pos]!r} at position {pos}")
        kind = next(k for k in _KINDS if match.group(k) is not None)

        if kind == "comma":
            close_group()
        elif kind == "child":
            close_compound()
            combinators.append(">")
        elif kind == "descendant":
            close_compound()
            combinators.append(" ")
        elif kind == "type":
            if current.build() != Compound():
                raise SelectorError(selector, "type selector must come first in a compound")
            current.tag = match.group("type")
        elif kind == "id":
            current.id = match.group("id")[1:]
        elif kind == "cls":
            current.classes.append(match.group("cls")[1:])
        else:
            current.attributes.append((match.group("aname"), _unquote(match.group("aval"))))

        pos = match.end()

    close_group()
    return SelectorList(source=selector, groups=tuple(groups))
