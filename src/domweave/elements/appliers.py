"""Attribute Appliers.

Each applier mutates one facet of a node, is a no-op for absent or empty
input, and can be applied repeatedly with the same input without changing
the result. None of them raise on malformed optional input.
"""

from typing import Any, Mapping

from ..dom import EventHandler, UiNode

INDEX_KEY = "index"


def apply_classes(node: UiNode, class_spec: str | None) -> None:
    """Add whitespace-separated class tokens (union, never removes)."""
    if not class_spec:
        return
    node.class_list.add(*class_spec.split())


def apply_index(node: UiNode, position_index: int | str | None, *, skip_zero: bool = False) -> None:
    """
    Store the position index under ``dataset["index"]``.

    ``None`` and ``""`` are absent. ``0`` is a real index unless
    ``skip_zero`` is set.
    """
    if position_index is None or position_index == "" or position_index is False:
        return
    if skip_zero and position_index == 0:
        return
    node.dataset[INDEX_KEY] = str(position_index)


def parse_data_sources(data_spec: str | None) -> dict[str, str]:
    """
    Parse ``"key:value key2:value2"`` into a mapping.

    Tokens split once on the first ``:``. Tokens with no colon, an empty key
    or an empty value are skipped.
    """
    entries: dict[str, str] = {}
    if not data_spec:
        return entries

    for token in data_spec.split():
        key, sep, value = token.partition(":")
        if sep and key and value:
            entries[key] = value
    return entries


def apply_data_sources(node: UiNode, data_spec: str | None) -> None:
    """Write parsed ``key:value`` tokens into the node's dataset."""
    for key, value in parse_data_sources(data_spec).items():
        node.dataset[key] = value


def apply_attributes(node: UiNode, attributes: Mapping[str, str] | None) -> None:
    """Set each generic attribute verbatim, overwriting."""
    for name, value in (attributes or {}).items():
        node.set_attribute(name, value)


def apply_properties(node: UiNode, properties: Mapping[str, Any] | None) -> None:
    """Assign each named property, overwriting."""
    for name, value in (properties or {}).items():
        node.set_property(name, value)


def apply_event_handlers(node: UiNode, event_handlers: Mapping[str, EventHandler] | None) -> None:
    """Register each handler for its event; no de-duplication."""
    for event_type, handler in (event_handlers or {}).items():
        node.add_event_listener(event_type, handler)


__all__ = [
    "INDEX_KEY",
    "apply_classes",
    "apply_index",
    "parse_data_sources",
    "apply_data_sources",
    "apply_attributes",
    "apply_properties",
    "apply_event_handlers",
]
