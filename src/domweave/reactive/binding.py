"""Reactive Scalar Binding - keep a node's text equal to a tracked value."""

from dataclasses import dataclass, field
from typing import Any, Iterator

from ..core import get_logger
from ..dom import UiNode

logger = get_logger(__name__)


@dataclass
class _BindingState:
    target: UiNode
    name: str
    values: dict[str, Any] = field(default_factory=dict)


def _state(handle: "BindingHandle") -> _BindingState:
    # Bypasses __getattribute__ so a bound name can never shadow the state
    return object.__getattribute__(handle, "_state")


class BindingHandle:
    """
    Couples one variable name, its current value and one target node.

    Every write to the bound name updates ``target.text_content`` before the
    value is committed, so ``target.text_content == str(handle.value)`` holds
    after construction and after every write. Writes to other names are
    stored without touching the target.

    All writes go through :meth:`set`; attribute and item assignment are
    shorthands for it::

        handle = bind(node, "text", "Hello")
        handle.text = "World"       # same as handle.set("text", "World")
        handle["text"] = "World"    # same again

    The bound name always wins attribute access, even when it matches a
    handle member such as ``value`` or ``get``.
    """

    __slots__ = ("_state",)

    def __init__(self, target: UiNode, name: str, initial: Any) -> None:
        object.__setattr__(self, "_state", _BindingState(target, name))
        target.text_content = initial
        _state(self).values[name] = initial

    @property
    def bound_name(self) -> str:
        return _state(self).name

    @property
    def target(self) -> UiNode:
        return _state(self).target

    @property
    def value(self) -> Any:
        """Current value of the bound name."""
        state = _state(self)
        return state.values[state.name]

    def set(self, name: str, value: Any) -> None:
        """Write ``name``; for the bound name, render first, then commit."""
        state = _state(self)
        if name == state.name:
            state.target.text_content = value
            logger.debug("binding_updated", name=name, target=state.target)
        state.values[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return _state(self).values.get(name, default)

    def __getattribute__(self, name: str) -> Any:
        state = _state(self)
        if name == state.name:
            return state.values[name]
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        values = _state(self).values
        if name in values:
            return values[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name != _state(self).name and (name.startswith("__") or hasattr(type(self), name)):
            raise AttributeError(f"Cannot assign to {name!r} on a binding handle")
        BindingHandle.set(self, name, value)

    def __getitem__(self, name: str) -> Any:
        return _state(self).values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        BindingHandle.set(self, name, value)

    def __contains__(self, name: object) -> bool:
        return name in _state(self).values

    def __iter__(self) -> Iterator[str]:
        return iter(list(_state(self).values))

    def __repr__(self) -> str:
        state = _state(self)
        return f"BindingHandle({state.name}={state.values[state.name]!r} -> {state.target!r})"


def bind(target: UiNode, name: str, initial: Any) -> BindingHandle:
    """
    Bind ``name`` to ``target``'s displayed text.

    Args:
        target: Node whose text mirrors the value
        name: Variable name tracked by the handle; dunder names are reserved
        initial: Initial value, rendered immediately

    Returns:
        BindingHandle whose writes to ``name`` update ``target``
    """
    if not isinstance(name, str) or not name:
        raise TypeError(f"Binding name must be a non-empty string, got {name!r}")
    if name.startswith("__") and name.endswith("__"):
        raise ValueError(f"Binding name {name!r} is reserved")

    handle = BindingHandle(target, name, initial)
    logger.debug("binding_created", name=name, target=target)
    return handle


__all__ = ["BindingHandle", "bind"]
