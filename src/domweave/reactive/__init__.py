"""Reactive text bindings."""

from .binding import BindingHandle, bind

__all__ = ["BindingHandle", "bind"]
