"""Declarative tree construction."""

from .parser import BlueprintBuilder, build_blueprint, validate_blueprint

__all__ = ["BlueprintBuilder", "build_blueprint", "validate_blueprint"]
