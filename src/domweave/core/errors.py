"""Error types raised at the domweave boundary."""

from typing import Iterable


class DomweaveError(Exception):
    """Base class for all domweave errors."""

    pass


class ValidationError(DomweaveError):
    """Validation failed."""

    pass


class InvalidTagError(ValidationError):
    """Tag is not one of the recognised HTML element identifiers."""

    def __init__(self, tag: object, valid_tags: Iterable[str]) -> None:
        self.tag = tag
        self.valid_tags = tuple(valid_tags)
        super().__init__(
            f"'{tag}' is not a valid HTML element. "
            f"Valid elements are: {', '.join(self.valid_tags)}"
        )


class SelectorError(ValidationError):
    """Selector string could not be parsed."""

    def __init__(self, selector: str, reason: str) -> None:
        self.selector = selector
        super().__init__(f"Invalid selector {selector!r}: {reason}")


class BlueprintError(ValidationError):
    """Declarative tree description is malformed."""

    pass


class HierarchyError(DomweaveError):
    """Illegal tree mutation (cycle, or node is not a child)."""

    pass


class JSONParseError(DomweaveError):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


__all__ = [
    "DomweaveError",
    "ValidationError",
    "InvalidTagError",
    "SelectorError",
    "BlueprintError",
    "HierarchyError",
    "JSONParseError",
]
