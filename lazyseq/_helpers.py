"""Internal helpers for lazyseq.

Argument checks and default callbacks shared by the sequence and range modules.
Not part of the public API."""

from __future__ import annotations

from collections.abc import Iterable

from ._errors import InvalidInputError
from .lift import optional, unsafe

# No-op action
def noop(_: object) -> None:
    """Action that does nothing; stands in for an absent action."""

# Default stringification
def display_string(item: object) -> str:
    """
    Render an element with its natural text form.

    None renders as the literal "null" so joined output keeps a visible
    placeholder for absent elements.
    """
    if item is None:
        return "null"
    return str(item)

# Argument checks
def require_source[T](source: Iterable[T] | None, argument: str = "source") -> Iterable[T]:
    """Return source unchanged, raise InvalidInputError if it is None."""
    return unsafe(optional(source, error=lambda: InvalidInputError(argument)))

def require_int(value: object, argument: str) -> int:
    """Return value unchanged, raise InvalidInputError if it is not an int."""
    if not isinstance(value, int):
        raise InvalidInputError(argument, f"must be an int, got {type(value).__name__}")
    return value

__all__ = (
    "noop",
    "display_string",
    "require_source",
    "require_int",
)
