from __future__ import annotations

class InvalidInputError(ValueError):
    """A required argument was absent or of the wrong kind."""

    argument: str
    reason: str

    def __init__(self, argument: str, reason: str = "must not be None") -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument} {reason}")

class FormatError(Exception):
    """Formatter raised while rendering an element for joining."""

    index: int
    item: object
    cause: Exception

    def __init__(self, index: int, item: object, cause: Exception) -> None:
        self.index = index
        self.item = item
        self.cause = cause
        super().__init__(f"Formatter failed on element {index}: {cause!r}")

__all__ = ("FormatError", "InvalidInputError")
