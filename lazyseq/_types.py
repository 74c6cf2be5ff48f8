"""
Core type definitions for lazyseq.

Aliases shared by the sequence and range operations.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator

# ============================================================================
# Type aliases
# ============================================================================

# Action = side effect run on an element as it passes through
type Action[T] = Callable[[T], None]

# Formatter = function that renders an element for joining
type Formatter[T] = Callable[[T], str]

# Factory = zero-arg function producing a fresh iterator for one traversal
type Factory[T] = Callable[[], Iterator[T]]

# NoError = "never fails" semantic for Result-returning helpers
type NoError = typing.Never

__all__ = (
    "Action",
    "Formatter",
    "Factory",
    "NoError",
)
