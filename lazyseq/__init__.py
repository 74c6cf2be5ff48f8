"""
Lazy sequence helpers.

Small, independent operations over iterables and integers:
element-wise side effects, joining into a delimited string, whole-sequence
repetition and inclusive integer ranges.

Architecture:
- Plain functions return a restartable LazySeq (or a str for joins) and raise
  on invalid input
- try_* functions return kungfu Result instead of raising
- *_writer functions also record what happened in a Log
- Chain gives the same operations in method-call style
"""

# Core types
from ._types import Action, Factory, Formatter, NoError
from .seq import LazySeq

# Result bridge
from . import lift

# Writer
from . import writer
from .writer import Log, WriterResult

# Sequence operations
from .sequence import (
    DEFAULT_GLUE,
    JoinPolicy,
    # Plain
    for_each_tap,
    join_to_string,
    repeat,
    # Result
    try_join_to_string,
    # Writer
    for_each_tap_writer,
    join_to_string_writer,
    repeat_writer,
    # Generic
    joinM,
    # Historical names
    repeated,
    to_flat_string,
    with_each,
)

# Range operations
from .ranges import IntRange, RangeIterator, RangeState, range_to, range_to_step, to

# Fluent
from .chain import Chain, chain

# Errors
from ._errors import FormatError, InvalidInputError

__all__ = (
    # Types
    "Action",
    "Factory",
    "Formatter",
    "NoError",
    "LazySeq",
    # Lift module
    "lift",
    # Writer module
    "writer",
    "Log",
    "WriterResult",
    # Sequence - plain
    "for_each_tap",
    "join_to_string",
    "repeat",
    # Sequence - Result
    "try_join_to_string",
    # Sequence - Writer
    "for_each_tap_writer",
    "join_to_string_writer",
    "repeat_writer",
    # Sequence - Generic
    "joinM",
    # Sequence - options
    "DEFAULT_GLUE",
    "JoinPolicy",
    # Sequence - historical names
    "repeated",
    "to_flat_string",
    "with_each",
    # Ranges
    "IntRange",
    "RangeIterator",
    "RangeState",
    "range_to",
    "range_to_step",
    "to",
    # Fluent
    "Chain",
    "chain",
    # Errors
    "FormatError",
    "InvalidInputError",
)
