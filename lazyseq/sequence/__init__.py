from .join import (
    DEFAULT_GLUE,
    JoinPolicy,
    join_to_string,
    join_to_string_writer,
    joinM,
    to_flat_string,
    try_join_to_string,
)
from .repeat import repeat, repeat_writer, repeated
from .tap import for_each_tap, for_each_tap_writer, with_each

__all__ = (
    # Plain
    "for_each_tap",
    "join_to_string",
    "repeat",
    # Result
    "try_join_to_string",
    # Writer
    "for_each_tap_writer",
    "join_to_string_writer",
    "repeat_writer",
    # Generic
    "joinM",
    # Options
    "DEFAULT_GLUE",
    "JoinPolicy",
    # Historical names
    "repeated",
    "to_flat_string",
    "with_each",
)
