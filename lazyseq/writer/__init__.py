"""
Writer
======

Log accumulation for lazyseq operations:
- Log[A] - monoidal log of entries
- WriterResult[T, E, W] - Result[T, E] paired with the log written while
  producing it

The *_writer variants of the sequence operations report through these
instead of a logging framework.
"""

from .log import Log
from .result import WriterResult, writer_error, writer_ok

__all__ = (
    "Log",
    "WriterResult",
    "writer_ok",
    "writer_error",
)
