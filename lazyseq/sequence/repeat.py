"""Repeat combinators

Back-to-back repetition of a whole sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .._helpers import require_int, require_source
from ..seq import LazySeq
from ..writer import Log

def repeat[T](source: Iterable[T], times: int) -> LazySeq[T]:
    """
    Yield source in full, times times over.

    times < 1 gives an empty sequence. Every pass calls iter(source) again,
    so source must be restartable (a list, a LazySeq, an IntRange): a
    one-shot iterator is exhausted after the first pass. An infinite source
    never reaches its second pass.
    """
    items = require_source(source)
    count = require_int(times, "times")

    def run() -> Iterator[T]:
        for _ in range(count):
            yield from items

    return LazySeq(run)

def repeat_writer[T](source: Iterable[T], times: int, log: Log[str]) -> LazySeq[T]:
    """Repeat that appends "repeat: pass i/n" to log as each pass begins."""
    items = require_source(source)
    count = require_int(times, "times")

    def run() -> Iterator[T]:
        for round_idx in range(count):
            log.append(f"repeat: pass {round_idx + 1}/{count}")
            yield from items

    return LazySeq(run)

# Historical name
repeated = repeat

__all__ = ("repeat", "repeat_writer", "repeated")
