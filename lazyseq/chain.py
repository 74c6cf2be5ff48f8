"""
Fluent chaining over lazy sequences.

Method-call style for the sequence and range operations:

    from lazyseq import chain, Chain

    chain(["a", "b"]).tap(print).repeat(2).join(glue="-")   # "a-b-a-b"
    Chain.range(1, 10, 3).to_list()                        # [1, 4, 7, 10]

Every step returns a new Chain; nothing runs until the chain is iterated
or a terminal method (join, to_list) is called.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from kungfu import Result

from ._errors import FormatError, InvalidInputError
from ._helpers import require_source
from ._types import Action, Formatter
from .ranges import to
from .seq import LazySeq
from .sequence import (
    JoinPolicy,
    for_each_tap,
    for_each_tap_writer,
    join_to_string,
    join_to_string_writer,
    repeat,
    repeat_writer,
    try_join_to_string,
)
from .writer import Log, WriterResult


@dataclass(frozen=True, slots=True)
class Chain[T]:
    """
    Fluent builder for chaining sequence operations.
    """

    seq: LazySeq[T]

    @staticmethod
    def range(start: int, end: int, step: int | None = None) -> Chain[int]:
        """Start a chain from an inclusive integer range."""
        return Chain(LazySeq.from_iterable(to(start, end, step)))

    def tap(self, action: Action[T] | None = None) -> Chain[T]:
        return Chain(for_each_tap(self.seq, action))

    def tap_log(self, log: Log[str], *, entry: Callable[[T], str] | None = None) -> Chain[T]:
        return Chain(for_each_tap_writer(self.seq, log, entry=entry))

    def repeat(self, times: int, *, log: Log[str] | None = None) -> Chain[T]:
        if log is None:
            return Chain(repeat(self.seq, times))
        return Chain(repeat_writer(self.seq, times, log))

    def join(
        self,
        policy: JoinPolicy[T] | None = None,
        *,
        glue: str | None = None,
        prefix: str | None = None,
        suffix: str | None = None,
        formatter: Formatter[T] | None = None,
    ) -> str:
        return join_to_string(
            self.seq, policy, glue=glue, prefix=prefix, suffix=suffix, formatter=formatter
        )

    def try_join(
        self,
        policy: JoinPolicy[T] | None = None,
        *,
        glue: str | None = None,
        prefix: str | None = None,
        suffix: str | None = None,
        formatter: Formatter[T] | None = None,
    ) -> Result[str, FormatError | InvalidInputError]:
        return try_join_to_string(
            self.seq, policy, glue=glue, prefix=prefix, suffix=suffix, formatter=formatter
        )

    def join_writer(
        self,
        policy: JoinPolicy[T] | None = None,
        *,
        log: Log[str] | None = None,
        glue: str | None = None,
        prefix: str | None = None,
        suffix: str | None = None,
        formatter: Formatter[T] | None = None,
    ) -> WriterResult[str, FormatError | InvalidInputError, Log[str]]:
        """Join, with the join entries appended after the entries already in log."""
        wr = join_to_string_writer(
            self.seq, policy, glue=glue, prefix=prefix, suffix=suffix, formatter=formatter
        )
        if log is None:
            return wr
        return WriterResult(wr.result, log.combine(wr.log))

    def to_list(self) -> list[T]:
        return self.seq.to_list()

    def lower(self) -> LazySeq[T]:
        return self.seq

    def __iter__(self) -> Iterator[T]:
        return iter(self.seq)


def chain[T](source: Iterable[T]) -> Chain[T]:
    """Start a chain from any iterable (re-iterated on every traversal)."""
    return Chain(LazySeq.from_iterable(require_source(source)))


__all__ = ("Chain", "chain")
