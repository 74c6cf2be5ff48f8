"""LazySeq - restartable lazy sequence

Wraps a zero-arg generator factory, the same way LazyCoroResult wraps a
coroutine thunk: nothing runs until the sequence is iterated, and every
iteration calls the factory again for an independent traversal."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from ._types import Factory


class LazySeq[T]:
    """
    Produce-on-demand, re-iterable sequence.

    - Lazy: elements are computed only when pulled by a consumer.
    - Restartable: each ``iter()`` starts a fresh traversal from the factory.
    - Abandonment is the only cancellation: stop iterating and the rest of
      the sequence is never computed.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Factory[T], /) -> None:
        """Create LazySeq from a fn returning a fresh iterator."""
        self._factory = factory

    @staticmethod
    def of[V](*items: V) -> LazySeq[V]:
        """Sequence over the given items."""
        return LazySeq(lambda: iter(items))

    @staticmethod
    def empty() -> LazySeq[typing.Never]:
        """Sequence with no elements."""
        return LazySeq(lambda: iter(()))

    @staticmethod
    def from_iterable[V](iterable: Iterable[V], /) -> LazySeq[V]:
        """
        Wrap an iterable, re-iterating it on every traversal.

        NOTE: a one-shot iterator (generator object, file handle) stays
              one-shot: the second traversal sees it already exhausted.
        """
        if isinstance(iterable, LazySeq):
            return iterable
        return LazySeq(lambda: iter(iterable))

    # Materialization

    def to_list(self) -> list[T]:
        return list(self)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self)

    # Protocol methods

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def __call__(self) -> Iterator[T]:
        """Start a new traversal, same as iter(self)."""
        return self._factory()

    def __repr__(self) -> str:
        return f"LazySeq({self._factory!r})"


__all__ = ("LazySeq",)
