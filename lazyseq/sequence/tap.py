"""Side effects on sequences

Actions execute for observation only (logging, counting, debugging)
and never change the elements passing through."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._helpers import display_string, noop, require_source
from .._types import Action
from ..seq import LazySeq
from ..writer import Log

def for_each_tap[T](
    source: Iterable[T],
    action: Action[T] | None = None,
) -> LazySeq[T]:
    """
    Run action on each element as it is pulled, then yield it unchanged.

    The action for element i runs before element i reaches the consumer and
    before the action for element i+1. Elements the consumer never pulls are
    never visited. A None action yields the elements with no side effect.

    Example:
        seen = []
        xs = for_each_tap([1, 2, 3], seen.append)
        next(iter(xs))  # 1, seen == [1]
    """
    items = require_source(source)
    effect = action if action is not None else noop

    def run() -> Iterator[T]:
        for item in items:
            effect(item)
            yield item

    return LazySeq(run)

def for_each_tap_writer[T](
    source: Iterable[T],
    log: Log[str],
    *,
    entry: Callable[[T], str] | None = None,
) -> LazySeq[T]:
    """Tap that appends entry(item) to log for every pulled element."""
    render = entry if entry is not None else display_string
    return for_each_tap(source, lambda item: log.append(render(item)))

# Historical name
with_each = for_each_tap

__all__ = ("for_each_tap", "for_each_tap_writer", "with_each")
