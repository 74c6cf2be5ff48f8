"""Inclusive integer ranges

Both ends are included, and the direction of travel comes from the step.
Degenerate requests (zero step, step pointing away from end) produce an
empty range instead of an error."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .._helpers import require_int


class RangeState(enum.Enum):
    """Lifecycle of a RangeIterator."""

    NOT_STARTED = "not_started"
    EMITTING = "emitting"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class IntRange:
    """
    Immutable inclusive range ``start, start+step, ...`` up to ``end``.

    Re-iterable: every ``iter()`` returns a new RangeIterator, so two
    traversals never share a cursor.

    Empty when, in priority order:
    1. step == 0
    2. start > end and step > 0
    3. start < end and step < 0
    """

    start: int
    end: int
    step: int = 1

    def __post_init__(self) -> None:
        require_int(self.start, "start")
        require_int(self.end, "end")
        require_int(self.step, "step")

    @property
    def is_degenerate(self) -> bool:
        if self.step == 0:
            return True
        if self.start > self.end and self.step > 0:
            return True
        if self.start < self.end and self.step < 0:
            return True
        return False

    def within_bound(self, value: int) -> bool:
        """True while value has not passed end in the direction of travel."""
        if self.step > 0:
            return value <= self.end
        return value >= self.end

    def __iter__(self) -> RangeIterator:
        return RangeIterator(self)

    def __len__(self) -> int:
        if self.is_degenerate:
            return 0
        return abs(self.end - self.start) // abs(self.step) + 1

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or self.is_degenerate:
            return False
        low, high = sorted((self.start, self.end))
        return low <= value <= high and (value - self.start) % self.step == 0


class RangeIterator:
    """
    Pull-based cursor over an IntRange.

    NOT_STARTED -> EMITTING -> EXHAUSTED, or NOT_STARTED -> EXHAUSTED on the
    first pull of a degenerate range. Pulling from EXHAUSTED keeps raising
    StopIteration.
    """

    __slots__ = ("bounds", "current", "state")

    def __init__(self, bounds: IntRange) -> None:
        self.bounds = bounds
        self.current = bounds.start
        self.state = RangeState.NOT_STARTED

    @property
    def start(self) -> int:
        return self.bounds.start

    @property
    def end(self) -> int:
        return self.bounds.end

    @property
    def step(self) -> int:
        return self.bounds.step

    def __iter__(self) -> RangeIterator:
        return self

    def __next__(self) -> int:
        match self.state:
            case RangeState.NOT_STARTED:
                self.current = self.bounds.start
                if self.bounds.is_degenerate:
                    self.state = RangeState.EXHAUSTED
                else:
                    self.state = RangeState.EMITTING
            case RangeState.EMITTING:
                self.current += self.bounds.step
            case RangeState.EXHAUSTED:
                raise StopIteration

        if self.state is RangeState.EMITTING and self.bounds.within_bound(self.current):
            return self.current
        self.state = RangeState.EXHAUSTED
        raise StopIteration


def range_to(start: int, end: int) -> IntRange:
    """
    Inclusive range from start to end, stepping +1 or -1 toward end.

    Example:
        list(range_to(1, 4))  # [1, 2, 3, 4]
        list(range_to(4, 1))  # [4, 3, 2, 1]
        list(range_to(5, 5))  # [5]
    """
    require_int(start, "start")
    require_int(end, "end")
    return IntRange(start, end, 1 if start <= end else -1)


def range_to_step(start: int, end: int, step: int) -> IntRange:
    """
    Inclusive range from start toward end in increments of step.

    Terms that would pass end are not emitted; end itself appears only
    when it is reached exactly. Zero or wrong-direction steps give an
    empty range.

    Example:
        list(range_to_step(1, 10, 3))    # [1, 4, 7, 10]
        list(range_to_step(10, 1, -3))   # [10, 7, 4, 1]
        list(range_to_step(1, 10, -3))   # []
    """
    return IntRange(start, end, step)


def to(start: int, end: int, step: int | None = None) -> IntRange:
    """range_to without a step, range_to_step with one."""
    if step is None:
        return range_to(start, end)
    return range_to_step(start, end, step)


__all__ = (
    "IntRange",
    "RangeIterator",
    "RangeState",
    "range_to",
    "range_to_step",
    "to",
)
