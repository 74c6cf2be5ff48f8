from .bounded import IntRange, RangeIterator, RangeState, range_to, range_to_step, to

__all__ = (
    "IntRange",
    "RangeIterator",
    "RangeState",
    "range_to",
    "range_to_step",
    "to",
)
