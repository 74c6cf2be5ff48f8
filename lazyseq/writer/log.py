"""
Log - monoidal accumulator for writer variants
==============================================
"""

from __future__ import annotations


class Log[A](list[A]):
    """
    Ordered log of entries.

    A list with monoid operations:
    - empty: Log()
    - combine: concatenation, returns a new Log

    Lazy writer variants (for_each_tap_writer, repeat_writer) append to a
    caller-owned Log in place while the sequence is consumed, so the log only
    ever holds entries for elements that were actually pulled.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a").combine(Log.of("b", "c"))  # Log(["a", "b", "c"])
        """
        result: Log[A] = Log(self)
        result.extend(other)
        return result


__all__ = ("Log",)
