"""
Lifting plain values and exception-based code into kungfu Result.

Synchronous bridge between the two error styles used in lazyseq:
the plain operations raise, the *_writer and try_* variants return Result.

Examples:
    from lazyseq import lift as L

    L.pure(42)                                  # Ok(42)
    L.optional(None, error=lambda: "missing")   # Error("missing")
    L.catching(lambda: int("x"), on_error=str)  # Error("invalid literal ...")
    L.unsafe(L.pure(42))                        # 42
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never, assert_never

from kungfu import Error, Ok, Result

from ._types import NoError


def pure[T](value: T) -> Result[T, NoError]:
    """
    Lift a plain value into an always-successful Result.

    Example:
        from lazyseq import lift as L

        L.pure([1, 2, 3])  # Ok([1, 2, 3])
    """
    return Ok(value)


def fail[E](error: E) -> Result[Never, E]:
    """Create an always-failed Result. Dual of pure()."""
    return Error(error)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Error(error()).

    **When to use:** argument checks where "absent" is the only failure,
    e.g. a source sequence that must not be None.

    Example:
        from lazyseq import lift as L

        L.optional(source, error=lambda: InvalidInputError("source"))

    NOTE: error is a thunk so the error object is only built when needed.
    """
    if value is None:
        return Error(error())
    return Ok(value)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Result[T, E]:
    """
    Run thunk, convert a raised exception into Error.

    **When to use:** calling user code (formatters, actions) from a variant
    that reports failures as values instead of raising.

    Example:
        from lazyseq import lift as L

        L.catching(lambda: formatter(item), on_error=lambda e: FormatError(0, item, e))

    NOTE: Catches Exception subclasses only; KeyboardInterrupt and friends
          still propagate.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(on_error(exc))


def unsafe[T, E: BaseException](result: Result[T, E]) -> T:
    """
    Unwrap Ok value, raise the carried exception on Error.

    **When to use:** at the boundary back into exception-based code.
    """
    match result:
        case Ok(value):
            return value
        case Error(err):
            raise err
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "pure",
    "fail",
    "optional",
    "catching",
    "unsafe",
)
