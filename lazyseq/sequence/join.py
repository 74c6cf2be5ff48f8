"""Join combinators

Flatten a sequence into one delimited string. Terminal: the whole
source is consumed eagerly.

One JoinPolicy covers the three historical call shapes:
- glue only:              join_to_string(xs, glue=";")
- glue + per-item quotes: join_to_string(xs, glue=",", prefix="'", suffix="'")
- glue + formatter:       join_to_string(xs, formatter=lambda x: f"v{x}")
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result

from .._errors import FormatError, InvalidInputError
from .._helpers import display_string, require_source
from .._types import Formatter
from ..lift import catching, optional
from ..writer import Log, WriterResult, writer_error, writer_ok

DEFAULT_GLUE = ","

@dataclass(frozen=True, slots=True)
class JoinPolicy[T]:
    """
    Options for join_to_string.

    None for glue means ","; None for prefix/suffix means "".
    formatter, when set, renders each element on its own and prefix/suffix
    are ignored.
    """

    glue: str | None = None
    prefix: str | None = None
    suffix: str | None = None
    formatter: Formatter[T] | None = None

    def __post_init__(self) -> None:
        for name in ("glue", "prefix", "suffix"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"JoinPolicy.{name} must be a str or None")
        if self.formatter is not None and not callable(self.formatter):
            raise TypeError("JoinPolicy.formatter must be callable or None")

    @property
    def separator(self) -> str:
        return DEFAULT_GLUE if self.glue is None else self.glue

    def render(self, item: T) -> str:
        """Text for one element under this policy."""
        if self.formatter is not None:
            return self.formatter(item)
        return f"{self.prefix or ''}{display_string(item)}{self.suffix or ''}"

def resolve_policy[T](
    policy: JoinPolicy[T] | None,
    *,
    glue: str | None,
    prefix: str | None,
    suffix: str | None,
    formatter: Formatter[T] | None,
    caller: str,
) -> JoinPolicy[T]:
    """Build a policy from keyword options, or pass an explicit one through."""
    if policy is None:
        return JoinPolicy(glue=glue, prefix=prefix, suffix=suffix, formatter=formatter)
    if any(option is not None for option in (glue, prefix, suffix, formatter)):
        raise ValueError(f"{caller}(): pass either 'policy' or keyword options, not both")
    return policy

# Generic combinator (render + wrap pattern)
def joinM[M, T](
    items: Iterable[T],
    policy: JoinPolicy[T],
    *,
    wrap: Callable[[Result[str, FormatError], int], M],
) -> M:
    """
    Generic join. Stops at the first element the formatter fails on.

    wrap receives the Result and the number of elements rendered.
    """
    pieces: list[str] = []
    for index, item in enumerate(items):
        rendered = catching(
            lambda: policy.render(item),
            on_error=lambda exc: FormatError(index, item, exc),
        )
        match rendered:
            case Ok(text):
                pieces.append(text)
            case Error(err):
                return wrap(Error(err), len(pieces))
            case _ as unreachable:
                assert_never(unreachable)
    return wrap(Ok(policy.separator.join(pieces)), len(pieces))

# Sugar: plain string, exceptions propagate
def join_to_string[T](
    source: Iterable[T],
    policy: JoinPolicy[T] | None = None,
    *,
    glue: str | None = None,
    prefix: str | None = None,
    suffix: str | None = None,
    formatter: Formatter[T] | None = None,
) -> str:
    """
    Join elements with glue between them, never before the first or after the last.

    Example:
        join_to_string([1, 2, 3])                             # "1,2,3"
        join_to_string(["a", "b"], glue="-", prefix="[", suffix="]")  # "[a]-[b]"
        join_to_string([1, 2], formatter=lambda x: f"v{x}")   # "v1,v2"
        join_to_string([None])                                # "null"
    """
    items = require_source(source)
    policy = resolve_policy(
        policy, glue=glue, prefix=prefix, suffix=suffix, formatter=formatter, caller="join_to_string"
    )
    return policy.separator.join(policy.render(item) for item in items)

# Sugar: Result
def try_join_to_string[T](
    source: Iterable[T] | None,
    policy: JoinPolicy[T] | None = None,
    *,
    glue: str | None = None,
    prefix: str | None = None,
    suffix: str | None = None,
    formatter: Formatter[T] | None = None,
) -> Result[str, FormatError | InvalidInputError]:
    """join_to_string reporting a None source or formatter failure as Error."""
    policy = resolve_policy(
        policy, glue=glue, prefix=prefix, suffix=suffix, formatter=formatter, caller="try_join_to_string"
    )
    match optional(source, error=lambda: InvalidInputError("source")):
        case Ok(items):
            return joinM(items, policy, wrap=lambda result, _: result)
        case Error(err):
            return Error(err)
        case _ as unreachable:
            assert_never(unreachable)

# Sugar: WriterResult
def join_to_string_writer[T](
    source: Iterable[T] | None,
    policy: JoinPolicy[T] | None = None,
    *,
    glue: str | None = None,
    prefix: str | None = None,
    suffix: str | None = None,
    formatter: Formatter[T] | None = None,
) -> WriterResult[str, FormatError | InvalidInputError, Log[str]]:
    """try_join_to_string with a log of how many elements were joined."""
    policy = resolve_policy(
        policy, glue=glue, prefix=prefix, suffix=suffix, formatter=formatter, caller="join_to_string_writer"
    )

    def wrap(result: Result[str, FormatError], count: int) -> WriterResult[str, FormatError, Log[str]]:
        match result:
            case Ok(text):
                return writer_ok(text, f"join: {count} element(s)")
            case Error(err):
                return writer_error(err, f"join: formatter failed at element {err.index}")
            case _ as unreachable:
                assert_never(unreachable)

    match optional(source, error=lambda: InvalidInputError("source")):
        case Ok(items):
            return joinM(items, policy, wrap=wrap)
        case Error(err):
            return writer_error(err, "join: source is None")
        case _ as unreachable:
            assert_never(unreachable)

# Historical name
to_flat_string = join_to_string

__all__ = (
    "DEFAULT_GLUE",
    "JoinPolicy",
    "join_to_string",
    "try_join_to_string",
    "join_to_string_writer",
    "to_flat_string",
    "joinM",
)
