"""The Maybe monad.

Maybe encapsulates an optional value and doubles as a simple error monad
where every error is Nothing.

Example:
    from monadic import do
    from monadic.maybe import MAYBE, Just

    do(MAYBE).bind("x", lambda _: Just(1)).bind("y", lambda _: Just(2)).returns(
        lambda s: s.x + s.y
    ).run()  # Just(3)
"""

from __future__ import annotations

import typing
from typing import assert_never

from kungfu import Error, Ok, Result

from .._types import Binder
from ..monad import Monad
from .value import NOTHING, Just, Maybe, Nothing

def bind[T, U](m: Maybe[T], f: Binder[T, Maybe[U]]) -> Maybe[U]:
    """
    Monadic bind (>>=).

    - On Just: applies f to the payload
    - On Nothing: short-circuit, f is never called
    """
    match m:
        case Just(x):
            return f(x)
        case Nothing():
            return NOTHING
        case _ as unreachable:
            assert_never(unreachable)

def unit[T](x: T) -> Maybe[T]:
    """Inject x into Maybe, i.e. Just(x)."""
    return Just(x)

def fail(msg: typing.Any = None) -> Maybe[typing.Never]:
    """Signal failure. The message is ignored: Maybe has a single failure shape."""
    _ = msg
    return NOTHING

def extract[T](m: Maybe[T]) -> Result[T, None]:
    """Try-extract: Ok(x) for Just(x), Error(None) for Nothing."""
    match m:
        case Just(x):
            return Ok(x)
        case Nothing():
            return Error(None)
        case _ as unreachable:
            assert_never(unreachable)

MAYBE: Monad[Maybe[typing.Any]] = Monad(
    name="Maybe",
    bind=bind,
    unit=unit,
    fail=fail,
    extract=extract,
)

__all__ = ("MAYBE", "bind", "extract", "fail", "unit")
