"""
Further instances of the monad contract.

RESULT - success/error over kungfu Ok/Error
LIST   - non-determinism over Python lists
"""

from __future__ import annotations

import typing

from kungfu import Error, Ok, Result

from ._helpers import identity
from ._types import Binder
from .monad import Monad

# ============================================================================
# Result (kungfu)
# ============================================================================

def result_bind[T, U, E](
    m: Result[T, E],
    f: Binder[T, Result[U, E]],
) -> Result[U, E]:
    """
    Monadic bind (>>=).

    - On Ok: executes f
    - On Error: short-circuit, preserves the error
    """
    match m:
        case Ok(value):
            return f(value)
        case Error(err):
            return Error(err)
        case _:
            raise TypeError(f"Expected Ok or Error, got {m!r}")

RESULT: Monad[Result[typing.Any, typing.Any]] = Monad(
    name="Result",
    bind=result_bind,
    unit=Ok,
    fail=Error,
    extract=identity,
)

# ============================================================================
# List
# ============================================================================

def list_bind[T, U](m: list[T], f: Binder[T, list[U]]) -> list[U]:
    """Concat-map: every payload feeds f, results are concatenated in order."""
    return [y for x in m for y in f(x)]

def list_unit[T](x: T) -> list[T]:
    return [x]

def list_fail(msg: typing.Any = None) -> list[typing.Never]:
    _ = msg
    return []

LIST: Monad[list[typing.Any]] = Monad(
    name="List",
    bind=list_bind,
    unit=list_unit,
    fail=list_fail,
)

__all__ = ("LIST", "RESULT", "list_bind", "result_bind")
