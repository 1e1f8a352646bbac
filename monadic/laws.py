"""
Monad law checks.

Each check evaluates both sides of a law for concrete inputs and returns
Ok(None) when they agree, Error(LawViolation) otherwise. Sides are compared
with == unless an eq function is passed.
"""

from __future__ import annotations

import operator
import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .monad import Monad

# Equality = how two monadic values are compared
type Equality = Callable[[typing.Any, typing.Any], bool]


@dataclass(frozen=True, slots=True)
class LawViolation:
    """Both sides of a law, evaluated."""

    law: str
    left: typing.Any
    right: typing.Any

    def __str__(self) -> str:
        return f"{self.law}: {self.left!r} != {self.right!r}"


def _compare(
    law: str,
    left: typing.Any,
    right: typing.Any,
    eq: Equality,
) -> Result[None, LawViolation]:
    if eq(left, right):
        return Ok(None)
    return Error(LawViolation(law, left, right))


def left_identity[M](
    monad: Monad[M],
    x: typing.Any,
    f: Callable[[typing.Any], M],
    *,
    eq: Equality = operator.eq,
) -> Result[None, LawViolation]:
    """bind(unit(x), f) == f(x)"""
    return _compare("left identity", monad.bind(monad.unit(x), f), f(x), eq)


def right_identity[M](
    monad: Monad[M],
    m: M,
    *,
    eq: Equality = operator.eq,
) -> Result[None, LawViolation]:
    """bind(m, unit) == m"""
    return _compare("right identity", monad.bind(m, monad.unit), m, eq)


def associativity[M](
    monad: Monad[M],
    m: M,
    f: Callable[[typing.Any], M],
    g: Callable[[typing.Any], M],
    *,
    eq: Equality = operator.eq,
) -> Result[None, LawViolation]:
    """bind(bind(m, f), g) == bind(m, x => bind(f(x), g))"""
    return _compare(
        "associativity",
        monad.bind(monad.bind(m, f), g),
        monad.bind(m, lambda x: monad.bind(f(x), g)),
        eq,
    )


def check_laws[M](
    monad: Monad[M],
    *,
    x: typing.Any,
    m: M,
    f: Callable[[typing.Any], M],
    g: Callable[[typing.Any], M],
    eq: Equality = operator.eq,
) -> Result[None, list[LawViolation]]:
    """Run all three laws; collect every violation instead of stopping at the first."""
    violations: list[LawViolation] = []
    for outcome in (
        left_identity(monad, x, f, eq=eq),
        right_identity(monad, m, eq=eq),
        associativity(monad, m, f, g, eq=eq),
    ):
        match outcome:
            case Ok(_):
                pass
            case Error(violation):
                violations.append(violation)
    if violations:
        return Error(violations)
    return Ok(None)


__all__ = (
    "Equality",
    "LawViolation",
    "associativity",
    "check_laws",
    "left_identity",
    "right_identity",
)
