"""
Do-block statements
===================

Closed set of statement kinds:

    Bound(pattern, expr)  - pattern <- expr   (expr yields a monadic value)
    Plain(expr)           - expr              (payload discarded)
    Return(expr)          - return expr       (plain value, wrapped by unit)
    Let(pattern, expr)    - let pattern = expr (pure binding, no bind)

Every expr is a thunk taking the Scope of names bound so far.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._types import Thunk
from .patterns import Pattern, as_pattern


@dataclass(frozen=True, slots=True)
class Bound:
    pattern: Pattern
    expr: Thunk[typing.Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", as_pattern(self.pattern))


@dataclass(frozen=True, slots=True)
class Plain:
    expr: Thunk[typing.Any]


@dataclass(frozen=True, slots=True)
class Return:
    expr: Thunk[typing.Any]


@dataclass(frozen=True, slots=True)
class Let:
    pattern: Pattern
    expr: Thunk[typing.Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", as_pattern(self.pattern))


type Statement = Bound | Plain | Return | Let


__all__ = ("Bound", "Let", "Plain", "Return", "Statement")
