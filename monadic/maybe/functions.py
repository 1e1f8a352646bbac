"""
Maybe auxiliary functions
=========================

Predicates, extractors and list conversions for Maybe values.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import assert_never

from .._errors import FromJustError
from ..collection import catM, map_catM
from .instance import extract
from .value import NOTHING, Just, Maybe, Nothing


def is_just[T](m: Maybe[T]) -> bool:
    """True for Just(x), False for Nothing."""
    return isinstance(m, Just)


def is_nothing[T](m: Maybe[T]) -> bool:
    """True for Nothing, False for Just(x)."""
    return isinstance(m, Nothing)


def from_just[T](m: Maybe[T]) -> T:
    """
    Extract x out of Just(x).

    Raises FromJustError for Nothing: calling this on Nothing is a bug in the
    caller, not a data-level failure. Use from_maybe() when absence is expected.
    """
    match m:
        case Just(x):
            return x
        case Nothing():
            raise FromJustError()
        case _ as unreachable:
            assert_never(unreachable)


def from_maybe[T, D](default: D, m: Maybe[T]) -> T | D:
    """Extract x out of Just(x), or return default for Nothing."""
    match m:
        case Just(x):
            return x
        case Nothing():
            return default
        case _ as unreachable:
            assert_never(unreachable)


def maybe[T, R](default: T, f: Callable[[T], R], m: Maybe[T]) -> R:
    """
    Call f with x for Just(x), otherwise call f with default.

    NOTE: f runs in both branches; Nothing yields f(default), not default.
    """
    match m:
        case Just(x):
            return f(x)
        case Nothing():
            return f(default)
        case _ as unreachable:
            assert_never(unreachable)


def maybe_to_list[T](m: Maybe[T]) -> list[T]:
    """
    [] for Nothing, [x] for Just(x).

    Example:
        maybe_to_list(Just(42))  # [42]
    """
    match m:
        case Just(x):
            return [x]
        case Nothing():
            return []
        case _ as unreachable:
            assert_never(unreachable)


def list_to_maybe[T](items: Iterable[T]) -> Maybe[T]:
    """
    Nothing for an empty sequence, Just(head) otherwise. The tail is ignored.

    Example:
        list_to_maybe([1, 2, 3])  # Just(1)
    """
    for head in items:
        return Just(head)
    return NOTHING


def to_optional[T](m: Maybe[T]) -> T | None:
    """Just(x) -> x, Nothing -> None."""
    return from_maybe(None, m)


def from_optional[T](value: T | None) -> Maybe[T]:
    """None -> Nothing, anything else -> Just(value)."""
    if value is None:
        return NOTHING
    return Just(value)


def cat_maybes[T](items: Iterable[Maybe[T]]) -> list[T]:
    """
    Payloads of every Just, in order.

    Example:
        cat_maybes([Just(1), Nothing(), Just(2)])  # [1, 2]
    """
    return catM(items, extract=extract)


def map_maybes[A, T](f: Callable[[A], Maybe[T]], items: Iterable[A]) -> list[T]:
    """Map f over items and throw out elements for which f returns Nothing."""
    return map_catM(f, items, extract=extract)


__all__ = (
    "cat_maybes",
    "from_just",
    "from_maybe",
    "from_optional",
    "is_just",
    "is_nothing",
    "list_to_maybe",
    "map_maybes",
    "maybe",
    "maybe_to_list",
    "to_optional",
)
