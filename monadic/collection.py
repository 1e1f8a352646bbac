"""Collection combinators

Generic list helpers over any instance's try-extract."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Error, Ok, Result

from ._helpers import identity

# Generic combinators (extract pattern)
def catM[M, T](
    items: Iterable[M],
    *,
    extract: Callable[[M], Result[T, typing.Any]],
) -> list[T]:
    """Keep payloads of successful values, in order. Failures are dropped."""
    values: list[T] = []
    for item in items:
        match extract(item):
            case Ok(value):
                values.append(value)
            case Error(_):
                pass
    return values

def map_catM[A, M, T](
    f: Callable[[A], M],
    items: Iterable[A],
    *,
    extract: Callable[[M], Result[T, typing.Any]],
) -> list[T]:
    """
    Map f over items and keep the payloads of successful results.

    f is evaluated exactly once per element.
    """
    return catM((f(item) for item in items), extract=extract)

# Sugar for kungfu Result
def cat_oks[T, E](results: Iterable[Result[T, E]]) -> list[T]:
    """Payloads of every Ok, in order."""
    return catM(results, extract=identity)

def map_oks[A, T, E](f: Callable[[A], Result[T, E]], items: Iterable[A]) -> list[T]:
    """Map f over items, keep the Ok payloads."""
    return map_catM(f, items, extract=identity)

__all__ = ("catM", "cat_oks", "map_catM", "map_oks")
