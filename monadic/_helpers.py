"""Internal helpers for monadic."""

from __future__ import annotations

import typing
from collections.abc import Callable

def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def const[T](value: T) -> Callable[..., T]:
    """
    Thunk that ignores its arguments and returns value.

    Usage:
        Bound("x", const(Just(1)))
    """

    def thunk(*args: typing.Any, **kwargs: typing.Any) -> T:
        _ = (args, kwargs)
        return value

    return thunk

__all__ = ("const", "identity")
