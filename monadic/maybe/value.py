"""
Maybe values
============

Two immutable variants: Just(value) holds one payload, Nothing holds none.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Just[T]:
    """Present value."""

    value: T

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing:
    """
    Absent value.

    Carries no payload, so every Nothing() equals every other.
    """

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()

type Maybe[T] = Just[T] | Nothing


__all__ = ("Just", "Maybe", "NOTHING", "Nothing")
