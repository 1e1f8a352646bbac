"""
Monad contract.

Architecture:
- Monad[M] - typeclass record: bind + unit (+ optional fail, extract)
- Derived operations (fmap, then, join, sequence, traverse, lift2) are
  written once against bind/unit and work for every instance

For custom monads:
1. Write bind and unit for your data shape
2. Optionally add fail (canonical failure) and extract (try-extract as Result)
3. Build a Monad record and pass it wherever an instance is selected
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kungfu import Result

from ._errors import FailUnsupportedError

@dataclass(frozen=True, slots=True)
class Monad[M]:
    """
    Typeclass dictionary for a concrete monad.

    Monadic laws (every instance must satisfy them):
    - Left identity: bind(unit(x), f) == f(x)
    - Right identity: bind(m, unit) == m
    - Associativity: bind(bind(m, f), g) == bind(m, x => bind(f(x), g))

    NOTE: `unit` plays the role of `return`, which is a Python keyword.
    """

    name: str
    bind: Callable[[M, Callable[[typing.Any], M]], M]
    unit: Callable[[typing.Any], M]
    fail: Callable[[typing.Any], M] | None = None
    extract: Callable[[M], Result[typing.Any, typing.Any]] | None = None

    def failure(self, msg: typing.Any = None) -> M:
        """Canonical failure shape, or FailUnsupportedError if the instance has none."""
        if self.fail is None:
            raise FailUnsupportedError(self.name)
        return self.fail(msg)

    # Derived operations

    def fmap(self, m: M, f: Callable[[typing.Any], typing.Any], /) -> M:
        """Functor map: apply f to the payload, keep the shape."""
        return self.bind(m, lambda x: self.unit(f(x)))

    def then(self, m: M, k: M, /) -> M:
        """Sequence two computations, discarding the first payload (>>)."""
        return self.bind(m, lambda _: k)

    def join(self, mm: M, /) -> M:
        """Flatten one level of nesting."""
        return self.bind(mm, lambda m: m)

    def sequence(self, ms: Iterable[M], /) -> M:
        """
        Run computations left to right and collect payloads into a list.

        Short-circuits on the first failure shape.
        """
        return self.traverse(ms, lambda m: m)

    def traverse[A](self, items: Iterable[A], f: Callable[[A], M], /) -> M:
        """
        Monadic map: A -> M, collected left to right.

        Left fold over items: f runs inside bind, so it is never called once
        the accumulator has failed, and stack depth does not grow with len(items).
        """
        acc = self.unit([])
        for item in items:
            acc = self.bind(
                acc,
                lambda xs, item=item: self.bind(f(item), lambda x: self.unit([*xs, x])),
            )
        return acc

    def lift2(
        self,
        f: Callable[[typing.Any, typing.Any], typing.Any],
        ma: M,
        mb: M,
        /,
    ) -> M:
        """Lift a binary function into the monad."""
        return self.bind(ma, lambda a: self.bind(mb, lambda b: self.unit(f(a, b))))

    def __repr__(self) -> str:
        return f"Monad({self.name!r})"

__all__ = ("Monad",)
