from __future__ import annotations

import typing
from collections.abc import Iterator, Mapping


class Scope(Mapping[str, typing.Any]):
    """
    Names bound so far inside a do-block.

    Immutable: extend() returns a new scope. Values are reachable both as
    items (scope["x"]) and as attributes (scope.x). Names that would be hidden
    by Scope's own attributes (items, get, extend, ...) cannot be bound.
    """

    __slots__ = ("_bindings",)

    def __init__(self, bindings: Mapping[str, typing.Any] | None = None, /) -> None:
        self._bindings: dict[str, typing.Any] = dict(bindings or {})
        for name in self._bindings:
            check_bindable(name)

    def extend(self, bindings: Mapping[str, typing.Any], /) -> Scope:
        if not bindings:
            return self
        return Scope({**self._bindings, **bindings})

    def __getitem__(self, name: str) -> typing.Any:
        return self._bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __getattr__(self, name: str) -> typing.Any:
        if name.startswith("__") or name == "_bindings":
            raise AttributeError(name)
        try:
            return self._bindings[name]
        except KeyError:
            raise AttributeError(f"Name {name!r} is not bound in this do-block") from None

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self._bindings.items())
        return f"Scope({inner})"


# Attribute lookup finds these before __getattr__ does.
RESERVED_NAMES = frozenset(dir(Scope))


def check_bindable(name: str) -> None:
    """Raise ValueError if name cannot be bound in a Scope."""
    if name in RESERVED_NAMES:
        raise ValueError(f"{name!r} is reserved: it would be shadowed by Scope.{name}")


__all__ = ("RESERVED_NAMES", "Scope", "check_bindable")
