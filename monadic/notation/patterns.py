"""
Patterns
========

Left-hand sides of do-block statements. A pattern either matches a value and
yields the names it binds, or reports why it did not:

    Var("x").match(1)              # Ok({"x": 1})
    Seq("a", "b").match((1, 2))    # Ok({"a": 1, "b": 2})
    Const(0).match(1)              # Error(Mismatch(...))

Shorthand accepted wherever a pattern is expected (see as_pattern):
"_" is a wildcard, any other str is a variable, a tuple destructures.
"""

from __future__ import annotations

import typing
from collections.abc import Sequence
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._types import Predicate
from .scope import check_bindable

# Bindings = names a successful match introduces
type Bindings = dict[str, typing.Any]


@dataclass(frozen=True, slots=True)
class Mismatch:
    """Why a value did not fit a pattern."""

    pattern: Pattern
    value: typing.Any
    reason: str

    def __str__(self) -> str:
        return f"{self.pattern} does not match {self.value!r}: {self.reason}"


class Pattern:
    """Base class for patterns."""

    __slots__ = ()

    def match(self, value: typing.Any) -> Result[Bindings, Mismatch]:
        raise NotImplementedError

    def names(self) -> tuple[str, ...]:
        """Names bound by this pattern, left to right."""
        return ()


@dataclass(frozen=True, slots=True)
class Wildcard(Pattern):
    def match(self, value: typing.Any) -> Result[Bindings, Mismatch]:
        return Ok({})

    def __str__(self) -> str:
        return "_"


@dataclass(frozen=True, slots=True)
class Var(Pattern):
    name: str

    def __post_init__(self) -> None:
        if not self.name.isidentifier() or self.name == "_":
            raise ValueError(f"Var(): {self.name!r} is not a bindable name")
        check_bindable(self.name)

    def match(self, value: typing.Any) -> Result[Bindings, Mismatch]:
        return Ok({self.name: value})

    def names(self) -> tuple[str, ...]:
        return (self.name,)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Const(Pattern):
    """Matches values equal to expected; binds nothing."""

    expected: typing.Any

    def match(self, value: typing.Any) -> Result[Bindings, Mismatch]:
        if value == self.expected:
            return Ok({})
        return Error(Mismatch(self, value, f"expected {self.expected!r}"))

    def __str__(self) -> str:
        return repr(self.expected)


def _merge(
    owner: Pattern,
    parts: Sequence[Pattern],
    values: Sequence[typing.Any],
    value: typing.Any,
) -> Result[Bindings, Mismatch]:
    bindings: Bindings = {}
    for part, item in zip(parts, values, strict=True):
        match part.match(item):
            case Ok(found):
                bindings.update(found)
            case Error(inner):
                return Error(Mismatch(owner, value, str(inner)))
    return Ok(bindings)


def _check_unique(owner: str, parts: Sequence[Pattern]) -> None:
    seen: set[str] = set()
    for part in parts:
        for name in part.names():
            if name in seen:
                raise ValueError(f"{owner}(): name {name!r} bound more than once")
            seen.add(name)


@dataclass(frozen=True, slots=True, init=False)
class Seq(Pattern):
    """Fixed-length destructuring of a tuple or list: Seq("a", "_", ("b", "c"))."""

    items: tuple[Pattern, ...]

    def __init__(self, *items: typing.Any) -> None:
        object.__setattr__(self, "items", tuple(as_pattern(item) for item in items))
        _check_unique("Seq", self.items)

    def match(self, value: typing.Any) -> Result[Bindings, Mismatch]:
        if not isinstance(value, (tuple, list)):
            return Error(Mismatch(self, value, f"expected a tuple or list, got {type(value).__name__}"))
        if len(value) != len(self.items):
            return Error(Mismatch(self, value, f"expected {len(self.items)} items, got {len(value)}"))
        return _merge(self, self.items, value, value)

    def names(self) -> tuple[str, ...]:
        return tuple(name for item in self.items for name in item.names())

    def __str__(self) -> str:
        if len(self.items) == 1:
            return f"({self.items[0]},)"
        return "(" + ", ".join(str(item) for item in self.items) + ")"


@dataclass(frozen=True, slots=True, init=False)
class Of(Pattern):
    """
    Class pattern: isinstance check, then positional sub-patterns against
    the class's __match_args__, like `case Just(x)`.
    """

    cls: type
    args: tuple[Pattern, ...]

    def __init__(self, cls: type, *args: typing.Any) -> None:
        object.__setattr__(self, "cls", cls)
        object.__setattr__(self, "args", tuple(as_pattern(arg) for arg in args))
        match_args = getattr(self.cls, "__match_args__", ())
        if len(self.args) > len(match_args):
            raise ValueError(
                f"Of(): {self.cls.__name__} accepts {len(match_args)} positional sub-patterns, "
                f"got {len(self.args)}"
            )
        _check_unique("Of", self.args)

    def match(self, value: typing.Any) -> Result[Bindings, Mismatch]:
        if not isinstance(value, self.cls):
            return Error(Mismatch(self, value, f"expected {self.cls.__name__}"))
        attrs = self.cls.__match_args__[: len(self.args)] if self.args else ()
        return _merge(self, self.args, [getattr(value, attr) for attr in attrs], value)

    def names(self) -> tuple[str, ...]:
        return tuple(name for arg in self.args for name in arg.names())

    def __str__(self) -> str:
        return f"{self.cls.__name__}(" + ", ".join(str(arg) for arg in self.args) + ")"


@dataclass(frozen=True, slots=True)
class Guard(Pattern):
    """inner pattern, then predicate on the whole value."""

    inner: Pattern
    predicate: Predicate[typing.Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", as_pattern(self.inner))

    def match(self, value: typing.Any) -> Result[Bindings, Mismatch]:
        match self.inner.match(value):
            case Ok(bindings):
                if self.predicate(value):
                    return Ok(bindings)
                return Error(Mismatch(self, value, "guard rejected value"))
            case Error(inner):
                return Error(inner)

    def names(self) -> tuple[str, ...]:
        return self.inner.names()

    def __str__(self) -> str:
        name = getattr(self.predicate, "__name__", "predicate")
        return f"{self.inner} if {name}"


def as_pattern(shape: typing.Any) -> Pattern:
    """Coerce shorthand into a Pattern."""
    match shape:
        case Pattern():
            return shape
        case "_":
            return Wildcard()
        case str():
            return Var(shape)
        case tuple():
            return Seq(*shape)
        case _:
            raise TypeError(f"Cannot use {shape!r} as a pattern")


__all__ = (
    "Bindings",
    "Const",
    "Guard",
    "Mismatch",
    "Of",
    "Pattern",
    "Seq",
    "Var",
    "Wildcard",
    "as_pattern",
)
