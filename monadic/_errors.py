from __future__ import annotations

import typing

class MonadicError(Exception):
    """Base for programming errors. Never used as a monadic failure."""

class FromJustError(MonadicError):
    """from_just() was given Nothing."""

    def __init__(self) -> None:
        super().__init__("from_just: Nothing")

class FailUnsupportedError(MonadicError):
    """Instance has no fail()."""

    monad: str

    def __init__(self, monad: str) -> None:
        self.monad = monad
        super().__init__(f"Monad {monad!r} does not define fail()")

class PatternMatchError(MonadicError):
    """Bound value does not match the statement pattern."""

    pattern: typing.Any
    value: typing.Any
    reason: str

    def __init__(self, pattern: typing.Any, value: typing.Any, reason: str) -> None:
        self.pattern = pattern
        self.value = value
        self.reason = reason
        super().__init__(f"No match of {pattern!r} against {value!r}: {reason}")

class EmptyBlockError(MonadicError, ValueError):
    """Do-block has no statements."""

    def __init__(self) -> None:
        super().__init__("Do-block must contain at least one statement")

class InvalidBlockError(MonadicError, ValueError):
    """Do-block ends with a statement that cannot produce a monadic value."""

    statement: typing.Any

    def __init__(self, statement: typing.Any) -> None:
        self.statement = statement
        super().__init__(f"Last statement of a do-block cannot be {statement!r}")

__all__ = (
    "EmptyBlockError",
    "FailUnsupportedError",
    "FromJustError",
    "InvalidBlockError",
    "MonadicError",
    "PatternMatchError",
)
