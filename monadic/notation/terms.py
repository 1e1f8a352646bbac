"""
Desugared do-blocks
===================

Tree produced by desugar(). Building it evaluates nothing; evaluate(scope)
runs it against a Monad instance, left to right.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from dataclasses import dataclass

import structlog
from kungfu import Error, Ok

from .._errors import PatternMatchError
from .._types import Thunk
from ..monad import Monad
from .patterns import Mismatch, Pattern
from .policy import DEFAULT_POLICY, DoPolicy
from .scope import Scope

log = structlog.get_logger(__name__)


def _describe(expr: Thunk[typing.Any]) -> str:
    return getattr(expr, "__name__", type(expr).__name__)


def _on_mismatch[M](monad: Monad[M], mismatch: Mismatch, policy: DoPolicy) -> M:
    if policy.trace:
        log.debug(
            "do.mismatch",
            monad=monad.name,
            pattern=str(mismatch.pattern),
            reason=mismatch.reason,
            policy=policy.on_mismatch,
        )
    if policy.on_mismatch == "fail":
        return monad.failure(str(mismatch))
    raise PatternMatchError(mismatch.pattern, mismatch.value, mismatch.reason)


class Term[M]:
    """AST node that evaluates to a monadic value."""

    __slots__ = ()

    def evaluate(self, scope: Scope | None = None) -> M:
        raise NotImplementedError

    def bind_count(self) -> int:
        """Number of bind calls in this tree."""
        return 0

    def run(self, env: Mapping[str, typing.Any] | None = None, /) -> M:
        return self.evaluate(Scope(env))


@dataclass(frozen=True, slots=True)
class Pure[M](Term[M]):
    """unit(expr)"""

    monad: Monad[M]
    expr: Thunk[typing.Any]

    def evaluate(self, scope: Scope | None = None) -> M:
        return self.monad.unit(self.expr(scope if scope is not None else Scope()))

    def __str__(self) -> str:
        return f"return {_describe(self.expr)}"


@dataclass(frozen=True, slots=True)
class Source[M](Term[M]):
    """expr, already monadic"""

    expr: Thunk[M]

    def evaluate(self, scope: Scope | None = None) -> M:
        return self.expr(scope if scope is not None else Scope())

    def __str__(self) -> str:
        return _describe(self.expr)


@dataclass(frozen=True, slots=True)
class BindTo[M](Term[M]):
    """bind(source, pattern => body)"""

    monad: Monad[M]
    source: Term[M]
    pattern: Pattern
    body: Term[M]
    policy: DoPolicy = DEFAULT_POLICY

    def evaluate(self, scope: Scope | None = None) -> M:
        outer = scope if scope is not None else Scope()

        def continuation(value: typing.Any) -> M:
            if self.policy.trace:
                log.debug("do.step", monad=self.monad.name, pattern=str(self.pattern))
            match self.pattern.match(value):
                case Ok(bindings):
                    return self.body.evaluate(outer.extend(bindings))
                case Error(mismatch):
                    return _on_mismatch(self.monad, mismatch, self.policy)

        return self.monad.bind(self.source.evaluate(outer), continuation)

    def bind_count(self) -> int:
        return 1 + self.source.bind_count() + self.body.bind_count()

    def __str__(self) -> str:
        return f"bind({self.source}, {self.pattern} => {self.body})"


@dataclass(frozen=True, slots=True)
class LetIn[M](Term[M]):
    """let pattern = value in body"""

    monad: Monad[M]
    pattern: Pattern
    value: Thunk[typing.Any]
    body: Term[M]
    policy: DoPolicy = DEFAULT_POLICY

    def evaluate(self, scope: Scope | None = None) -> M:
        outer = scope if scope is not None else Scope()
        match self.pattern.match(self.value(outer)):
            case Ok(bindings):
                return self.body.evaluate(outer.extend(bindings))
            case Error(mismatch):
                return _on_mismatch(self.monad, mismatch, self.policy)

    def bind_count(self) -> int:
        return self.body.bind_count()

    def __str__(self) -> str:
        return f"let {self.pattern} = {_describe(self.value)} in {self.body}"


__all__ = ("BindTo", "LetIn", "Pure", "Source", "Term")
