"""Do-block desugaring: statement list -> nested binds."""

from __future__ import annotations

import typing
from collections.abc import Iterable

import structlog

from .._errors import EmptyBlockError, InvalidBlockError
from ..monad import Monad
from .patterns import Wildcard
from .policy import DEFAULT_POLICY, DoPolicy
from .scope import Scope
from .statements import Bound, Let, Plain, Return, Statement
from .terms import BindTo, LetIn, Pure, Source, Term

log = structlog.get_logger(__name__)


def _last[M](statement: Statement, monad: Monad[M]) -> Term[M]:
    match statement:
        case Return(expr):
            return Pure(monad, expr)
        # A final bound pattern has nothing left to scope over.
        case Plain(expr) | Bound(_, expr):
            return Source(expr)
        case Let():
            raise InvalidBlockError(statement)
        case _:
            raise TypeError(f"Not a do-block statement: {statement!r}")


def _step[M](
    statement: Statement,
    rest: Term[M],
    monad: Monad[M],
    policy: DoPolicy,
) -> Term[M]:
    match statement:
        case Bound(pattern, expr):
            return BindTo(monad, Source(expr), pattern, rest, policy)
        case Plain(expr):
            return BindTo(monad, Source(expr), Wildcard(), rest, policy)
        case Let(pattern, expr):
            return LetIn(monad, pattern, expr, rest, policy)
        case Return(expr):
            return BindTo(monad, Pure(monad, expr), Wildcard(), rest, policy)
        case _:
            raise TypeError(f"Not a do-block statement: {statement!r}")


def desugar[M](
    statements: Iterable[Statement],
    monad: Monad[M],
    *,
    policy: DoPolicy = DEFAULT_POLICY,
) -> Term[M]:
    """
    Fold statements right to left into a single Term.

    Nothing is evaluated here. Each non-final Bound or Plain statement becomes
    exactly one bind; Let becomes a pure local binding.

    Raises:
        EmptyBlockError: no statements
        InvalidBlockError: last statement is a Let
    """
    block = tuple(statements)
    if not block:
        raise EmptyBlockError()

    *init, last = block
    term = _last(last, monad)
    for statement in reversed(init):
        term = _step(statement, term, monad, policy)

    if policy.trace:
        log.debug(
            "do.desugared",
            monad=monad.name,
            statements=len(block),
            binds=term.bind_count(),
            term=str(term),
        )
    return term


def run[M](
    statements: Iterable[Statement],
    monad: Monad[M],
    *,
    policy: DoPolicy = DEFAULT_POLICY,
    **env: typing.Any,
) -> M:
    """Desugar, then evaluate with env as the initial scope."""
    return desugar(statements, monad, policy=policy).evaluate(Scope(env))


__all__ = ("desugar", "run")
