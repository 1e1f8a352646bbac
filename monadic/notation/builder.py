"""
Fluent do-block builder.

    do(MAYBE)
        .bind("x", lambda _: Just(1))
        .bind("y", lambda _: Just(2))
        .returns(lambda s: s.x + s.y)
        .run()                       # Just(3)
"""

from __future__ import annotations

import typing
from dataclasses import dataclass, replace

from .._types import Thunk
from ..monad import Monad
from .desugar import desugar
from .policy import DEFAULT_POLICY, DoPolicy, MismatchPolicy
from .scope import Scope
from .statements import Bound, Let, Plain, Return, Statement
from .terms import Term


@dataclass(frozen=True, slots=True)
class Block[M]:
    """
    Immutable statement list plus the instance it targets.

    Every method returns a new Block; a Block can be shared and extended
    along different branches.
    """

    monad: Monad[M]
    statements: tuple[Statement, ...] = ()
    policy: DoPolicy = DEFAULT_POLICY

    def _push(self, statement: Statement) -> Block[M]:
        return replace(self, statements=(*self.statements, statement))

    def bind(self, pattern: typing.Any, expr: Thunk[M]) -> Block[M]:
        """pattern <- expr"""
        return self._push(Bound(pattern, expr))

    def then(self, expr: Thunk[M]) -> Block[M]:
        """expr, payload discarded"""
        return self._push(Plain(expr))

    def let(self, pattern: typing.Any, expr: Thunk[typing.Any]) -> Block[M]:
        """let pattern = expr"""
        return self._push(Let(pattern, expr))

    def returns(self, expr: Thunk[typing.Any]) -> Block[M]:
        """return expr"""
        return self._push(Return(expr))

    def with_policy(
        self,
        policy: DoPolicy | None = None,
        *,
        on_mismatch: MismatchPolicy | None = None,
        trace: bool | None = None,
    ) -> Block[M]:
        if policy is None:
            policy = DoPolicy(
                on_mismatch=self.policy.on_mismatch if on_mismatch is None else on_mismatch,
                trace=self.policy.trace if trace is None else trace,
            )
        return replace(self, policy=policy)

    def compile(self) -> Term[M]:
        return desugar(self.statements, self.monad, policy=self.policy)

    def run(self, **env: typing.Any) -> M:
        return self.compile().evaluate(Scope(env))


def do[M](
    monad: Monad[M],
    *,
    policy: DoPolicy | None = None,
    on_mismatch: MismatchPolicy = "raise",
    trace: bool = False,
) -> Block[M]:
    """Start an empty do-block against monad."""
    if policy is None:
        policy = DoPolicy(on_mismatch=on_mismatch, trace=trace)
    return Block(monad, policy=policy)


__all__ = ("Block", "do")
