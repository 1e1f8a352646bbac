"""
Do-blocks
=========

Straight-line statements desugared into nested binds:

    x <- Just(1)          Bound("x", lambda _: Just(1))
    y <- Just(2)          Bound("y", lambda _: Just(2))
    return x + y          Return(lambda s: s.x + s.y)
"""

from .policy import DEFAULT_POLICY, DoPolicy, MismatchPolicy
from .scope import Scope
from .patterns import Const, Guard, Mismatch, Of, Pattern, Seq, Var, Wildcard, as_pattern
from .statements import Bound, Let, Plain, Return, Statement
from .terms import BindTo, LetIn, Pure, Source, Term
from .desugar import desugar, run
from .builder import Block, do

__all__ = (
    "DEFAULT_POLICY",
    "BindTo",
    "Block",
    "Bound",
    "Const",
    "DoPolicy",
    "Guard",
    "Let",
    "LetIn",
    "Mismatch",
    "MismatchPolicy",
    "Of",
    "Pattern",
    "Plain",
    "Pure",
    "Return",
    "Scope",
    "Seq",
    "Source",
    "Statement",
    "Term",
    "Var",
    "Wildcard",
    "as_pattern",
    "desugar",
    "do",
    "run",
)
