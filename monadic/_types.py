"""
Core type definitions for monadic.

Aliases shared by the contract, the instances and the do-block machinery.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

if typing.TYPE_CHECKING:
    from .notation.scope import Scope

# ============================================================================
# Type aliases
# ============================================================================

# Binder = continuation passed to bind
type Binder[A, M] = Callable[[A], M]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = host expression, evaluated against the names bound so far
type Thunk[T] = Callable[[Scope], T]

__all__ = (
    "Binder",
    "Predicate",
    "Thunk",
)
