"""
Monadic computation with do-notation.

One contract (bind / unit / fail) implemented by several instances, and a
do-block desugarer that turns straight-line statements into nested binds.

Architecture:
- Monad[M] record: the contract, plus derived ops written once (fmap, sequence, ...)
- Instances: MAYBE (Just / Nothing), RESULT (kungfu Ok / Error), LIST
- Do-blocks: statements -> desugar() -> Term -> evaluate()
- Collection helpers over any instance's try-extract (catM / map_catM)
"""

# Core types
from ._types import Binder, Predicate, Thunk

# Errors
from ._errors import (
    EmptyBlockError,
    FailUnsupportedError,
    FromJustError,
    InvalidBlockError,
    MonadicError,
    PatternMatchError,
)

# Helpers
from ._helpers import const, identity

# Contract
from .monad import Monad
from . import laws

# Instances
from . import maybe
from .maybe import (
    MAYBE,
    NOTHING,
    Just,
    Maybe,
    Nothing,
    cat_maybes,
    from_just,
    from_maybe,
    from_optional,
    is_just,
    is_nothing,
    list_to_maybe,
    map_maybes,
    maybe_to_list,
    to_optional,
)
from .instances import LIST, RESULT

# Collection
from .collection import catM, cat_oks, map_catM, map_oks

# Do-notation
from . import notation
from .notation import (
    DoPolicy,
    Block,
    Bound,
    Const,
    Guard,
    Let,
    Of,
    Plain,
    Return,
    Scope,
    Seq,
    Var,
    Wildcard,
    desugar,
    do,
    run,
)

__all__ = (
    # Core types
    "Binder",
    "Predicate",
    "Thunk",
    # Errors
    "EmptyBlockError",
    "FailUnsupportedError",
    "FromJustError",
    "InvalidBlockError",
    "MonadicError",
    "PatternMatchError",
    # Helpers
    "const",
    "identity",
    # Contract
    "Monad",
    "laws",
    # Maybe
    "maybe",
    "MAYBE",
    "NOTHING",
    "Just",
    "Maybe",
    "Nothing",
    "cat_maybes",
    "from_just",
    "from_maybe",
    "from_optional",
    "is_just",
    "is_nothing",
    "list_to_maybe",
    "map_maybes",
    "maybe_to_list",
    "to_optional",
    # Other instances
    "LIST",
    "RESULT",
    # Collection
    "catM",
    "cat_oks",
    "map_catM",
    "map_oks",
    # Do-notation
    "notation",
    "Block",
    "Bound",
    "Const",
    "DoPolicy",
    "Guard",
    "Let",
    "Of",
    "Plain",
    "Return",
    "Scope",
    "Seq",
    "Var",
    "Wildcard",
    "desugar",
    "do",
    "run",
)
