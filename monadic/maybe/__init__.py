"""
Maybe
=====

Optional-value monad: Just(x) or Nothing.
"""

from .value import NOTHING, Just, Maybe, Nothing
from .instance import MAYBE, bind, extract, fail, unit
from .functions import (
    cat_maybes,
    from_just,
    from_maybe,
    from_optional,
    is_just,
    is_nothing,
    list_to_maybe,
    map_maybes,
    maybe,
    maybe_to_list,
    to_optional,
)

__all__ = (
    "MAYBE",
    "NOTHING",
    "Just",
    "Maybe",
    "Nothing",
    "bind",
    "cat_maybes",
    "extract",
    "fail",
    "from_just",
    "from_maybe",
    "from_optional",
    "is_just",
    "is_nothing",
    "list_to_maybe",
    "map_maybes",
    "maybe",
    "maybe_to_list",
    "to_optional",
    "unit",
)
