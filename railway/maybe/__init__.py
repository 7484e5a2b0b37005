"""
Maybe: an optional value.

    from railway import maybe

    maybe.just(1).map(str)            # Just(val='1')
    maybe.nothing.get_or(0)           # 0
    maybe.collect([maybe.just(1), maybe.nothing])   # Nothing
"""

from .evaluate import (
    collect,
    collect_into,
    for_each,
    gather,
    go,
    go_async,
    go_async_fn,
    go_fn,
    lift,
    reduce,
    traverse,
    traverse_entries,
    traverse_entries_into,
    traverse_into,
)
from .monad import (
    Just,
    Maybe,
    Nothing,
    from_option,
    from_optional,
    from_result,
    just,
    nothing,
    wrap_fn,
    wrap_pred,
)
from .par import (
    collect_par,
    for_each_par,
    gather_par,
    lift_par,
    traverse_entries_into_par,
    traverse_entries_par,
    traverse_into_par,
    traverse_par,
)

__all__ = (
    # Variants
    "Just",
    "Maybe",
    "Nothing",
    # Constructors
    "from_option",
    "from_optional",
    "from_result",
    "just",
    "nothing",
    "wrap_fn",
    "wrap_pred",
    # Comprehensions
    "go",
    "go_async",
    "go_async_fn",
    "go_fn",
    # Collections
    "collect",
    "collect_into",
    "for_each",
    "gather",
    "lift",
    "reduce",
    "traverse",
    "traverse_entries",
    "traverse_entries_into",
    "traverse_into",
    # Concurrent
    "collect_par",
    "for_each_par",
    "gather_par",
    "lift_par",
    "traverse_entries_into_par",
    "traverse_entries_par",
    "traverse_into_par",
    "traverse_par",
)
