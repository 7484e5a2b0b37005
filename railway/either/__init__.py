"""
Either: one of two values, right-biased.

    from railway import either

    either.right(2).map(lambda x: x * 10)           # Right(val=20)
    either.left("boom").map(lambda x: x * 10)       # Left(val='boom')
    either.collect([either.right(1), either.left("x")])  # Left(val='x')
"""

from .evaluate import (
    Step,
    collect,
    collect_into,
    for_each,
    gather,
    go,
    go_async,
    go_async_fn,
    go_fn,
    go_lazy,
    lift,
    reduce,
    traverse,
    traverse_entries,
    traverse_entries_into,
    traverse_into,
)
from .monad import Either, Left, Right, from_result, from_validation, left, right
from .par import collect_par, gather_par, traverse_par

__all__ = (
    # Variants
    "Either",
    "Left",
    "Right",
    "Step",
    # Constructors
    "from_result",
    "from_validation",
    "left",
    "right",
    # Comprehensions
    "go",
    "go_async",
    "go_async_fn",
    "go_fn",
    "go_lazy",
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
    "gather_par",
    "traverse_par",
)
