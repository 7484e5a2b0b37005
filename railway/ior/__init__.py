"""
Ior: inclusive-or with Either-style names.

    from railway import ior

    ior.both("a", 1).flat_map(lambda x: ior.left("b"))   # Left(val='ab')
    ior.both("a", 1).to_either()                         # either Right(val=1)
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
    lift_named,
    reduce,
    traverse,
    traverse_entries,
    traverse_entries_into,
    traverse_into,
)
from .monad import Both, Ior, Left, Right, both, from_either, left, right

__all__ = (
    # Variants
    "Both",
    "Ior",
    "Left",
    "Right",
    # Constructors
    "both",
    "from_either",
    "left",
    "right",
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
    "lift_named",
    "reduce",
    "traverse",
    "traverse_entries",
    "traverse_entries_into",
    "traverse_into",
)
