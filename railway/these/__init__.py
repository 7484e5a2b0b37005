"""
These: a first value, a second value, or both, with first values accumulated.

    from railway import these

    these.both("a", 1).flat_map(lambda x: these.both("b", x + 1))  # Both(fst='ab', snd=2)
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
from .monad import Both, First, Second, These, both, first, second

__all__ = (
    # Variants
    "Both",
    "First",
    "Second",
    "These",
    # Constructors
    "both",
    "first",
    "second",
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
