"""
Railway-oriented outcome types for Python.

Four closely related containers share one chainable interface, a
generator-based comprehension syntax, lawful ordering and `cmb`:

- maybe:   Nothing | Just(val)
- either:  Left(val) | Right(val)
- these:   First(value) | Second(value) | Both(fst, snd)
- ior:     Left(val) | Right(val) | Both(fst, snd)

plus `validation` (applicative error accumulation) and `pair`.

Architecture:
- Generic evaluators (stepM, step_asyncM) drive comprehensions for any family
- Generic collection combinators (*M functions) take the family's `go`
- Each family package provides the sugar: go, go_async, traverse, collect, ...
"""

import logging

# Core types
from ._types import AsyncGo, Bind, Go, MaybeAwaitable, Predicate, Thunk

# Errors
from ._errors import ForeignYieldError, NotASemigroupError

# Internal helpers (for custom families)
from . import _helpers

# Kernel
from .kernel import (
    Ord,
    OrdMixin,
    Ordering,
    Semigroup,
    clamp,
    cmb,
    cmb_all,
    cmp,
    eq,
    ge,
    gt,
    le,
    lt,
    max_by,
    min_by,
)

# Comprehension evaluators
from .comprehension import Halt, Resume, Visit, step_asyncM, stepM

# Collections
from .collection import (
    Builder,
    DictBuilder,
    GoRunner,
    IndexedListBuilder,
    ListBuilder,
    NoOpBuilder,
    ParPolicy,
    liftM,
    reduceM,
    traverse_entries_intoM,
    traverse_intoM,
    traverse_into_parM,
)

# Families
from . import either, ior, maybe, these, validation
from .either import Either, Left, Right, left, right
from .ior import Ior
from .maybe import Just, Maybe, Nothing, just, nothing
from .pair import Pair
from .these import Both, First, Second, These, both, first, second
from .validation import Invalid, Valid, Validation, invalid, valid

logging.getLogger("railway").addHandler(logging.NullHandler())

__all__ = (
    # Types
    "AsyncGo",
    "Bind",
    "Go",
    "MaybeAwaitable",
    "Predicate",
    "Thunk",
    # Errors
    "ForeignYieldError",
    "NotASemigroupError",
    # Kernel
    "Ord",
    "OrdMixin",
    "Ordering",
    "Semigroup",
    "clamp",
    "cmb",
    "cmb_all",
    "cmp",
    "eq",
    "ge",
    "gt",
    "le",
    "lt",
    "max_by",
    "min_by",
    # Comprehension evaluators
    "Halt",
    "Resume",
    "Visit",
    "stepM",
    "step_asyncM",
    # Collections
    "Builder",
    "DictBuilder",
    "GoRunner",
    "IndexedListBuilder",
    "ListBuilder",
    "NoOpBuilder",
    "ParPolicy",
    "liftM",
    "reduceM",
    "traverse_entries_intoM",
    "traverse_intoM",
    "traverse_into_parM",
    # Family namespaces
    "either",
    "ior",
    "maybe",
    "these",
    "validation",
    # Maybe
    "Just",
    "Maybe",
    "Nothing",
    "just",
    "nothing",
    # Either
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    # These
    "Both",
    "First",
    "Second",
    "These",
    "both",
    "first",
    "second",
    # Ior
    "Ior",
    # Validation
    "Invalid",
    "Valid",
    "Validation",
    "invalid",
    "valid",
    # Pair
    "Pair",
)
