"""
Core type definitions for railway.

Aliases shared across the outcome families and their evaluators.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine, Generator

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = deferred value, called at most once by the consumer
type Thunk[T] = Callable[[], T]

# MaybeAwaitable = handler result accepted by async binds and *_par traversals
type MaybeAwaitable[T] = T | Awaitable[T]

# ============================================================================
# Comprehension shapes
# ============================================================================

# Go = body of a synchronous comprehension.
# Yields outcomes, receives their success payloads, returns the final value.
type Go[Y, R] = Generator[Y, typing.Any, R]

# Bind = unwraps one outcome inside an asynchronous comprehension
type Bind[Y] = Callable[[MaybeAwaitable[Y]], Awaitable[typing.Any]]

# AsyncGo = body of an asynchronous comprehension
type AsyncGo[Y, R] = Callable[[Bind[Y]], Coroutine[typing.Any, typing.Any, R]]

__all__ = (
    "Predicate",
    "Thunk",
    "MaybeAwaitable",
    "Go",
    "Bind",
    "AsyncGo",
)
