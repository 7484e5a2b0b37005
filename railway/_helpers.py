"""Internal helpers for railway.

Common functions used across multiple outcome families.
These are not part of the public API but can be used for writing custom evaluators."""

from __future__ import annotations

import inspect
import typing

from ._types import MaybeAwaitable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def first_arg[T](x: T, *_: typing.Any) -> T:
    """Keep the first argument, ignore the rest."""
    return x

def second_arg[T](_: typing.Any, y: T, /) -> T:
    """Keep the second argument."""
    return y

async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """
    Await value if it is awaitable, return it as-is otherwise.

    Lets handlers return either a plain outcome or a coroutine of one.
    """
    if inspect.isawaitable(value):
        return await value
    return value

__all__ = (
    "identity",
    "first_arg",
    "second_arg",
    "resolve",
)
