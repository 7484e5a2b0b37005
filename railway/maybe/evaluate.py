"""
Maybe comprehensions
====================

    from railway import maybe

    @maybe.go
    def total():
        x = yield parse_int("1")
        y = yield from parse_int("2")   # same thing, better typed
        return x + y

    total  # Just(val=3)

Any `nothing` yielded halts the comprehension; `finally` blocks still run.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Iterable, Mapping
from functools import wraps

from .._errors import ForeignYieldError
from .._types import AsyncGo, Bind, Go
from ..collection.builder import Builder, DictBuilder, ListBuilder, NoOpBuilder
from ..collection.traverse import liftM, reduceM, traverse_entries_intoM, traverse_intoM
from ..comprehension import Halt, Resume, step_asyncM, stepM
from .monad import Just, Maybe, Nothing, just, nothing


def _visit(state: None, yielded: typing.Any) -> Resume[typing.Any, None] | Halt[Maybe[typing.Never]]:
    match yielded:
        case Just(val):
            return Resume(val, state)
        case Nothing():
            return Halt(nothing)
        case _:
            raise ForeignYieldError("Maybe", yielded)


def _finish[R](state: None, value: R) -> Maybe[R]:
    _ = state
    return just(value)


# ============================================================================
# Entry points
# ============================================================================


def go[R](fn: Callable[[], Go[Maybe[typing.Any], R]]) -> Maybe[R]:
    """Run a generator comprehension. Usable as a decorator on a 0-arg fn."""
    return stepM(fn(), initial=None, visit=_visit, finish=_finish)


def go_fn[**P, R](fn: Callable[P, Go[Maybe[typing.Any], R]]) -> Callable[P, Maybe[R]]:
    """Turn a generator function with parameters into a Maybe-returning one."""

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Maybe[R]:
        return stepM(fn(*args, **kwargs), initial=None, visit=_visit, finish=_finish)

    return wrapper


async def go_async[R](body: AsyncGo[Maybe[typing.Any], R]) -> Maybe[R]:
    """Run an async comprehension: `async def body(bind): ...`."""
    return await step_asyncM(body, initial=None, visit=_visit, finish=_finish)


def go_async_fn[**P, R](
    fn: Callable[typing.Concatenate[Bind[Maybe[typing.Any]], P], Coroutine[typing.Any, typing.Any, R]],
) -> Callable[P, Coroutine[typing.Any, typing.Any, Maybe[R]]]:
    """Decorator form of go_async; `bind` is passed as the first argument."""

    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Maybe[R]:
        return await go_async(lambda bind: fn(bind, *args, **kwargs))

    return wrapper


# ============================================================================
# Collections
# ============================================================================


def reduce[A, Acc](
    items: Iterable[A],
    accum: Callable[[Acc, A], Maybe[Acc]],
    initial: Acc,
) -> Maybe[Acc]:
    """Fold left to right; stops at the first nothing."""
    return reduceM(items, accum, initial, go=go)


def traverse_into[A, T, R](
    items: Iterable[A],
    f: Callable[[A, int], Maybe[T]],
    builder: Builder[T, R],
) -> Maybe[R]:
    return traverse_intoM(items, f, builder, go=go)


def traverse_entries_into[K, V, T, R](
    entries: Iterable[tuple[K, V]],
    f: Callable[[V, K, int], Maybe[T]],
    builder: Builder[tuple[K, T], R],
) -> Maybe[R]:
    return traverse_entries_intoM(entries, f, builder, go=go)


def traverse[A, T](items: Iterable[A], f: Callable[[A, int], Maybe[T]]) -> Maybe[list[T]]:
    """Map each element to a Maybe, collect the payloads into a list."""
    return traverse_into(items, f, ListBuilder[T]())


def traverse_entries[K, V, T](
    entries: Iterable[tuple[K, V]],
    f: Callable[[V, K, int], Maybe[T]],
) -> Maybe[dict[K, T]]:
    return traverse_entries_into(entries, f, DictBuilder[K, T]())


def collect_into[T, R](maybes: Iterable[Maybe[T]], builder: Builder[T, R]) -> Maybe[R]:
    return traverse_into(maybes, lambda m, _: m, builder)


def collect[T](maybes: Iterable[Maybe[T]]) -> Maybe[list[T]]:
    """[Maybe[T]] -> Maybe[[T]]."""
    return traverse(maybes, lambda m, _: m)


def gather[K, T](maybes: Mapping[K, Maybe[T]]) -> Maybe[dict[K, T]]:
    """{k: Maybe[T]} -> Maybe[{k: T}], keys preserved."""
    return traverse_entries(maybes.items(), lambda m, _k, _i: m)


def for_each[A](items: Iterable[A], f: Callable[[A, int], Maybe[typing.Any]]) -> Maybe[None]:
    """Run f for its effect on each element; payloads are discarded."""
    return traverse_into(items, f, NoOpBuilder())


def lift[R](fn: Callable[..., R]) -> Callable[..., Maybe[R]]:
    """lift(f)(just(a), just(b)) == just(f(a, b))."""
    return liftM(fn, go=go)


__all__ = (
    "collect",
    "collect_into",
    "for_each",
    "gather",
    "go",
    "go_async",
    "go_async_fn",
    "go_fn",
    "lift",
    "reduce",
    "traverse",
    "traverse_entries",
    "traverse_entries_into",
    "traverse_into",
)
