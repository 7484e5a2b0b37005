"""
These comprehensions
====================

    @these.go
    def pipeline():
        x = yield both("warn: cache miss; ", 1)
        y = yield second(x + 1)
        return x + y

    pipeline  # Both(fst='warn: cache miss; ', snd=3)

First values met along the way are combined with `cmb`. A `Both` keeps the
comprehension going; a bare `First` stops it with everything collected so
far.
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
from ..kernel.semigroup import cmb
from ..maybe import Maybe, just, nothing
from .monad import Both, First, Second, These, both, first, second

# Combined first values seen so far; nothing until the first one shows up
type _Acc = Maybe[typing.Any]


def _visit(acc: _Acc, yielded: typing.Any) -> Resume[typing.Any, _Acc] | Halt[These[typing.Any, typing.Never]]:
    match yielded:
        case Second(value):
            return Resume(value, acc)
        case Both(fst, snd):
            return Resume(snd, acc.cmb(just(fst)))
        case First(value):
            return Halt(first(acc.map(lambda seen: cmb(seen, value)).get_or(value)))
        case _:
            raise ForeignYieldError("These", yielded)


def _finish[B](acc: _Acc, value: B) -> These[typing.Any, B]:
    return acc.unwrap(lambda: second(value), lambda seen: both(seen, value))


# ============================================================================
# Entry points
# ============================================================================


def go[R](fn: Callable[[], Go[These[typing.Any, typing.Any], R]]) -> These[typing.Any, R]:
    """Run a generator comprehension. Usable as a decorator on a 0-arg fn."""
    return stepM(fn(), initial=nothing, visit=_visit, finish=_finish)


def go_fn[**P, R](
    fn: Callable[P, Go[These[typing.Any, typing.Any], R]],
) -> Callable[P, These[typing.Any, R]]:
    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> These[typing.Any, R]:
        return stepM(fn(*args, **kwargs), initial=nothing, visit=_visit, finish=_finish)

    return wrapper


async def go_async[R](body: AsyncGo[These[typing.Any, typing.Any], R]) -> These[typing.Any, R]:
    return await step_asyncM(body, initial=nothing, visit=_visit, finish=_finish)


def go_async_fn[**P, R](
    fn: Callable[typing.Concatenate[Bind[These[typing.Any, typing.Any]], P], Coroutine[typing.Any, typing.Any, R]],
) -> Callable[P, Coroutine[typing.Any, typing.Any, These[typing.Any, R]]]:
    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> These[typing.Any, R]:
        return await go_async(lambda bind: fn(bind, *args, **kwargs))

    return wrapper


# ============================================================================
# Collections
# ============================================================================


def reduce[A, E, Acc](
    items: Iterable[A],
    accum: Callable[[Acc, A], These[E, Acc]],
    initial: Acc,
) -> These[E, Acc]:
    """
    Fold left to right, accumulating first values.

    Example:
        reduce(["x", "y"], lambda acc, x: both("a", acc + x), "")
        # Both(fst='aa', snd='xy')
    """
    return reduceM(items, accum, initial, go=go)


def traverse_into[A, E, T, R](
    items: Iterable[A],
    f: Callable[[A, int], These[E, T]],
    builder: Builder[T, R],
) -> These[E, R]:
    return traverse_intoM(items, f, builder, go=go)


def traverse_entries_into[K, V, E, T, R](
    entries: Iterable[tuple[K, V]],
    f: Callable[[V, K, int], These[E, T]],
    builder: Builder[tuple[K, T], R],
) -> These[E, R]:
    return traverse_entries_intoM(entries, f, builder, go=go)


def traverse[A, E, T](items: Iterable[A], f: Callable[[A, int], These[E, T]]) -> These[E, list[T]]:
    return traverse_into(items, f, ListBuilder[T]())


def traverse_entries[K, V, E, T](
    entries: Iterable[tuple[K, V]],
    f: Callable[[V, K, int], These[E, T]],
) -> These[E, dict[K, T]]:
    return traverse_entries_into(entries, f, DictBuilder[K, T]())


def collect_into[E, T, R](values: Iterable[These[E, T]], builder: Builder[T, R]) -> These[E, R]:
    return traverse_into(values, lambda t, _: t, builder)


def collect[E, T](values: Iterable[These[E, T]]) -> These[E, list[T]]:
    return traverse(values, lambda t, _: t)


def gather[K, E, T](values: Mapping[K, These[E, T]]) -> These[E, dict[K, T]]:
    return traverse_entries(values.items(), lambda t, _k, _i: t)


def for_each[A, E](items: Iterable[A], f: Callable[[A, int], These[E, typing.Any]]) -> These[E, None]:
    return traverse_into(items, f, NoOpBuilder())


def lift[R](fn: Callable[..., R]) -> Callable[..., These[typing.Any, R]]:
    return liftM(fn, go=go)


def lift_named[R](fn: Callable[..., R]) -> Callable[..., These[typing.Any, R]]:
    """
    Lift a function of keyword arguments; first values accumulate in keyword order.

    Example:
        lift_named(lambda a, b: a + b)(a=both("x", 1), b=both("y", 2))
        # Both(fst='xy', snd=3)
    """

    def lifted(**values: These[typing.Any, typing.Any]) -> These[typing.Any, R]:
        return gather(values).map(lambda kwargs: fn(**kwargs))

    return lifted


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
    "lift_named",
    "reduce",
    "traverse",
    "traverse_entries",
    "traverse_entries_into",
    "traverse_into",
)
