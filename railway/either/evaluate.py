"""
Either comprehensions
=====================

    @either.go
    def checkout():
        cart = yield from load_cart(user_id)
        total = yield from price(cart)
        return total

The first left halts the comprehension and becomes the result.

Inside comprehensions kungfu values bind too: `Ok(v)` resumes with `v` and
`Error(e)` halts with `left(e)`. The async `bind` additionally awaits
`LazyCoroResult` computations, and `go_lazy` hands the whole comprehension
back to kungfu as a `LazyCoroResult`.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine, Iterable, Mapping
from functools import wraps

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import ForeignYieldError
from .._types import AsyncGo, Bind, Go, MaybeAwaitable
from ..collection.builder import Builder, DictBuilder, ListBuilder, NoOpBuilder
from ..collection.traverse import liftM, reduceM, traverse_entries_intoM, traverse_intoM
from ..comprehension import Halt, Resume, step_asyncM, stepM
from .monad import Either, Left, Right, left, right

# Anything a comprehension may yield or bind
type Step[A, B] = Either[A, B] | Result[B, A]


def _visit(state: None, yielded: typing.Any) -> Resume[typing.Any, None] | Halt[Either[typing.Any, typing.Never]]:
    match yielded:
        case Right(val) | Ok(val):
            return Resume(val, state)
        case Left():
            return Halt(yielded)
        case Error(err):
            return Halt(left(err))
        case _:
            raise ForeignYieldError("Either", yielded)


def _finish[B](state: None, value: B) -> Either[typing.Never, B]:
    _ = state
    return right(value)


def _accepting_lazy(bind: Bind[typing.Any]) -> Bind[typing.Any]:
    async def either_bind(step: MaybeAwaitable[typing.Any]) -> typing.Any:
        if isinstance(step, LazyCoroResult):
            step = step()
        return await bind(step)

    return either_bind


# ============================================================================
# Entry points
# ============================================================================


def go[R](fn: Callable[[], Go[Step[typing.Any, typing.Any], R]]) -> Either[typing.Any, R]:
    """Run a generator comprehension. Usable as a decorator on a 0-arg fn."""
    return stepM(fn(), initial=None, visit=_visit, finish=_finish)


def go_fn[**P, R](
    fn: Callable[P, Go[Step[typing.Any, typing.Any], R]],
) -> Callable[P, Either[typing.Any, R]]:
    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Either[typing.Any, R]:
        return stepM(fn(*args, **kwargs), initial=None, visit=_visit, finish=_finish)

    return wrapper


async def go_async[R](body: AsyncGo[typing.Any, R]) -> Either[typing.Any, R]:
    """
    Run an async comprehension.

    `await bind(x)` accepts an Either, a kungfu Result, a LazyCoroResult, or
    any awaitable of the first two.
    """
    return await step_asyncM(
        lambda bind: body(_accepting_lazy(bind)),
        initial=None,
        visit=_visit,
        finish=_finish,
    )


def go_async_fn[**P, R](
    fn: Callable[typing.Concatenate[Bind[typing.Any], P], Coroutine[typing.Any, typing.Any, R]],
) -> Callable[P, Coroutine[typing.Any, typing.Any, Either[typing.Any, R]]]:
    """Decorator form of go_async; `bind` is passed as the first argument."""

    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Either[typing.Any, R]:
        return await go_async(lambda bind: fn(bind, *args, **kwargs))

    return wrapper


def go_lazy[R](body: AsyncGo[typing.Any, R]) -> LazyCoroResult[R, typing.Any]:
    """
    Wrap an async comprehension as a kungfu LazyCoroResult.

    Nothing runs until the result is awaited; right/left become Ok/Error.
    """

    async def run() -> Result[R, typing.Any]:
        outcome = await go_async(body)
        return outcome.to_result()

    return LazyCoroResult(run)


# ============================================================================
# Collections
# ============================================================================


def reduce[A, E, Acc](
    items: Iterable[A],
    accum: Callable[[Acc, A], Either[E, Acc]],
    initial: Acc,
) -> Either[E, Acc]:
    """Fold left to right; stops at the first left."""
    return reduceM(items, accum, initial, go=go)


def traverse_into[A, E, T, R](
    items: Iterable[A],
    f: Callable[[A, int], Either[E, T]],
    builder: Builder[T, R],
) -> Either[E, R]:
    return traverse_intoM(items, f, builder, go=go)


def traverse_entries_into[K, V, E, T, R](
    entries: Iterable[tuple[K, V]],
    f: Callable[[V, K, int], Either[E, T]],
    builder: Builder[tuple[K, T], R],
) -> Either[E, R]:
    return traverse_entries_intoM(entries, f, builder, go=go)


def traverse[A, E, T](items: Iterable[A], f: Callable[[A, int], Either[E, T]]) -> Either[E, list[T]]:
    return traverse_into(items, f, ListBuilder[T]())


def traverse_entries[K, V, E, T](
    entries: Iterable[tuple[K, V]],
    f: Callable[[V, K, int], Either[E, T]],
) -> Either[E, dict[K, T]]:
    return traverse_entries_into(entries, f, DictBuilder[K, T]())


def collect_into[E, T, R](eithers: Iterable[Either[E, T]], builder: Builder[T, R]) -> Either[E, R]:
    return traverse_into(eithers, lambda e, _: e, builder)


def collect[E, T](eithers: Iterable[Either[E, T]]) -> Either[E, list[T]]:
    """[Either[E, T]] -> Either[E, [T]]; the first left wins."""
    return traverse(eithers, lambda e, _: e)


def gather[K, E, T](eithers: Mapping[K, Either[E, T]]) -> Either[E, dict[K, T]]:
    return traverse_entries(eithers.items(), lambda e, _k, _i: e)


def for_each[A, E](items: Iterable[A], f: Callable[[A, int], Either[E, typing.Any]]) -> Either[E, None]:
    return traverse_into(items, f, NoOpBuilder())


def lift[R](fn: Callable[..., R]) -> Callable[..., Either[typing.Any, R]]:
    """lift(f)(right(a), right(b)) == right(f(a, b)); the first left wins."""
    return liftM(fn, go=go)


__all__ = (
    "Step",
    "collect",
    "collect_into",
    "for_each",
    "gather",
    "go",
    "go_async",
    "go_async_fn",
    "go_fn",
    "go_lazy",
    "lift",
    "reduce",
    "traverse",
    "traverse_entries",
    "traverse_entries_into",
    "traverse_into",
)
