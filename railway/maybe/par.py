"""
Concurrent Maybe traversals
===========================

All handlers start at once; the first `nothing` resolves the call.
Results keep input order whatever order the handlers finish in.

    users = await maybe.traverse_par(ids, lambda uid, _: find_user(uid))
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Mapping

from kungfu import Error, Ok, Result

from .._helpers import resolve
from .._types import MaybeAwaitable
from ..collection.builder import Builder, IndexedListBuilder, NoOpBuilder
from ..collection.par import ParPolicy, traverse_into_parM
from .monad import Just, Maybe, just, nothing


def _extract[T](m: Maybe[T]) -> Result[T, None]:
    match m:
        case Just(val):
            return Ok(val)
        case _:
            return Error(None)


def _nothing(_: None) -> Maybe[typing.Never]:
    return nothing


def _indexed[A, T](
    f: Callable[[A, int], MaybeAwaitable[Maybe[T]]],
) -> Callable[[A, int], typing.Awaitable[Maybe[tuple[int, T]]]]:
    async def tagged(item: A, idx: int) -> Maybe[tuple[int, T]]:
        outcome = await resolve(f(item, idx))
        return outcome.map(lambda val: (idx, val))

    return tagged


def _keyed[K, V, T](
    f: Callable[[V, K, int], MaybeAwaitable[Maybe[T]]],
) -> Callable[[tuple[K, V], int], typing.Awaitable[Maybe[tuple[K, T]]]]:
    async def keyed(entry: tuple[K, V], idx: int) -> Maybe[tuple[K, T]]:
        key, value = entry
        outcome = await resolve(f(value, key, idx))
        return outcome.map(lambda val: (key, val))

    return keyed


def traverse_into_par[A, T, R](
    items: Iterable[A],
    f: Callable[[A, int], MaybeAwaitable[Maybe[T]]],
    builder: Builder[T, R],
    *,
    policy: ParPolicy = ParPolicy(),
) -> typing.Awaitable[Maybe[R]]:
    """Concurrent traverse_into. `builder` receives payloads in completion order."""
    return traverse_into_parM(
        items,
        f,
        builder,
        extract=_extract,
        on_ok=just,
        on_err=_nothing,
        policy=policy,
    )


def traverse_entries_into_par[K, V, T, R](
    entries: Iterable[tuple[K, V]],
    f: Callable[[V, K, int], MaybeAwaitable[Maybe[T]]],
    builder: Builder[tuple[K, T], R],
    *,
    policy: ParPolicy = ParPolicy(),
) -> typing.Awaitable[Maybe[R]]:
    return traverse_into_par(entries, _keyed(f), builder, policy=policy)


async def traverse_par[A, T](
    items: Iterable[A],
    f: Callable[[A, int], MaybeAwaitable[Maybe[T]]],
    *,
    policy: ParPolicy = ParPolicy(),
) -> Maybe[list[T]]:
    """Concurrent traverse; the list is in input order."""
    return await traverse_into_par(items, _indexed(f), IndexedListBuilder[T](), policy=policy)


async def traverse_entries_par[K, V, T](
    entries: Iterable[tuple[K, V]],
    f: Callable[[V, K, int], MaybeAwaitable[Maybe[T]]],
    *,
    policy: ParPolicy = ParPolicy(),
) -> Maybe[dict[K, T]]:
    """Concurrent keyed traverse; keys keep their input order."""
    pairs = await traverse_par(entries, _keyed(f), policy=policy)
    return pairs.map(dict)


def collect_par[T](
    maybes: Iterable[MaybeAwaitable[Maybe[T]]],
    *,
    policy: ParPolicy = ParPolicy(),
) -> typing.Awaitable[Maybe[list[T]]]:
    """[Awaitable[Maybe[T]]] -> Maybe[[T]], awaited concurrently."""
    return traverse_par(maybes, lambda m, _: m, policy=policy)


def gather_par[K, T](
    maybes: Mapping[K, MaybeAwaitable[Maybe[T]]],
    *,
    policy: ParPolicy = ParPolicy(),
) -> typing.Awaitable[Maybe[dict[K, T]]]:
    return traverse_entries_par(maybes.items(), lambda m, _k, _i: m, policy=policy)


def for_each_par[A](
    items: Iterable[A],
    f: Callable[[A, int], MaybeAwaitable[Maybe[typing.Any]]],
    *,
    policy: ParPolicy = ParPolicy(),
) -> typing.Awaitable[Maybe[None]]:
    return traverse_into_par(items, f, NoOpBuilder(), policy=policy)


def lift_par[R](
    fn: Callable[..., R],
    *,
    policy: ParPolicy = ParPolicy(),
) -> Callable[..., typing.Awaitable[Maybe[R]]]:
    """Like lift, but the arguments may be awaitables and are awaited concurrently."""

    async def lifted(*maybes: MaybeAwaitable[Maybe[typing.Any]]) -> Maybe[R]:
        args = await collect_par(maybes, policy=policy)
        return args.map(lambda xs: fn(*xs))

    return lifted


__all__ = (
    "collect_par",
    "for_each_par",
    "gather_par",
    "lift_par",
    "traverse_entries_into_par",
    "traverse_entries_par",
    "traverse_into_par",
    "traverse_par",
)
