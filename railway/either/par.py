"""Concurrent Either traversals

All handlers start at once; the first left to finish resolves the call."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Mapping

from kungfu import Error, Ok, Result

from .._helpers import resolve
from .._types import MaybeAwaitable
from ..collection.builder import IndexedListBuilder
from ..collection.par import ParPolicy, traverse_into_parM
from .monad import Either, Left, Right, left, right


def _extract[E, T](e: Either[E, T]) -> Result[T, E]:
    match e:
        case Right(val):
            return Ok(val)
        case Left(err):
            return Error(err)
        case _ as unreachable:
            typing.assert_never(unreachable)


async def traverse_par[A, E, T](
    items: Iterable[A],
    f: Callable[[A, int], MaybeAwaitable[Either[E, T]]],
    *,
    policy: ParPolicy = ParPolicy(),
) -> Either[E, list[T]]:
    """Concurrent traverse; the list is in input order."""

    async def tagged(item: A, idx: int) -> Either[E, tuple[int, T]]:
        outcome = await resolve(f(item, idx))
        return outcome.map(lambda val: (idx, val))

    return await traverse_into_parM(
        items,
        tagged,
        IndexedListBuilder[T](),
        extract=_extract,
        on_ok=right,
        on_err=left,
        policy=policy,
    )


def collect_par[E, T](
    eithers: Iterable[MaybeAwaitable[Either[E, T]]],
    *,
    policy: ParPolicy = ParPolicy(),
) -> typing.Awaitable[Either[E, list[T]]]:
    """[Awaitable[Either[E, T]]] -> Either[E, [T]], awaited concurrently."""
    return traverse_par(eithers, lambda e, _: e, policy=policy)


async def gather_par[K, E, T](
    eithers: Mapping[K, MaybeAwaitable[Either[E, T]]],
    *,
    policy: ParPolicy = ParPolicy(),
) -> Either[E, dict[K, T]]:
    """{k: Awaitable[Either[E, T]]} -> Either[E, {k: T}]; keys keep their order."""
    keys = list(eithers)
    values = await collect_par(eithers.values(), policy=policy)
    return values.map(lambda vals: dict(zip(keys, vals, strict=True)))


__all__ = ("collect_par", "gather_par", "traverse_par")
