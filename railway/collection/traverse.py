"""Traverse combinators

Sequential collection combinators written once as comprehensions and
specialized per family by passing that family's `go`. Elements are visited
strictly left to right; a short-circuit stops before the next element's
computation is started."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._types import Go
from .builder import Builder

# GoRunner = a family's comprehension entry point (maybe.go, either.go, ...)
type GoRunner[Y, Out] = Callable[[Callable[[], Go[Y, typing.Any]]], Out]


# Generic combinators (family passed as `go`)

def reduceM[A, Acc, Y, Out](
    items: Iterable[A],
    accum: Callable[[Acc, A], Y],
    initial: Acc,
    *,
    go: GoRunner[Y, Out],
) -> Out:
    """Fold left to right; every step may short-circuit."""

    def steps() -> Go[Y, Acc]:
        acc = initial
        for item in items:
            acc = yield accum(acc, item)
        return acc

    return go(steps)


def traverse_intoM[A, Y, R, Out](
    items: Iterable[A],
    handler: Callable[[A, int], Y],
    builder: Builder[typing.Any, R],
    *,
    go: GoRunner[Y, Out],
) -> Out:
    """Feed each success payload to `builder`, in input order."""

    def steps() -> Go[Y, R]:
        for idx, item in enumerate(items):
            builder.add((yield handler(item, idx)))
        return builder.finish()

    return go(steps)


def traverse_entries_intoM[K, V, Y, R, Out](
    entries: Iterable[tuple[K, V]],
    handler: Callable[[V, K, int], Y],
    builder: Builder[tuple[K, typing.Any], R],
    *,
    go: GoRunner[Y, Out],
) -> Out:
    """Keyed traverse: builder receives `(key, payload)` entries."""

    def steps() -> Go[Y, R]:
        for idx, (key, value) in enumerate(entries):
            builder.add((key, (yield handler(value, key, idx))))
        return builder.finish()

    return go(steps)


def liftM[R, Y, Out](
    fn: Callable[..., R],
    *,
    go: GoRunner[Y, Out],
) -> Callable[..., Out]:
    """
    Adapt a plain n-ary function to take outcomes.

    Arguments are unwrapped left to right; `fn` runs only if all succeed.
    """

    def lifted(*outcomes: Y) -> Out:
        def steps() -> Go[Y, R]:
            args: list[typing.Any] = []
            for outcome in outcomes:
                args.append((yield outcome))
            return fn(*args)

        return go(steps)

    return lifted


__all__ = (
    "GoRunner",
    "liftM",
    "reduceM",
    "traverse_entries_intoM",
    "traverse_intoM",
)
