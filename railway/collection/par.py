"""
Parallel traverse
=================

Concurrent traversal with extract + wrap pattern.

Every handler is dispatched immediately as an asyncio task. Results are
consumed in completion order and the first failure resolves the traversal.
Tasks still in flight at that point are left running and their results are
discarded (default), or cancelled with `ParPolicy(cancel_pending=True)`.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._helpers import resolve
from .._types import MaybeAwaitable
from .builder import Builder

log = logging.getLogger(__name__)

# Abandoned tasks live here until done; the event loop only keeps weak refs
_abandoned: set[asyncio.Task[typing.Any]] = set()


@dataclass(frozen=True, slots=True)
class ParPolicy:
    """Configuration for *_par traversals: what happens to losers."""

    cancel_pending: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.cancel_pending, bool):
            raise ValueError("ParPolicy.cancel_pending must be a bool")


def _discard(task: asyncio.Task[typing.Any]) -> None:
    _abandoned.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        log.debug("discarded *_par task raised %r", exc)


def _release(tasks: list[asyncio.Task[typing.Any]], policy: ParPolicy) -> None:
    pending = 0
    for task in tasks:
        if task.done():
            # Mark exceptions retrieved for results nobody consumed
            if not task.cancelled():
                task.exception()
            continue
        pending += 1
        if policy.cancel_pending:
            task.cancel()
        else:
            _abandoned.add(task)
            task.add_done_callback(_discard)
    if pending:
        action = "cancelled" if policy.cancel_pending else "abandoned"
        log.debug("*_par traversal resolved early, %s %d task(s)", action, pending)


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


async def traverse_into_parM[A, Y, T, E, R, Out](
    items: Iterable[A],
    handler: Callable[[A, int], MaybeAwaitable[Y]],
    builder: Builder[T, R],
    *,
    extract: Callable[[Y], Result[T, E]],
    on_ok: Callable[[R], Out],
    on_err: Callable[[E], Out],
    policy: ParPolicy = ParPolicy(),
) -> Out:
    """
    Generic concurrent traverse.

    `builder` receives payloads in completion order; pass entries tagged
    with their index (IndexedListBuilder) to restore input order.
    """
    tasks: list[asyncio.Task[Y]] = []
    try:
        for idx, item in enumerate(items):
            tasks.append(asyncio.ensure_future(resolve(handler(item, idx))))

        for fut in asyncio.as_completed(tasks):
            outcome = await fut
            match extract(outcome):
                case Ok(value):
                    builder.add(value)
                case Error(err):
                    return on_err(err)
        return on_ok(builder.finish())
    finally:
        _release(tasks, policy)


__all__ = ("ParPolicy", "traverse_into_parM")
