"""
Asynchronous stepper
====================

Async generators cannot return a value, so asynchronous comprehensions are
coroutine functions that receive a `bind`:

    async def body(bind):
        user = await bind(fetch_user(42))      # outcome or awaitable of one
        team = await bind(fetch_team(user.team_id))
        return user, team

`bind` awaits one step, visits it and either hands back the payload or halts.
Halting unwinds the body with a private BaseException, so `finally` and
`async with` blocks run exactly once and `except Exception` in user code
cannot swallow the halt. Steps are strictly sequential.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from typing import assert_never

from .._helpers import resolve
from .._types import AsyncGo, MaybeAwaitable
from .step import Halt, Resume, Visit

log = logging.getLogger(__name__)


class _Halted(BaseException):
    """Unwinds an asynchronous comprehension. Never escapes its evaluator."""

    def __init__(self, owner: object, result: typing.Any) -> None:
        super().__init__()
        self.owner = owner
        self.result = result


async def step_asyncM[Y, S, R, Out](
    body: AsyncGo[Y, R],
    *,
    initial: S,
    visit: Visit[Y, S, Out],
    finish: Callable[[S, R], Out],
) -> Out:
    """
    Generic asynchronous comprehension evaluator.

    Same contract as stepM; every advance may suspend.
    """
    state = initial

    async def bind(step: MaybeAwaitable[Y]) -> typing.Any:
        nonlocal state
        outcome = await resolve(step)
        match visit(state, outcome):
            case Resume(value=value, state=next_state):
                state = next_state
                return value
            case Halt(result=result):
                raise _Halted(bind, result)
            case _ as unreachable:
                assert_never(unreachable)

    try:
        value = await body(bind)
    except _Halted as halted:
        # A bind that leaked from another comprehension belongs to that one
        if halted.owner is not bind:
            raise
        log.debug("async comprehension halted: %r", halted.result)
        return halted.result
    return finish(state, value)


__all__ = ("step_asyncM",)
