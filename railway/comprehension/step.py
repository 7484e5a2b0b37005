"""
Synchronous stepper
===================

Drives a generator-based comprehension. The generator yields outcomes; the
stepper inspects each one through a family-specific `visit` and either sends
the success payload back in or halts the generator.

Halting calls `close()`, which raises GeneratorExit at the suspended `yield`
so `finally` and `with` blocks inside the comprehension run exactly once.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from .._types import Go

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resume[T, S]:
    """Send `value` back into the comprehension, carry `state` forward."""

    value: T
    state: S


@dataclass(frozen=True, slots=True)
class Halt[Out]:
    """Stop the comprehension; `result` is the evaluator's answer."""

    result: Out


# Visit = (state, yielded outcome) -> what the stepper does next
type Visit[Y, S, Out] = Callable[[S, Y], Resume[typing.Any, S] | Halt[Out]]


def stepM[Y, S, R, Out](
    steps: Go[Y, R],
    *,
    initial: S,
    visit: Visit[Y, S, Out],
    finish: Callable[[S, R], Out],
) -> Out:
    """
    Generic synchronous comprehension evaluator.

    1. Advance the generator to its next yield.
    2. Resume: send the payload back, go to 1.
    3. Halt: close the generator, return the halt result.
    4. Generator returned `r`: return finish(state, r).
    """
    state = initial
    try:
        yielded = next(steps)
        while True:
            match visit(state, yielded):
                case Resume(value=value, state=next_state):
                    state = next_state
                    yielded = steps.send(value)
                case Halt(result=result):
                    log.debug("comprehension halted: %r", result)
                    return result
                case _ as unreachable:
                    assert_never(unreachable)
    except StopIteration as stop:
        return finish(state, stop.value)
    finally:
        # No-op once the generator has returned or raised
        steps.close()


__all__ = ("Halt", "Resume", "Visit", "stepM")
