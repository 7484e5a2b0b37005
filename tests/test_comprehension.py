"""Evaluator behaviour shared by every family: halting, cleanup, errors."""

from __future__ import annotations

import asyncio
import logging

import pytest

from railway import ForeignYieldError, either, ior, maybe, these

pytestmark = pytest.mark.unit

# (family, a step that continues with 1, a step that halts)
FAMILIES = [
    pytest.param(maybe, maybe.just(1), maybe.nothing, id="maybe"),
    pytest.param(either, either.right(1), either.left("e"), id="either"),
    pytest.param(these, these.second(1), these.first("e"), id="these"),
    pytest.param(ior, ior.right(1), ior.left("e"), id="ior"),
]


# =============================================================================
# Synchronous
# =============================================================================


@pytest.mark.parametrize(("family", "ok", "halt"), FAMILIES)
def test_halt_runs_cleanup_exactly_once(family, ok, halt) -> None:
    cleanups: list[str] = []

    @family.go
    def result():
        try:
            x = yield ok
            yield halt
            return x
        finally:
            cleanups.append("done")

    assert result == halt
    assert cleanups == ["done"]


@pytest.mark.parametrize(("family", "ok", "halt"), FAMILIES)
def test_normal_completion_runs_cleanup_once(family, ok, halt) -> None:
    cleanups: list[str] = []

    @family.go
    def result():
        try:
            return (yield ok)
        finally:
            cleanups.append("done")

    assert result == family.go(lambda: (yield ok))
    assert cleanups == ["done"]


@pytest.mark.parametrize(("family", "ok", "halt"), FAMILIES)
def test_foreign_yield_is_a_type_error(family, ok, halt) -> None:
    def steps():
        yield ok
        yield 42
        return 0

    with pytest.raises(ForeignYieldError) as exc:
        family.go(steps)
    assert isinstance(exc.value, TypeError)
    assert exc.value.value == 42


def test_foreign_yield_still_closes_the_generator() -> None:
    cleanups: list[str] = []

    def steps():
        try:
            yield "not a maybe"
        finally:
            cleanups.append("done")

    with pytest.raises(ForeignYieldError):
        maybe.go(steps)
    assert cleanups == ["done"]


def test_user_exceptions_propagate_after_cleanup() -> None:
    cleanups: list[str] = []

    @either.go_fn
    def explode():
        try:
            yield either.right(1)
            raise KeyError("boom")
        finally:
            cleanups.append("done")

    with pytest.raises(KeyError):
        explode()
    assert cleanups == ["done"]


def test_yield_during_cleanup_is_a_runtime_error() -> None:
    def steps():
        try:
            yield maybe.nothing
        finally:
            yield maybe.just(0)

    with pytest.raises(RuntimeError):
        maybe.go(steps)


def test_halt_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    maybe.go(lambda: (yield maybe.nothing))
    assert any("halted" in r.getMessage() and r.levelno == logging.DEBUG for r in caplog.records)


# =============================================================================
# Asynchronous
# =============================================================================


@pytest.mark.asyncio
@pytest.mark.parametrize(("family", "ok", "halt"), FAMILIES)
async def test_async_halt_runs_cleanup_exactly_once(family, ok, halt) -> None:
    cleanups: list[str] = []
    reached: list[str] = []

    async def body(bind):
        try:
            x = await bind(ok)
            await bind(halt)
            reached.append("after halt")
            return x
        finally:
            cleanups.append("done")

    assert await family.go_async(body) == halt
    assert cleanups == ["done"]
    assert reached == []


@pytest.mark.asyncio
async def test_async_bind_accepts_awaitables_in_order() -> None:
    order: list[int] = []

    async def fetch(n: int):
        await asyncio.sleep(0.01 * (3 - n))
        order.append(n)
        return maybe.just(n)

    async def body(bind):
        a = await bind(fetch(1))
        b = await bind(fetch(2))
        return a + b

    assert await maybe.go_async(body) == maybe.just(3)
    assert order == [1, 2]


@pytest.mark.asyncio
async def test_async_halt_is_not_swallowed_by_except_exception() -> None:
    async def body(bind):
        try:
            await bind(either.left("e"))
        except Exception:
            return "swallowed"
        return "unreachable"

    assert await either.go_async(body) == either.left("e")


@pytest.mark.asyncio
async def test_async_accumulates_both() -> None:
    async def body(bind):
        x = await bind(these.both("a", 1))
        y = await bind(these.both("b", 2))
        return x + y

    assert await these.go_async(body) == these.both("ab", 3)


@pytest.mark.asyncio
async def test_outer_bind_used_inside_inner_comprehension_halts_outer() -> None:
    async def outer(outer_bind):
        async def inner(inner_bind):
            await inner_bind(maybe.just(1))
            await outer_bind(maybe.nothing)
            return "inner done"

        inner_result = await maybe.go_async(inner)
        return ("outer done", inner_result)

    assert await maybe.go_async(outer) is maybe.nothing


@pytest.mark.asyncio
async def test_go_async_fn_passes_bind_first() -> None:
    @either.go_async_fn
    async def add(bind, a: int, b: int):
        x = await bind(either.right(a))
        return x + b

    assert await add(1, 2) == either.right(3)


@pytest.mark.asyncio
async def test_async_foreign_value_is_a_type_error() -> None:
    async def body(bind):
        return await bind("nope")

    with pytest.raises(ForeignYieldError):
        await ior.go_async(body)
