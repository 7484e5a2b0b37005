"""Builders, generic combinators and the concurrent *_par traversals."""

from __future__ import annotations

import asyncio
import logging

import pytest

from railway import (
    DictBuilder,
    IndexedListBuilder,
    ListBuilder,
    NoOpBuilder,
    ParPolicy,
    either,
    maybe,
    reduceM,
    traverse_intoM,
)
from railway.collection import par as par_module

pytestmark = pytest.mark.unit


# =============================================================================
# Builders
# =============================================================================


def test_list_builder_keeps_add_order() -> None:
    b = ListBuilder[int]()
    b.add(2)
    b.add(1)
    assert b.finish() == [2, 1]


def test_indexed_list_builder_orders_by_index() -> None:
    b = IndexedListBuilder[str]()
    for entry in [(2, "c"), (0, "a"), (1, "b")]:
        b.add(entry)
    assert b.finish() == ["a", "b", "c"]


def test_dict_and_noop_builders() -> None:
    d = DictBuilder[str, int]()
    d.add(("a", 1))
    d.add(("a", 2))
    assert d.finish() == {"a": 2}
    n = NoOpBuilder()
    n.add("ignored")
    assert n.finish() is None


# =============================================================================
# Generic combinators
# =============================================================================


def test_generic_combinators_take_any_family_runner() -> None:
    assert reduceM([1, 2], lambda acc, x: maybe.just(acc * 10 + x), 0, go=maybe.go) == maybe.just(12)
    got = traverse_intoM(["a", "b"], lambda s, i: either.right(s * (i + 1)), ListBuilder(), go=either.go)
    assert got == either.right(["a", "bb"])


# =============================================================================
# Concurrent traversals
# =============================================================================


def _delayed(value, delay: float):
    async def run():
        await asyncio.sleep(delay)
        return value

    return run()


def test_par_policy_validates() -> None:
    assert ParPolicy().cancel_pending is False
    with pytest.raises(ValueError, match="cancel_pending"):
        ParPolicy(cancel_pending="yes")  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_collect_par_keeps_index_order_when_completing_out_of_order() -> None:
    finished: list[int] = []

    async def job(idx: int, delay: float):
        await asyncio.sleep(delay)
        finished.append(idx)
        return maybe.just(f"v{idx}")

    # completion order is 2, 0, 1
    got = await maybe.collect_par([job(0, 0.02), job(1, 0.03), job(2, 0.01)])
    assert finished == [2, 0, 1]
    assert got == maybe.just(["v0", "v1", "v2"])


@pytest.mark.asyncio
async def test_either_collect_par_order_and_failure() -> None:
    got = await either.collect_par([_delayed(either.right(0), 0.02), _delayed(either.right(1), 0.0)])
    assert got == either.right([0, 1])
    got = await either.collect_par([_delayed(either.right(0), 0.02), either.left("bad")])
    assert got == either.left("bad")
    await asyncio.sleep(0.05)


@pytest.mark.asyncio
async def test_par_handlers_all_start_before_any_finishes() -> None:
    started: list[int] = []

    async def handler(x: int, _: int):
        started.append(x)
        await asyncio.sleep(0)
        return maybe.just(x)

    got = await maybe.traverse_par([1, 2, 3], handler)
    assert got == maybe.just([1, 2, 3])
    assert sorted(started) == [1, 2, 3]


@pytest.mark.asyncio
async def test_first_failure_resolves_and_losers_keep_running() -> None:
    slow_done = asyncio.Event()

    async def slow():
        await asyncio.sleep(0.02)
        slow_done.set()
        return maybe.just("late")

    before = set(par_module._abandoned)
    got = await maybe.collect_par([slow(), _delayed(maybe.nothing, 0.0)])
    assert got is maybe.nothing
    assert not slow_done.is_set()
    abandoned = par_module._abandoned - before
    assert len(abandoned) == 1
    await asyncio.wait_for(slow_done.wait(), timeout=1)
    await asyncio.sleep(0.01)
    assert not abandoned & par_module._abandoned


@pytest.mark.asyncio
async def test_cancel_pending_cancels_losers(caplog: pytest.LogCaptureFixture) -> None:
    cancelled = asyncio.Event()

    async def slow():
        try:
            await asyncio.sleep(1)
        except asyncio.CancelledError:
            cancelled.set()
            raise
        return either.right("late")

    got = await either.collect_par(
        [slow(), _delayed(either.left("fast"), 0.0)],
        policy=ParPolicy(cancel_pending=True),
    )
    assert got == either.left("fast")
    await asyncio.wait_for(cancelled.wait(), timeout=1)
    assert any(
        "cancelled 1 task" in r.getMessage() and r.levelno == logging.DEBUG for r in caplog.records
    )


@pytest.mark.asyncio
async def test_abandoned_failures_are_retrieved_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    async def explode_later():
        await asyncio.sleep(0.01)
        raise RuntimeError("late failure")

    got = await maybe.collect_par([explode_later(), maybe.nothing])
    assert got is maybe.nothing
    await asyncio.sleep(0.05)
    assert any("late failure" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_handler_exception_propagates() -> None:
    async def boom(x: int, _: int):
        raise ZeroDivisionError(x)

    with pytest.raises(ZeroDivisionError):
        await maybe.traverse_par([1], boom)


@pytest.mark.asyncio
async def test_maybe_par_sugar() -> None:
    got = await maybe.gather_par({"b": _delayed(maybe.just(2), 0.01), "a": maybe.just(1)})
    assert got == maybe.just({"b": 2, "a": 1})
    assert list(got.unwrap(dict, lambda d: d)) == ["b", "a"]
    assert await maybe.traverse_entries_par([("k", 1)], lambda v, k, i: maybe.just((k, v, i))) == maybe.just(
        {"k": ("k", 1, 0)}
    )
    assert await maybe.for_each_par([1, 2], lambda x, _: maybe.just(x)) == maybe.just(None)
    add = maybe.lift_par(lambda a, b: a + b)
    assert await add(_delayed(maybe.just(1), 0.01), maybe.just(2)) == maybe.just(3)
    assert await add(maybe.nothing, maybe.just(2)) is maybe.nothing
    builder_got = await maybe.traverse_into_par([1, 2], lambda x, _: maybe.just(x), NoOpBuilder())
    assert builder_got == maybe.just(None)
    entries_got = await maybe.traverse_entries_into_par([("a", 1)], lambda v, k, i: maybe.just(v), DictBuilder())
    assert entries_got == maybe.just({"a": 1})


@pytest.mark.asyncio
async def test_either_gather_and_traverse_par() -> None:
    got = await either.gather_par({"x": _delayed(either.right(1), 0.01), "y": either.right(2)})
    assert got == either.right({"x": 1, "y": 2})
    got = await either.traverse_par([1, 2], lambda x, i: either.right(x + i))
    assert got == either.right([1, 3])
