from __future__ import annotations

import pytest
from hypothesis import given, settings

from railway import either, ior
from railway.ior import both, left, right

from tests.helpers import Counter, Sum, check_eq, check_ord, check_semigroup, iors, ints, strs

pytestmark = pytest.mark.unit


def test_unwrap_has_three_branches() -> None:
    branches = (lambda a: ("L", a), lambda b: ("R", b), lambda a, b: ("B", a, b))
    assert left(1).unwrap(*branches) == ("L", 1)
    assert right(2).unwrap(*branches) == ("R", 2)
    assert both(1, 2).unwrap(*branches) == ("B", 1, 2)
    assert both(1, 2).is_both() and left(1).is_left() and right(1).is_right()


def test_left_flat_map_short_circuits() -> None:
    f = Counter(right)
    assert left("e").flat_map(f) == left("e")
    assert f.count == 0


def test_accumulation_law() -> None:
    assert both("e1", "s1").flat_map(lambda _: left("e2")) == left("e1e2")
    assert both("e1", "s1").flat_map(lambda _: both("e2", "s2")) == both("e1e2", "s2")
    assert both("e1", "s1").flat_map(lambda s: right(s + "!")) == both("e1", "s1!")


def test_maps_and_zips() -> None:
    assert both(1, 2).bimap(str, str) == both("1", "2")
    assert left(1).map(str) == left(1)
    assert both(1, 2).map_left(str) == both("1", 2)
    assert right(1).zip_with(both("w", 2), lambda a, b: a + b) == both("w", 3)
    assert both("a", 1).zip_fst(both("b", 2)) == both("ab", 1)
    assert right(1).zip_snd(right(2)) == right(2)


def test_either_conversions() -> None:
    assert both("w", 1).to_either() == either.right(1)
    assert left("e").to_either() == either.left("e")
    assert ior.from_either(either.right(1)) == right(1)
    assert ior.from_either(either.left("e")) == left("e")


def test_cmb_truth_table_corners() -> None:
    assert left("a").cmb(right("y")) == both("a", "y")
    assert right("x").cmb(left("b")) == both("b", "x")
    assert both("a", "x").cmb(both("b", "y")) == both("ab", "xy")


@pytest.mark.laws
@settings(max_examples=100, deadline=None)
@given(iors(ints, ints), iors(ints, ints), iors(ints, ints))
def test_ior_is_lawful_ord(a, b, c) -> None:
    check_eq(a, b, c)
    check_ord(a, b, c)


@pytest.mark.laws
@settings(max_examples=100, deadline=None)
@given(iors(strs, strs), iors(strs, strs), iors(strs, strs))
def test_ior_is_lawful_semigroup(a, b, c) -> None:
    check_semigroup(a, b, c)


@pytest.mark.parametrize(
    ("steps", "expected"),
    [
        ((left("a"), left("c")), left("a")),
        ((left("a"), right(4)), left("a")),
        ((right(2), left("c")), left("c")),
        ((right(2), right(4)), right((2, 4))),
        ((right(2), both("c", 4)), both("c", (2, 4))),
        ((both("a", 2), left("c")), left("ac")),
        ((both("a", 2), right(4)), both("a", (2, 4))),
        ((both("a", 2), both("c", 4)), both("ac", (2, 4))),
    ],
)
def test_go(steps, expected) -> None:
    first_step, second_step = steps

    @ior.go
    def result():
        x = yield from first_step
        y = yield from second_step
        return (x, y)

    assert result == expected


def test_reduce_scenario() -> None:
    assert ior.reduce(["x", "y"], lambda acc, x: both("a", acc + x), "") == both("aa", "xy")


def test_collections() -> None:
    assert ior.collect([right(1), right(2)]) == right([1, 2])
    assert ior.collect([both("w", 1), left("e"), right(3)]) == left("we")
    assert ior.gather({"a": right(1), "b": both("w", 2)}) == both("w", {"a": 1, "b": 2})
    assert ior.lift(lambda a, b: a * b)(right(2), both("w", 3)) == both("w", 6)


def test_falsy_left_values_still_count() -> None:
    @ior.go
    def empty_string():
        x = yield both("", 1)
        y = yield right(2)
        return x + y

    @ior.go
    def zero_then_left():
        yield both(Sum(0), 1)
        yield left(Sum(5))
        return 0

    assert empty_string == both("", 3)
    assert zero_then_left == left(Sum(5))


def test_collect_into_and_lift_named() -> None:
    from railway import DictBuilder

    got = ior.collect_into([right(("a", 1)), both("w", ("b", 2))], DictBuilder())
    assert got == both("w", {"a": 1, "b": 2})
    scale = ior.lift_named(lambda value, factor: value * factor)
    assert scale(value=both("a", 2), factor=both("b", 3)) == both("ab", 6)
    assert scale(value=right(2), factor=left("e")) == left("e")


def test_cmp_rejects_operands_from_outside_the_family() -> None:
    with pytest.raises(AssertionError):
        right(1).cmp(42)
