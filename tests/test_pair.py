from __future__ import annotations

import pytest
from hypothesis import given, settings

from railway import Ordering, cmp, maybe
from railway.pair import Pair

from tests.helpers import check_eq, check_ord, check_semigroup, ints, pairs, strs

pytestmark = pytest.mark.unit


def test_construction_and_val() -> None:
    pair = Pair(1, 2)
    assert (pair.fst, pair.snd) == (1, 2)
    assert pair.val == (1, 2)
    assert Pair.from_tuple((1, 2)) == pair


def test_unwrap_and_maps() -> None:
    assert Pair(1, 2).unwrap(lambda a, b: [a, b]) == [1, 2]
    assert Pair(1, 2).map_fst(lambda a: [a, 3]) == Pair([1, 3], 2)
    assert Pair(1, 2).map(lambda b: [b, 4]) == Pair(1, [2, 4])


def test_lexicographic_order() -> None:
    assert cmp(Pair(1, 9), Pair(2, 0)) is Ordering.LESS
    assert cmp(Pair(1, 1), Pair(1, 0)) is Ordering.GREATER
    assert cmp(Pair(1, 1), Pair(1, 1)) is Ordering.EQUAL


def test_pairwise_cmb_inside_a_container() -> None:
    got = maybe.just(Pair("a", [1])).cmb(maybe.just(Pair("b", [2])))
    assert got == maybe.just(Pair("ab", [1, 2]))


@pytest.mark.laws
@settings(max_examples=100, deadline=None)
@given(pairs(ints, ints), pairs(ints, ints), pairs(ints, ints))
def test_pair_is_lawful_ord(a, b, c) -> None:
    check_eq(a, b, c)
    check_ord(a, b, c)


@pytest.mark.laws
@settings(max_examples=100, deadline=None)
@given(pairs(strs, strs), pairs(strs, strs), pairs(strs, strs))
def test_pair_is_lawful_semigroup(a, b, c) -> None:
    check_semigroup(a, b, c)
