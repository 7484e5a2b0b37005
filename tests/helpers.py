"""Test helpers: hypothesis strategies and law checkers.

Keep this file small: one strategy per outcome family, one checker per law.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from hypothesis import strategies as st

from railway import cmb, cmp, either, eq, ior, maybe, these, validation
from railway.pair import Pair

# =============================================================================
# Strategies
# =============================================================================

ints = st.integers(min_value=-5, max_value=5)
strs = st.text(alphabet="abc", max_size=3)


def maybes(values: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(st.just(maybe.nothing), values.map(maybe.just))


def eithers(lefts: st.SearchStrategy[Any], rights: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(lefts.map(either.left), rights.map(either.right))


def theses(firsts: st.SearchStrategy[Any], seconds: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(
        firsts.map(these.first),
        seconds.map(these.second),
        st.builds(these.both, firsts, seconds),
    )


def iors(lefts: st.SearchStrategy[Any], rights: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(
        lefts.map(ior.left),
        rights.map(ior.right),
        st.builds(ior.both, lefts, rights),
    )


def validations(errs: st.SearchStrategy[Any], vals: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(errs.map(validation.invalid), vals.map(validation.valid))


def pairs(fsts: st.SearchStrategy[Any], snds: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.builds(Pair, fsts, snds)


# =============================================================================
# Law checkers
# =============================================================================


def check_eq(a: Any, b: Any, c: Any) -> None:
    """Equivalence relation: reflexive, symmetric, transitive."""
    assert eq(a, a)
    assert eq(a, b) == eq(b, a)
    if eq(a, b) and eq(b, c):
        assert eq(a, c)


def check_ord(a: Any, b: Any, c: Any) -> None:
    """Total order consistent with equality."""
    assert eq(a, b) == cmp(a, b).is_eq()
    assert cmp(a, b) == cmp(b, a).reverse()
    if cmp(a, b).is_le() and cmp(b, c).is_le():
        assert cmp(a, c).is_le()
    assert (a < b) == cmp(a, b).is_lt()
    assert (a >= b) == cmp(a, b).is_ge()


def check_semigroup(a: Any, b: Any, c: Any) -> None:
    """Associativity of cmb."""
    assert cmb(cmb(a, b), c) == cmb(a, cmb(b, c))


# =============================================================================
# Test doubles
# =============================================================================


@dataclass
class Counter:
    """Callable stub that records how often it ran."""

    fn: Callable[..., Any]
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.fn(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@dataclass(frozen=True)
class Sum:
    """Integer semigroup under addition; falsy at zero."""

    val: int

    def cmb(self, other: Sum) -> Sum:
        return Sum(self.val + other.val)

    def __bool__(self) -> bool:
        return self.val != 0
