"""
These
=====

A first value, a second value, or both: `First(value)`, `Second(value)`,
`Both(fst, snd)`.

The second side is the "result" side. Unlike Either, a first value does not
always stop a chain: `Both` carries a result together with a first value
(a warning, a log line), and chaining keeps combining first values with the
semigroup `cmb`:

    both("a", 1).flat_map(lambda x: both("b", x + 1))   # Both(fst='ab', snd=2)
    both("a", 1).flat_map(lambda x: first("b"))         # First(value='ab')

Ordering: first < second < both; `Both` compares `fst` then `snd`.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import assert_never

from .._helpers import first_arg, identity
from ..kernel.ordering import OrdMixin, Ordering, cmp
from ..kernel.semigroup import cmb


class _TheseSyntax(OrdMixin):
    """Operations shared by the three These variants."""

    __slots__ = ()

    def is_first(self) -> bool:
        return isinstance(self, First)

    def is_second(self) -> bool:
        return isinstance(self, Second)

    def is_both(self) -> bool:
        return isinstance(self, Both)

    def fold[A, B, T1, T2, T3](
        self: These[A, B],
        on_first: Callable[[A], T1],
        on_second: Callable[[B], T2],
        on_both: Callable[[A, B], T3],
    ) -> T1 | T2 | T3:
        """Case analysis: call exactly one of the three branches."""
        match self:
            case First(value):
                return on_first(value)
            case Second(value):
                return on_second(value)
            case Both(fst, snd):
                return on_both(fst, snd)
            case _ as unreachable:
                assert_never(unreachable)

    # Monad operations

    def flat_map[E, B, B1](self: These[E, B], f: Callable[[B], These[E, B1]], /) -> These[E, B1]:
        """
        Bind, accumulating first values.

        First(e)    -> self, f is not called
        Second(b)   -> f(b)
        Both(e, b)  -> f(b) with e combined into its first value (if any),
                       or paired with its second value
        """
        match self:
            case First():
                return self
            case Second(value):
                return f(value)
            case Both(fst, snd):
                match f(snd):
                    case First(value):
                        return First(cmb(fst, value))
                    case Second(value):
                        return Both(fst, value)
                    case Both(fst1, snd1):
                        return Both(cmb(fst, fst1), snd1)
                    case _ as unreachable:
                        assert_never(unreachable)
            case _ as unreachable:
                assert_never(unreachable)

    def flat[E, B](self: These[E, These[E, B]]) -> These[E, B]:
        """Flatten a These whose second value is itself a These."""
        return self.flat_map(identity)

    def zip_with[E, B, B1, B2](
        self: These[E, B],
        other: These[E, B1],
        f: Callable[[B, B1], B2],
        /,
    ) -> These[E, B2]:
        return self.flat_map(lambda lhs: other.map(lambda rhs: f(lhs, rhs)))

    def zip_fst[E, B](self: These[E, B], other: These[E, typing.Any], /) -> These[E, B]:
        return self.zip_with(other, first_arg)

    def zip_snd[E, B1](self: These[E, typing.Any], other: These[E, B1], /) -> These[E, B1]:
        return self.flat_map(lambda _: other)

    def bimap[A, B, A1, B1](
        self: These[A, B],
        map_first: Callable[[A], A1],
        map_second: Callable[[B], B1],
        /,
    ) -> These[A1, B1]:
        """Transform whichever payloads are present."""
        return self.fold(
            lambda value: First(map_first(value)),
            lambda value: Second(map_second(value)),
            lambda fst, snd: Both(map_first(fst), map_second(snd)),
        )

    def map_first[A, B, A1](self: These[A, B], f: Callable[[A], A1], /) -> These[A1, B]:
        return self.bimap(f, identity)

    def map[A, B, B1](self: These[A, B], f: Callable[[B], B1], /) -> These[A, B1]:
        return self.bimap(identity, f)

    def map_to[A, B1](self: These[A, typing.Any], value: B1, /) -> These[A, B1]:
        """Overwrite the second value, if there is one."""
        return self.map(lambda _: value)

    # Eq / Ord / Semigroup

    def cmp[A, B](self: These[A, B], other: These[A, B], /) -> Ordering:
        match self, other:
            case First(lhs), First(rhs):
                return cmp(lhs, rhs)
            case Second(lhs), Second(rhs):
                return cmp(lhs, rhs)
            case Both(fst, snd), Both(fst1, snd1):
                return cmp(fst, fst1).cmb(cmp(snd, snd1))
            case (First() | Second() | Both()), (First() | Second() | Both()):
                return Ordering.from_int(_RANK[type(self)] - _RANK[type(other)])
            case _ as unreachable:
                assert_never(unreachable)

    def cmb[A, B](self: These[A, B], other: These[A, B], /) -> These[A, B]:
        """Combine first values with first values and second with second."""
        match self, other:
            case First(a), First(b):
                return First(cmb(a, b))
            case First(a), Second(y):
                return Both(a, y)
            case First(a), Both(b, y):
                return Both(cmb(a, b), y)
            case Second(x), First(b):
                return Both(b, x)
            case Second(x), Second(y):
                return Second(cmb(x, y))
            case Second(x), Both(b, y):
                return Both(b, cmb(x, y))
            case Both(a, x), First(b):
                return Both(cmb(a, b), x)
            case Both(a, x), Second(y):
                return Both(a, cmb(x, y))
            case Both(a, x), Both(b, y):
                return Both(cmb(a, b), cmb(x, y))
            case _ as unreachable:
                assert_never(unreachable)

    # Comprehension protocol

    def __iter__[B](self: These[typing.Any, B]) -> Generator[These[typing.Any, B], typing.Any, B]:
        """`x = yield from t` inside these.go() binds the second value."""
        return (yield self)


@typing.final
@dataclass(frozen=True, slots=True)
class First[A](_TheseSyntax):
    value: A


@typing.final
@dataclass(frozen=True, slots=True)
class Second[B](_TheseSyntax):
    value: B


@typing.final
@dataclass(frozen=True, slots=True)
class Both[A, B](_TheseSyntax):
    fst: A
    snd: B


type These[A, B] = First[A] | Second[B] | Both[A, B]

_TheseSyntax._variants = (First, Second, Both)

_RANK: dict[type, int] = {First: 0, Second: 1, Both: 2}


# ============================================================================
# Constructors
# ============================================================================


def first[A](value: A) -> These[A, typing.Never]:
    return First(value)


def second[B](value: B) -> These[typing.Never, B]:
    return Second(value)


def both[A, B](fst: A, snd: B) -> These[A, B]:
    return Both(fst, snd)


__all__ = (
    "Both",
    "First",
    "Second",
    "These",
    "both",
    "first",
    "second",
)
