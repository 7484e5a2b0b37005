"""
Pair
====

A plain product of two values. Compares lexicographically and combines
pairwise, so it can carry two semigroups through any outcome container:

    Pair("a", [1]).cmb(Pair("b", [2]))   # Pair(fst='ab', snd=[1, 2])
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .kernel.ordering import OrdMixin, Ordering, cmp
from .kernel.semigroup import cmb


@typing.final
@dataclass(frozen=True, slots=True)
class Pair[A, B](OrdMixin):
    fst: A
    snd: B

    @staticmethod
    def from_tuple[A1, B1](t: tuple[A1, B1], /) -> Pair[A1, B1]:
        fst, snd = t
        return Pair(fst, snd)

    @property
    def val(self) -> tuple[A, B]:
        return (self.fst, self.snd)

    def unwrap[T](self, f: Callable[[A, B], T], /) -> T:
        return f(self.fst, self.snd)

    def map_fst[A1](self, f: Callable[[A], A1], /) -> Pair[A1, B]:
        return Pair(f(self.fst), self.snd)

    def map[B1](self, f: Callable[[B], B1], /) -> Pair[A, B1]:
        return Pair(self.fst, f(self.snd))

    def cmp(self, other: Pair[A, B], /) -> Ordering:
        return cmp(self.fst, other.fst).cmb(cmp(self.snd, other.snd))

    def cmb(self, other: Pair[A, B], /) -> Pair[A, B]:
        return Pair(cmb(self.fst, other.fst), cmb(self.snd, other.snd))


Pair._variants = (Pair,)


__all__ = ("Pair",)
