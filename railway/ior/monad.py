"""
Ior
===

Inclusive-or: `Left(val)`, `Right(val)` or `Both(fst, snd)`.

Same accumulation rules as These, spelled like Either: a `Both` carries a
right value plus a left value that keeps being combined with `cmb` as the
chain goes on; a bare `Left` stops the chain.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import assert_never

from .._helpers import first_arg, identity
from ..either import Either
from ..either import Left as EitherLeft
from ..either import Right as EitherRight
from ..kernel.ordering import OrdMixin, Ordering, cmp
from ..kernel.semigroup import cmb


class _IorSyntax(OrdMixin):
    __slots__ = ()

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def is_both(self) -> bool:
        return isinstance(self, Both)

    def unwrap[A, B, T1, T2, T3](
        self: Ior[A, B],
        on_left: Callable[[A], T1],
        on_right: Callable[[B], T2],
        on_both: Callable[[A, B], T3],
    ) -> T1 | T2 | T3:
        match self:
            case Left(val):
                return on_left(val)
            case Right(val):
                return on_right(val)
            case Both(fst, snd):
                return on_both(fst, snd)
            case _ as unreachable:
                assert_never(unreachable)

    def to_either[A, B](self: Ior[A, B]) -> Either[A, B]:
        """Right and Both become right (the left side of Both is dropped)."""
        return self.unwrap(EitherLeft, EitherRight, lambda _, snd: EitherRight(snd))

    # Monad operations

    def flat_map[E, B, B1](self: Ior[E, B], f: Callable[[B], Ior[E, B1]], /) -> Ior[E, B1]:
        """Bind; the left side of a Both is combined into whatever f returns."""
        match self:
            case Left():
                return self
            case Right(val):
                return f(val)
            case Both(fst, snd):
                return f(snd).map_left(lambda val: cmb(fst, val)).unwrap(
                    Left,
                    lambda val: Both(fst, val),
                    Both,
                )
            case _ as unreachable:
                assert_never(unreachable)

    def zip_with[E, B, B1, B2](
        self: Ior[E, B],
        other: Ior[E, B1],
        f: Callable[[B, B1], B2],
        /,
    ) -> Ior[E, B2]:
        return self.flat_map(lambda lhs: other.map(lambda rhs: f(lhs, rhs)))

    def zip_fst[E, B](self: Ior[E, B], other: Ior[E, typing.Any], /) -> Ior[E, B]:
        return self.zip_with(other, first_arg)

    def zip_snd[E, B1](self: Ior[E, typing.Any], other: Ior[E, B1], /) -> Ior[E, B1]:
        return self.flat_map(lambda _: other)

    def bimap[A, B, A1, B1](
        self: Ior[A, B],
        map_left: Callable[[A], A1],
        map_right: Callable[[B], B1],
        /,
    ) -> Ior[A1, B1]:
        return self.unwrap(
            lambda val: Left(map_left(val)),
            lambda val: Right(map_right(val)),
            lambda fst, snd: Both(map_left(fst), map_right(snd)),
        )

    def map[A, B, B1](self: Ior[A, B], f: Callable[[B], B1], /) -> Ior[A, B1]:
        return self.bimap(identity, f)

    def map_left[A, B, A1](self: Ior[A, B], f: Callable[[A], A1], /) -> Ior[A1, B]:
        return self.bimap(f, identity)

    # Eq / Ord / Semigroup

    def cmp[A, B](self: Ior[A, B], other: Ior[A, B], /) -> Ordering:
        match self, other:
            case Left(lhs), Left(rhs):
                return cmp(lhs, rhs)
            case Right(lhs), Right(rhs):
                return cmp(lhs, rhs)
            case Both(fst, snd), Both(fst1, snd1):
                return cmp(fst, fst1).cmb(cmp(snd, snd1))
            case (Left() | Right() | Both()), (Left() | Right() | Both()):
                return Ordering.from_int(_RANK[type(self)] - _RANK[type(other)])
            case _ as unreachable:
                assert_never(unreachable)

    def cmb[A, B](self: Ior[A, B], other: Ior[A, B], /) -> Ior[A, B]:
        match self, other:
            case Left(a), Left(b):
                return Left(cmb(a, b))
            case Left(a), Right(y):
                return Both(a, y)
            case Left(a), Both(b, y):
                return Both(cmb(a, b), y)
            case Right(x), Left(b):
                return Both(b, x)
            case Right(x), Right(y):
                return Right(cmb(x, y))
            case Right(x), Both(b, y):
                return Both(b, cmb(x, y))
            case Both(a, x), Left(b):
                return Both(cmb(a, b), x)
            case Both(a, x), Right(y):
                return Both(a, cmb(x, y))
            case Both(a, x), Both(b, y):
                return Both(cmb(a, b), cmb(x, y))
            case _ as unreachable:
                assert_never(unreachable)

    # Comprehension protocol

    def __iter__[B](self: Ior[typing.Any, B]) -> Generator[Ior[typing.Any, B], typing.Any, B]:
        return (yield self)


@typing.final
@dataclass(frozen=True, slots=True)
class Left[A](_IorSyntax):
    val: A


@typing.final
@dataclass(frozen=True, slots=True)
class Right[B](_IorSyntax):
    val: B


@typing.final
@dataclass(frozen=True, slots=True)
class Both[A, B](_IorSyntax):
    fst: A
    snd: B


type Ior[A, B] = Left[A] | Right[B] | Both[A, B]

_IorSyntax._variants = (Left, Right, Both)

# left < right < both
_RANK: dict[type, int] = {Left: 0, Right: 1, Both: 2}


def left[A](val: A) -> Ior[A, typing.Never]:
    return Left(val)


def right[B](val: B) -> Ior[typing.Never, B]:
    return Right(val)


def both[A, B](fst: A, snd: B) -> Ior[A, B]:
    return Both(fst, snd)


def from_either[A, B](either: Either[A, B]) -> Ior[A, B]:
    """Left(a) -> left(a), Right(b) -> right(b)."""
    return either.unwrap(Left, Right)


__all__ = (
    "Both",
    "Ior",
    "Left",
    "Right",
    "both",
    "from_either",
    "left",
    "right",
)
