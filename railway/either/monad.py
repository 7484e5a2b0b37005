"""
Either
======

Exactly one of two values: `Left(val)` (failure) or `Right(val)` (success).
Right-biased: `map`, `flat_map` and friends act on the right side and pass a
left through untouched.

Ordering: left < right; same sides compare by payload.
Semigroup: two rights combine their payloads; the first left wins.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result

from .._helpers import first_arg, second_arg
from ..kernel.ordering import OrdMixin, Ordering, cmp
from ..kernel.semigroup import cmb

if typing.TYPE_CHECKING:
    from ..validation import Validation


class _EitherSyntax(OrdMixin):
    """Operations shared by both Either variants."""

    __slots__ = ()

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def unwrap[A, B, T1, T2](
        self: Either[A, B],
        on_left: Callable[[A], T1],
        on_right: Callable[[B], T2],
    ) -> T1 | T2:
        """Case analysis: call exactly one of the two branches."""
        match self:
            case Left(val):
                return on_left(val)
            case Right(val):
                return on_right(val)
            case _ as unreachable:
                assert_never(unreachable)

    def get_or[B, B1](self: Either[typing.Any, B], fallback: B1, /) -> B | B1:
        return self.unwrap(lambda _: fallback, lambda val: val)

    def to_result[A, B](self: Either[A, B]) -> Result[B, A]:
        """Right(v) -> Ok(v), Left(e) -> Error(e)."""
        return self.unwrap(Error, Ok)

    # Monad operations

    def flat_map[A, B, A1, B1](
        self: Either[A, B],
        f: Callable[[B], Either[A1, B1]],
        /,
    ) -> Either[A | A1, B1]:
        """Bind: a left short-circuits without calling f."""
        match self:
            case Left():
                return self
            case Right(val):
                return f(val)
            case _ as unreachable:
                assert_never(unreachable)

    def recover[A, B, A1, B1](
        self: Either[A, B],
        f: Callable[[A], Either[A1, B1]],
        /,
    ) -> Either[A1, B | B1]:
        """Dual of flat_map: replace a left with f(left payload)."""
        match self:
            case Left(val):
                return f(val)
            case Right():
                return self
            case _ as unreachable:
                assert_never(unreachable)

    def zip_with[A, B, A1, B1, B2](
        self: Either[A, B],
        other: Either[A1, B1],
        f: Callable[[B, B1], B2],
        /,
    ) -> Either[A | A1, B2]:
        """Combine two rights with f; the first left wins."""
        return self.flat_map(lambda lhs: other.map(lambda rhs: f(lhs, rhs)))

    def zip_fst[A, B, A1](self: Either[A, B], other: Either[A1, typing.Any], /) -> Either[A | A1, B]:
        return self.zip_with(other, first_arg)

    def zip_snd[A, A1, B1](self: Either[A, typing.Any], other: Either[A1, B1], /) -> Either[A | A1, B1]:
        return self.zip_with(other, second_arg)

    def map[A, B, B1](self: Either[A, B], f: Callable[[B], B1], /) -> Either[A, B1]:
        return self.flat_map(lambda val: Right(f(val)))

    def map_left[A, B, A1](self: Either[A, B], f: Callable[[A], A1], /) -> Either[A1, B]:
        return self.recover(lambda val: Left(f(val)))

    # Eq / Ord / Semigroup

    def cmp[A, B](self: Either[A, B], other: Either[A, B], /) -> Ordering:
        match self, other:
            case Left(lhs), Left(rhs):
                return cmp(lhs, rhs)
            case Right(lhs), Right(rhs):
                return cmp(lhs, rhs)
            case Left(), Right():
                return Ordering.LESS
            case Right(), Left():
                return Ordering.GREATER
            case _ as unreachable:
                assert_never(unreachable)

    def cmb[A, B](self: Either[A, B], other: Either[A, B], /) -> Either[A, B]:
        match self, other:
            case Right(lhs), Right(rhs):
                return Right(cmb(lhs, rhs))
            case Left(), Left() | Right():
                return self
            case Right(), Left():
                return other
            case _ as unreachable:
                assert_never(unreachable)

    # Comprehension protocol

    def __iter__[B](self: Either[typing.Any, B]) -> Generator[Either[typing.Any, B], typing.Any, B]:
        """`x = yield from e` inside either.go() binds the right payload."""
        return (yield self)


@typing.final
@dataclass(frozen=True, slots=True)
class Left[A](_EitherSyntax):
    """The failed side."""

    val: A


@typing.final
@dataclass(frozen=True, slots=True)
class Right[B](_EitherSyntax):
    """The successful side."""

    val: B


type Either[A, B] = Left[A] | Right[B]

_EitherSyntax._variants = (Left, Right)


# ============================================================================
# Constructors
# ============================================================================


def left[A](val: A) -> Either[A, typing.Never]:
    return Left(val)


def right[B](val: B) -> Either[typing.Never, B]:
    return Right(val)


def from_result[B, A](result: Result[B, A]) -> Either[A, B]:
    """Ok(v) -> right(v), Error(e) -> left(e)."""
    match result:
        case Ok(val):
            return Right(val)
        case Error(err):
            return Left(err)
        case _ as unreachable:
            assert_never(unreachable)


def from_validation[E, T](validation: Validation[E, T]) -> Either[E, T]:
    """Invalid(e) -> left(e), Valid(v) -> right(v)."""
    return validation.unwrap(Left, Right)


__all__ = (
    "Either",
    "Left",
    "Right",
    "from_result",
    "from_validation",
    "left",
    "right",
)
