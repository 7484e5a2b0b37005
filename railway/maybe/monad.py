"""
Maybe
=====

An optional value: `Nothing` (the shared singleton `nothing`) or `Just(val)`.

Ordering: nothing < just(x); justs compare by payload.
Semigroup: nothing is the identity, two justs combine their payloads.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Generator
from dataclasses import dataclass
from functools import wraps
from typing import assert_never

from kungfu import Error, Ok, Option, Result, Some

from .._types import Go, Predicate, Thunk
from ..kernel.ordering import OrdMixin, Ordering, cmp
from ..kernel.semigroup import cmb


class _MaybeSyntax(OrdMixin):
    """Operations shared by both Maybe variants."""

    __slots__ = ()

    def is_nothing(self) -> bool:
        return isinstance(self, Nothing)

    def is_just(self) -> bool:
        return isinstance(self, Just)

    def unwrap[T, T1, T2](
        self: Maybe[T],
        if_nothing: Callable[[], T1],
        if_just: Callable[[T], T2],
    ) -> T1 | T2:
        """Case analysis: call exactly one of the two branches."""
        match self:
            case Nothing():
                return if_nothing()
            case Just(val):
                return if_just(val)
            case _ as unreachable:
                assert_never(unreachable)

    def get_or_else[T, T1](self: Maybe[T], f: Thunk[T1], /) -> T | T1:
        """Payload, or the thunk's result when nothing."""
        match self:
            case Just(val):
                return val
            case _:
                return f()

    def get_or[T, T1](self: Maybe[T], fallback: T1, /) -> T | T1:
        return self.get_or_else(lambda: fallback)

    def to_optional[T](self: Maybe[T]) -> T | None:
        return self.get_or(None)

    def to_result[T, E](self: Maybe[T], *, error: Thunk[E]) -> Result[T, E]:
        """
        Convert to kungfu Result. Nothing becomes Error(error()).

        `error` is a thunk so it is never built for a just.
        """
        match self:
            case Just(val):
                return Ok(val)
            case _:
                return Error(error())

    def or_else[T, T1](self: Maybe[T], f: Thunk[Maybe[T1]], /) -> Maybe[T | T1]:
        return f() if self.is_nothing() else self

    def or_[T, T1](self: Maybe[T], other: Maybe[T1], /) -> Maybe[T | T1]:
        return self.or_else(lambda: other)

    # Monad operations

    def flat_map[T, T1](self: Maybe[T], f: Callable[[T], Maybe[T1]], /) -> Maybe[T1]:
        """Bind: nothing short-circuits without calling f."""
        match self:
            case Nothing():
                return self
            case Just(val):
                return f(val)
            case _ as unreachable:
                assert_never(unreachable)

    def flat_map_go[T, T1](self: Maybe[T], f: Callable[[T], Go[Maybe[typing.Any], T1]], /) -> Maybe[T1]:
        """Bind the payload into a generator comprehension and evaluate it."""
        from .evaluate import go

        return self.flat_map(lambda val: go(lambda: f(val)))

    def and_[T1](self: Maybe[typing.Any], other: Maybe[T1], /) -> Maybe[T1]:
        return self.flat_map(lambda _: other)

    def map_optional[T, T1](self: Maybe[T], f: Callable[[T], T1 | None], /) -> Maybe[T1]:
        """Map, treating a None result as nothing."""
        return self.flat_map(lambda val: from_optional(f(val)))

    def filter[T](self: Maybe[T], pred: Predicate[T], /) -> Maybe[T]:
        return self.flat_map(lambda val: just(val) if pred(val) else nothing)

    def zip_with[T, T1, T2](
        self: Maybe[T],
        other: Maybe[T1],
        f: Callable[[T, T1], T2],
        /,
    ) -> Maybe[T2]:
        return self.flat_map(lambda lhs: other.map(lambda rhs: f(lhs, rhs)))

    def map[T, T1](self: Maybe[T], f: Callable[[T], T1], /) -> Maybe[T1]:
        return self.flat_map(lambda val: just(f(val)))

    # Eq / Ord / Semigroup

    def cmp[T](self: Maybe[T], other: Maybe[T], /) -> Ordering:
        match self, other:
            case Nothing(), Nothing():
                return Ordering.EQUAL
            case Nothing(), Just():
                return Ordering.LESS
            case Just(), Nothing():
                return Ordering.GREATER
            case Just(lhs), Just(rhs):
                return cmp(lhs, rhs)
            case _ as unreachable:
                assert_never(unreachable)

    def cmb[T](self: Maybe[T], other: Maybe[T], /) -> Maybe[T]:
        match self, other:
            case Just(lhs), Just(rhs):
                return Just(cmb(lhs, rhs))
            case Just(), Nothing():
                return self
            case Nothing(), Nothing() | Just():
                return other
            case _ as unreachable:
                assert_never(unreachable)

    # Comprehension protocol

    def __iter__[T](self: Maybe[T]) -> Generator[Maybe[T], typing.Any, T]:
        """`x = yield from m` inside maybe.go() binds the payload."""
        return (yield self)


@typing.final
class Nothing(_MaybeSyntax):
    """The absent value. Always the same instance."""

    __slots__ = ()

    _instance: typing.ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> tuple[type[Nothing], tuple[()]]:
        return (Nothing, ())


@typing.final
@dataclass(frozen=True, slots=True)
class Just[T](_MaybeSyntax):
    """A present value."""

    val: T


type Maybe[T] = Nothing | Just[T]

_MaybeSyntax._variants = (Nothing, Just)

nothing: Nothing = Nothing()


# ============================================================================
# Constructors
# ============================================================================


def just[T](val: T) -> Maybe[T]:
    return Just(val)


def from_optional[T](val: T | None) -> Maybe[T]:
    """None becomes nothing, anything else a just."""
    return nothing if val is None else Just(val)


def from_result[T](result: Result[T, typing.Any]) -> Maybe[T]:
    """Ok(v) becomes just(v); the error payload is dropped."""
    match result:
        case Ok(val):
            return Just(val)
        case Error(_):
            return nothing
        case _ as unreachable:
            assert_never(unreachable)


def from_option[T](option: Option[T]) -> Maybe[T]:
    """kungfu Some(v) becomes just(v); any other option is nothing."""
    match option:
        case Some(val):
            return Just(val)
        case _:
            return nothing


def wrap_fn[**P, T](f: Callable[P, T | None]) -> Callable[P, Maybe[T]]:
    """Adapt a function returning Optional into one returning Maybe."""

    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Maybe[T]:
        return from_optional(f(*args, **kwargs))

    return wrapper


def wrap_pred[T](pred: Predicate[T]) -> Callable[[T], Maybe[T]]:
    """Adapt a predicate into a function that keeps passing values."""

    def wrapper(val: T) -> Maybe[T]:
        return Just(val) if pred(val) else nothing

    return wrapper


__all__ = (
    "Just",
    "Maybe",
    "Nothing",
    "from_optional",
    "from_option",
    "from_result",
    "just",
    "nothing",
    "wrap_fn",
    "wrap_pred",
)
