"""
Validation
==========

Applicative error accumulation: `Invalid(err)` or `Valid(val)`.

Where Either stops at the first left, Validation keeps going and combines
every error with `cmb`:

    validation.collect([invalid(["no name"]), valid(1), invalid(["no email"])])
    # Invalid(err=['no name', 'no email'])

There is no comprehension for Validation: a later step cannot depend on an
earlier value without giving up accumulation. Convert with `to_either()` to
chain.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import assert_never

from ._helpers import first_arg, second_arg
from .collection.builder import Builder, DictBuilder, ListBuilder
from .either import Either, Left, Right
from .kernel.ordering import OrdMixin, Ordering, cmp
from .kernel.semigroup import cmb
from .maybe import Maybe, just, nothing


class _ValidationSyntax(OrdMixin):
    __slots__ = ()

    def is_invalid(self) -> bool:
        return isinstance(self, Invalid)

    def is_valid(self) -> bool:
        return isinstance(self, Valid)

    def unwrap[E, T, T1, T2](
        self: Validation[E, T],
        on_invalid: Callable[[E], T1],
        on_valid: Callable[[T], T2],
    ) -> T1 | T2:
        match self:
            case Invalid(err):
                return on_invalid(err)
            case Valid(val):
                return on_valid(val)
            case _ as unreachable:
                assert_never(unreachable)

    def to_either[E, T](self: Validation[E, T]) -> Either[E, T]:
        return self.unwrap(Left, Right)

    def map[E, T, T1](self: Validation[E, T], f: Callable[[T], T1], /) -> Validation[E, T1]:
        return self.unwrap(Invalid, lambda val: Valid(f(val)))

    def map_invalid[E, T, E1](self: Validation[E, T], f: Callable[[E], E1], /) -> Validation[E1, T]:
        return self.unwrap(lambda err: Invalid(f(err)), Valid)

    def zip_with[E, T, T1, T2](
        self: Validation[E, T],
        other: Validation[E, T1],
        f: Callable[[T, T1], T2],
        /,
    ) -> Validation[E, T2]:
        """Combine two valid values with f; two invalid ones combine their errors."""
        match self, other:
            case Valid(lhs), Valid(rhs):
                return Valid(f(lhs, rhs))
            case Invalid(lhs), Invalid(rhs):
                return Invalid(cmb(lhs, rhs))
            case Invalid(), Valid():
                return self
            case Valid(), Invalid():
                return other
            case _ as unreachable:
                assert_never(unreachable)

    def zip_fst[E, T](self: Validation[E, T], other: Validation[E, typing.Any], /) -> Validation[E, T]:
        return self.zip_with(other, first_arg)

    def zip_snd[E, T1](self: Validation[E, typing.Any], other: Validation[E, T1], /) -> Validation[E, T1]:
        return self.zip_with(other, second_arg)

    # Eq / Ord / Semigroup

    def cmp[E, T](self: Validation[E, T], other: Validation[E, T], /) -> Ordering:
        match self, other:
            case Invalid(lhs), Invalid(rhs):
                return cmp(lhs, rhs)
            case Valid(lhs), Valid(rhs):
                return cmp(lhs, rhs)
            case Invalid(), Valid():
                return Ordering.LESS
            case Valid(), Invalid():
                return Ordering.GREATER
            case _ as unreachable:
                assert_never(unreachable)

    def cmb[E, T](self: Validation[E, T], other: Validation[E, T], /) -> Validation[E, T]:
        return self.zip_with(other, cmb)


@typing.final
@dataclass(frozen=True, slots=True)
class Invalid[E](_ValidationSyntax):
    err: E


@typing.final
@dataclass(frozen=True, slots=True)
class Valid[T](_ValidationSyntax):
    val: T


type Validation[E, T] = Invalid[E] | Valid[T]

_ValidationSyntax._variants = (Invalid, Valid)


def invalid[E](err: E) -> Validation[E, typing.Never]:
    return Invalid(err)


def valid[T](val: T) -> Validation[typing.Never, T]:
    return Valid(val)


def from_either[E, T](either: Either[E, T]) -> Validation[E, T]:
    return either.unwrap(Invalid, Valid)


# ============================================================================
# Collections (every element is visited, errors accumulate)
# ============================================================================


def traverse_into[A, E, T, R](
    items: Iterable[A],
    f: Callable[[A, int], Validation[E, T]],
    builder: Builder[T, R],
) -> Validation[E, R]:
    """Visit every element; the result is valid only if all of them are."""
    errors: Maybe[E] = nothing
    for idx, item in enumerate(items):
        match f(item, idx):
            case Valid(val):
                builder.add(val)
            case Invalid(err):
                errors = errors.cmb(just(err))
            case _ as unreachable:
                assert_never(unreachable)
    return errors.unwrap(lambda: Valid(builder.finish()), Invalid)


def traverse[A, E, T](
    items: Iterable[A],
    f: Callable[[A, int], Validation[E, T]],
) -> Validation[E, list[T]]:
    return traverse_into(items, f, ListBuilder[T]())


def collect[E, T](validations: Iterable[Validation[E, T]]) -> Validation[E, list[T]]:
    return traverse(validations, lambda v, _: v)


def gather[K, E, T](validations: Mapping[K, Validation[E, T]]) -> Validation[E, dict[K, T]]:
    return traverse_into(
        validations.items(),
        lambda entry, _: entry[1].map(lambda val: (entry[0], val)),
        DictBuilder[K, T](),
    )


def lift[R](fn: Callable[..., R]) -> Callable[..., Validation[typing.Any, R]]:
    """lift(f)(valid(a), invalid(e1), invalid(e2)) == invalid(cmb(e1, e2))."""

    def lifted(*validations: Validation[typing.Any, typing.Any]) -> Validation[typing.Any, R]:
        return collect(validations).map(lambda args: fn(*args))

    return lifted


__all__ = (
    "Invalid",
    "Valid",
    "Validation",
    "collect",
    "from_either",
    "gather",
    "invalid",
    "lift",
    "traverse",
    "traverse_into",
    "valid",
)
