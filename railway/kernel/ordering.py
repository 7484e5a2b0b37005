"""
Ordering and equality
=====================

Total orders for the outcome types and their payloads.

`cmp` defers to a value's own `cmp` method when it has one (every container
in this package does) and falls back to Python's `<` / `>` for builtins.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable


class Ordering(enum.IntEnum):
    """
    Result of comparing two values.

    Ordering is a semigroup: `cmb` keeps the first non-EQUAL value, which is
    exactly lexicographic comparison.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_int(cls, n: int) -> Ordering:
        """Map an int to an Ordering by its sign."""
        if n < 0:
            return cls.LESS
        if n > 0:
            return cls.GREATER
        return cls.EQUAL

    def is_lt(self) -> bool:
        return self is Ordering.LESS

    def is_le(self) -> bool:
        return self is not Ordering.GREATER

    def is_eq(self) -> bool:
        return self is Ordering.EQUAL

    def is_ne(self) -> bool:
        return self is not Ordering.EQUAL

    def is_gt(self) -> bool:
        return self is Ordering.GREATER

    def is_ge(self) -> bool:
        return self is not Ordering.LESS

    def reverse(self) -> Ordering:
        return Ordering(-self.value)

    def cmb(self, other: Ordering, /) -> Ordering:
        """Lexicographic combination: EQUAL defers to `other`."""
        return other if self is Ordering.EQUAL else self


@typing.runtime_checkable
class Ord(typing.Protocol):
    """A value that knows how to compare itself against another."""

    def cmp(self, other: typing.Any, /) -> Ordering: ...


def eq(lhs: typing.Any, rhs: typing.Any) -> bool:
    """Structural equality."""
    return bool(lhs == rhs)


def cmp(lhs: typing.Any, rhs: typing.Any) -> Ordering:
    """Compare two values of the same type."""
    if isinstance(lhs, Ord):
        return lhs.cmp(rhs)
    if lhs < rhs:
        return Ordering.LESS
    if lhs > rhs:
        return Ordering.GREATER
    return Ordering.EQUAL


def lt(lhs: typing.Any, rhs: typing.Any) -> bool:
    return cmp(lhs, rhs).is_lt()


def le(lhs: typing.Any, rhs: typing.Any) -> bool:
    return cmp(lhs, rhs).is_le()


def gt(lhs: typing.Any, rhs: typing.Any) -> bool:
    return cmp(lhs, rhs).is_gt()


def ge(lhs: typing.Any, rhs: typing.Any) -> bool:
    return cmp(lhs, rhs).is_ge()


def min_by[T, K](lhs: T, rhs: T, *, key: Callable[[T], K]) -> T:
    """Smaller of two values by key; `lhs` wins ties."""
    return rhs if cmp(key(lhs), key(rhs)).is_gt() else lhs


def max_by[T, K](lhs: T, rhs: T, *, key: Callable[[T], K]) -> T:
    """Larger of two values by key; `rhs` wins ties."""
    return lhs if cmp(key(lhs), key(rhs)).is_gt() else rhs


def clamp[T](value: T, lo: T, hi: T) -> T:
    """Restrict value to the closed interval [lo, hi]."""
    if cmp(lo, hi).is_gt():
        raise ValueError(f"clamp(): lower bound {lo!r} exceeds upper bound {hi!r}")
    if cmp(value, lo).is_lt():
        return lo
    if cmp(value, hi).is_gt():
        return hi
    return value


class OrdMixin:
    """
    Rich comparisons derived from `cmp`.

    Operands outside `_variants` return NotImplemented so Python can try the
    reflected operation and finally raise TypeError.
    """

    __slots__ = ()

    # Closed variant set of the family, filled in after the variants exist
    _variants: typing.ClassVar[tuple[type, ...]] = ()

    def cmp(self, other: typing.Any, /) -> Ordering:
        raise NotImplementedError

    def _cmp_or_none(self, other: typing.Any) -> Ordering | None:
        if not isinstance(other, self._variants):
            return None
        return self.cmp(other)

    def __lt__(self, other: typing.Any) -> bool:
        o = self._cmp_or_none(other)
        return NotImplemented if o is None else o.is_lt()

    def __le__(self, other: typing.Any) -> bool:
        o = self._cmp_or_none(other)
        return NotImplemented if o is None else o.is_le()

    def __gt__(self, other: typing.Any) -> bool:
        o = self._cmp_or_none(other)
        return NotImplemented if o is None else o.is_gt()

    def __ge__(self, other: typing.Any) -> bool:
        o = self._cmp_or_none(other)
        return NotImplemented if o is None else o.is_ge()


__all__ = (
    "Ord",
    "OrdMixin",
    "Ordering",
    "clamp",
    "cmp",
    "eq",
    "ge",
    "gt",
    "le",
    "lt",
    "max_by",
    "min_by",
)
