"""
Semigroup
=========

Associative combination. No identity element is assumed.
"""

from __future__ import annotations

import functools
import typing

from .._errors import NotASemigroupError


@typing.runtime_checkable
class Semigroup(typing.Protocol):
    """
    A value with an associative `cmb`.

    Law (checked in tests for every container):
    - Associativity: a.cmb(b).cmb(c) == a.cmb(b.cmb(c))
    """

    def cmb(self, other: typing.Any, /) -> typing.Any: ...


# Builtins whose `+` is concatenation, hence associative
_CONCATENABLE = (str, bytes, list, tuple)


def cmb[T](lhs: T, rhs: T) -> T:
    """
    Combine two values from left to right.

    Example:
        cmb("a", "b")              # "ab"
        cmb(just([1]), just([2]))  # Just(val=[1, 2])
    """
    if isinstance(lhs, Semigroup):
        return lhs.cmb(rhs)
    if isinstance(lhs, _CONCATENABLE):
        return lhs + rhs  # type: ignore[operator]
    raise NotASemigroupError(lhs)


def cmb_all[T](head: T, *rest: T) -> T:
    """Fold `cmb` over one or more values, left to right."""
    return functools.reduce(cmb, rest, head)


__all__ = ("Semigroup", "cmb", "cmb_all")
