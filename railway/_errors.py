from __future__ import annotations

import typing


class NotASemigroupError(TypeError):
    """cmb() was given a value that has no combination."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"{type(value).__name__!r} object is not a semigroup")


class ForeignYieldError(TypeError):
    """A comprehension yielded something outside the evaluator's family."""

    family: str
    value: typing.Any

    def __init__(self, family: str, value: typing.Any) -> None:
        self.family = family
        self.value = value
        super().__init__(f"{family} comprehension yielded a non-{family} value: {value!r}")


__all__ = ("ForeignYieldError", "NotASemigroupError")
