"""
Builders
========

Accumulators fed by the traversal combinators: `add` once per success,
`finish` once at the end. A builder belongs to exactly one traversal.
"""

from __future__ import annotations

import typing


class Builder[T, R](typing.Protocol):
    """Incremental construction of a result structure."""

    def add(self, item: T, /) -> None: ...

    def finish(self) -> R: ...


class ListBuilder[T]:
    """Append items in `add` order."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item: T, /) -> None:
        self._items.append(item)

    def finish(self) -> list[T]:
        return self._items


class IndexedListBuilder[T]:
    """
    Place `(index, value)` entries by index.

    `add` may be called in any order (concurrent traversals complete out of
    order); `finish` returns values sorted by index.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[int, T] = {}

    def add(self, item: tuple[int, T], /) -> None:
        idx, value = item
        self._entries[idx] = value

    def finish(self) -> list[T]:
        return [self._entries[idx] for idx in sorted(self._entries)]


class DictBuilder[K, V]:
    """Collect `(key, value)` entries into a dict. Later keys overwrite."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}

    def add(self, item: tuple[K, V], /) -> None:
        key, value = item
        self._entries[key] = value

    def finish(self) -> dict[K, V]:
        return self._entries


class NoOpBuilder:
    """Discard everything."""

    __slots__ = ()

    def add(self, item: typing.Any, /) -> None:
        _ = item

    def finish(self) -> None:
        return None


__all__ = (
    "Builder",
    "DictBuilder",
    "IndexedListBuilder",
    "ListBuilder",
    "NoOpBuilder",
)
