"""Insertion-ordered set used for deterministic deduplication."""

from collections.abc import Iterable, Iterator, MutableSet
from typing import Generic, TypeVar

T = TypeVar("T")


class OrderedSet(MutableSet[T], Generic[T]):
    """A set that remembers first-seen order and drops duplicates.

    Equality against other sets ignores order, like the builtin ``set``.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = dict.fromkeys(items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, value: T) -> None:
        self._items.setdefault(value, None)

    def discard(self, value: T) -> None:
        self._items.pop(value, None)

    def update(self, *iterables: Iterable[T]) -> None:
        for iterable in iterables:
            for item in iterable:
                self.add(item)

    def to_list(self) -> list[T]:
        return list(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
