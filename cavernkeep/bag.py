"""A fixed-capacity unordered bag."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class ArrayBag(Generic[T]):
    """An unordered collection holding at most ``DEFAULT_CAPACITY`` items.

    Items are compared with ``==``. Removing an item moves the last item into
    its slot, so the order of the remaining items may change.
    """

    DEFAULT_CAPACITY = 100

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __contains__(self, item: object) -> bool:
        return self._index_of(item) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def _is_full(self) -> bool:
        return len(self._items) >= self.DEFAULT_CAPACITY

    def _index_of(self, item: object) -> int | None:
        return next((i for i, held in enumerate(self._items) if held == item), None)

    def add(self, item: T) -> bool:
        """Add ``item`` if there is room; return whether it was added."""
        if self._is_full():
            return False
        self._items.append(item)
        return True

    def remove(self, item: T) -> bool:
        """Remove one occurrence of ``item``; return whether one was found."""
        index = self._index_of(item)
        if index is None:
            return False
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return True

    def clear(self) -> None:
        self._items.clear()

    def contains(self, item: T) -> bool:
        return item in self

    def frequency_of(self, item: T) -> int:
        """Return how many held items equal ``item``."""
        return sum(1 for held in self._items if held == item)

    def merge_unique(self, other: Iterable[T]) -> None:
        """Add items from ``other`` that are not already held, while there is room."""
        for item in list(other):
            if self._is_full():
                break
            if item not in self:
                self.add(item)

    def merge_all(self, other: Iterable[T]) -> None:
        """Add every item from ``other``, duplicates included, while there is room."""
        for item in list(other):
            if not self.add(item):
                break

    def __itruediv__(self, other: Iterable[T]) -> "ArrayBag[T]":
        self.merge_unique(other)
        return self

    def __iadd__(self, other: Iterable[T]) -> "ArrayBag[T]":
        self.merge_all(other)
        return self