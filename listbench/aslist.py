"""Fixed-capacity array list that keeps its items in ascending order."""

from __future__ import annotations

from bisect import bisect_left, insort_right
from collections.abc import Iterator

from .aulist import DEFAULT_CAPACITY, _checked_capacity, _missing, _render


class ASList:
    """Sorted list of integers held in an array of fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: list[int] = []

    def make_empty(self) -> None:
        """Return the list to the empty state."""
        self._items.clear()

    def is_full(self) -> bool:
        """Whether the list has reached its capacity."""
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __str__(self) -> str:
        return _render(self._items)

    def get_item(self, item: int) -> int:
        """Binary-search for ``item``; return its index, or -1 if absent."""
        first, last = 0, len(self._items) - 1
        while first <= last:
            midpoint = (first + last) // 2
            value = self._items[midpoint]
            if item == value:
                return midpoint
            if item < value:
                last = midpoint - 1
            else:
                first = midpoint + 1
        return -1

    def put_item(self, item: int) -> None:
        """Insert ``item`` after any items that are not greater than it."""
        if self.is_full():
            raise OverflowError("list is full")
        insort_right(self._items, item)

    def delete_item(self, item: int) -> None:
        """Remove the first occurrence of ``item``."""
        index = bisect_left(self._items, item)
        if index == len(self._items) or self._items[index] != item:
            raise _missing(item)
        del self._items[index]