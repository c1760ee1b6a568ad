"""Fixed-capacity array list that keeps items in insertion order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

DEFAULT_CAPACITY = 3500


def _missing(item: int) -> ValueError:
    return ValueError(f"{item} is not in the list")


def _render(items: Iterable[int]) -> str:
    """Render items as ``(a, b, c)``."""
    return "(" + ", ".join(map(str, items)) + ")"


def _checked_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    return capacity


class AUList:
    """Unsorted list of integers held in an array of fixed capacity."""

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
        """Search from the end; return the index of the last match, or -1."""
        try:
            return len(self._items) - 1 - self._items[::-1].index(item)
        except ValueError:
            return -1

    def put_item(self, item: int) -> None:
        """Append ``item`` at the end of the list."""
        if self.is_full():
            raise OverflowError("list is full")
        self._items.append(item)

    def delete_item(self, item: int) -> None:
        """Remove the first occurrence of ``item``, keeping the order of the rest."""
        try:
            self._items.remove(item)
        except ValueError:
            raise _missing(item) from None