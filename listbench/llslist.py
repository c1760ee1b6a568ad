"""Singly linked list that keeps its items in ascending order."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from .aulist import _missing, _render
from .llulist import _Node, _scan, _walk


class LLSList:
    """Sorted list of integers held in linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def make_empty(self) -> None:
        """Return the list to the empty state."""
        self._head = None

    def is_full(self) -> bool:
        """A linked list never fills up."""
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        return _walk(self._head)

    def __str__(self) -> str:
        return _render(self)

    def get_item(self, item: int) -> int:
        """Return the position of the first match, or -1 if absent."""
        for position, value in enumerate(self):
            if value >= item:
                return position if value == item else -1
        return -1

    def put_item(self, item: int) -> None:
        """Insert ``item`` at its place in ascending order."""
        previous, _ = _scan(self._head, lambda value: value < item)
        if previous is None:
            self._head = _Node(item, self._head)
        else:
            previous.next = _Node(item, previous.next)

    def delete_item(self, item: int) -> None:
        """Remove the first occurrence of ``item``."""
        previous, node = _scan(self._head, lambda value: value < item)
        if node is None or node.item != item:
            raise _missing(item)
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next