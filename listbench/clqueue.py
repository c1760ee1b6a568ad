"""Queue built on a circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from .llulist import _Node


class CLQueue:
    """FIFO queue whose only reference is to the last node of a ring."""

    def __init__(self) -> None:
        self._tail: Optional[_Node] = None

    def make_empty(self) -> None:
        """Discard every item."""
        self._tail = None

    def is_empty(self) -> bool:
        return self._tail is None

    def is_full(self) -> bool:
        """A linked queue never fills up."""
        return False

    def enqueue(self, item: int) -> None:
        """Add ``item`` at the back."""
        node = _Node(item)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node

    def dequeue(self) -> int:
        """Remove and return the item at the front."""
        tail = self._tail
        if tail is None:
            raise IndexError("dequeue from an empty queue")
        head = tail.next
        assert head is not None
        if head is tail:
            self._tail = None
        else:
            tail.next = head.next
        return head.item

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        """Yield items from front to back without removing them."""
        tail = self._tail
        if tail is None:
            return
        node = tail.next
        while node is not None:
            yield node.item
            if node is tail:
                break
            node = node.next