"""Singly linked list that adds new items at the front."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

from .aulist import _missing, _render


@dataclass
class _Node:
    item: int
    next: Optional[_Node] = None


def _walk(head: Optional[_Node]) -> Iterator[int]:
    node = head
    while node is not None:
        yield node.item
        node = node.next


def _scan(
    head: Optional[_Node], keep_going: Callable[[int], bool]
) -> tuple[Optional[_Node], Optional[_Node]]:
    """Walk while ``keep_going`` holds; return the previous and stopping nodes."""
    previous: Optional[_Node] = None
    node = head
    while node is not None and keep_going(node.item):
        previous, node = node, node.next
    return previous, node


class LLUList:
    """Unsorted list of integers held in linked nodes."""

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
        """Return the position of the first match from the front, or -1."""
        return next((pos for pos, value in enumerate(self) if value == item), -1)

    def put_item(self, item: int) -> None:
        """Add ``item`` at the front of the list."""
        self._head = _Node(item, self._head)

    def delete_item(self, item: int) -> None:
        """Remove the first occurrence of ``item`` from the front."""
        previous, node = _scan(self._head, lambda value: value != item)
        if node is None:
            raise _missing(item)
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next