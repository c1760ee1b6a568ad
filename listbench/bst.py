"""Binary search tree of integers with selectable traversal orders."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from .clqueue import CLQueue


class OrderType(enum.Enum):
    """Order in which :meth:`BST.traverse` visits the nodes."""

    PRE_ORDER = enum.auto()
    IN_ORDER = enum.auto()
    POST_ORDER = enum.auto()


@dataclass(slots=True)
class _Node:
    item: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _detach(node: _Node) -> Optional[_Node]:
    """Return the subtree that takes the place of ``node`` once its item is gone."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    predecessor = node.left
    while predecessor.right is not None:
        predecessor = predecessor.right
    node.item = predecessor.item
    node.left = _remove(node.left, predecessor.item)
    return node


def _remove(root: Optional[_Node], item: int) -> Optional[_Node]:
    """Remove ``item`` from the subtree at ``root`` and return the new subtree root."""
    parent: Optional[_Node] = None
    node = root
    while node is not None and node.item != item:
        parent, node = node, (node.left if item < node.item else node.right)
    if node is None:
        raise ValueError(f"{item} is not in the tree")
    replacement = _detach(node)
    if parent is None:
        return replacement
    if parent.left is node:
        parent.left = replacement
    else:
        parent.right = replacement
    return root


def _clone(root: Optional[_Node]) -> Optional[_Node]:
    """Copy the shape and items of a subtree."""
    if root is None:
        return None
    new_root = _Node(root.item)
    pending = [(root, new_root)]
    while pending:
        source, target = pending.pop()
        if source.left is not None:
            target.left = _Node(source.left.item)
            pending.append((source.left, target.left))
        if source.right is not None:
            target.right = _Node(source.right.item)
            pending.append((source.right, target.right))
    return new_root


class BST:
    """Unbalanced binary search tree; equal items go to the right."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def copy(self) -> BST:
        """Return a deep copy with the same shape."""
        duplicate = BST()
        duplicate._root = _clone(self._root)
        return duplicate

    __copy__ = copy

    def get_item(self, item: int) -> int:
        """Return ``item`` if it is in the tree, otherwise -1."""
        node = self._root
        while node is not None:
            if item == node.item:
                return node.item
            node = node.left if item < node.item else node.right
        return -1

    def put_item(self, item: int) -> None:
        """Insert ``item`` as a new leaf."""
        new_node = _Node(item)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if item < node.item:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def delete_item(self, item: int) -> None:
        """Remove one node holding ``item``; raise ValueError if there is none."""
        self._root = _remove(self._root, item)

    def __len__(self) -> int:
        return sum(1 for _ in self._preorder())

    def make_empty(self) -> None:
        """Discard every node."""
        self._root = None

    def is_empty(self) -> bool:
        return self._root is None

    def is_full(self) -> bool:
        """A linked tree never fills up."""
        return False

    def __str__(self) -> str:
        if self.is_empty():
            return "(Empty Tree)"
        return ", ".join(map(str, self))

    def __iter__(self) -> Iterator[int]:
        return self._inorder()

    def traverse(self, order: OrderType) -> Iterator[int]:
        """Snapshot the items in ``order`` and yield them one by one."""
        walks = {
            OrderType.PRE_ORDER: self._preorder,
            OrderType.IN_ORDER: self._inorder,
            OrderType.POST_ORDER: self._postorder,
        }
        queue = CLQueue()
        for item in walks[OrderType(order)]():
            queue.enqueue(item)
        return self._drain(queue)

    @staticmethod
    def _drain(queue: CLQueue) -> Iterator[int]:
        while not queue.is_empty():
            yield queue.dequeue()

    def _preorder(self) -> Iterator[int]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.item
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _inorder(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def _postorder(self) -> Iterator[int]:
        visited: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            visited.append(node.item)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(visited)