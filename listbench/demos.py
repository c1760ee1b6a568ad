"""Short scripted demonstrations of the list types and the tree."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .bst import BST, OrderType


def list_demo(structure, out: Optional[TextIO] = None) -> None:
    """Exercise ``structure`` (an empty list of any kind) and report each step."""
    out = sys.stdout if out is None else out

    def say(*parts) -> None:
        print(*parts, sep="", file=out)

    say("Newly Created List: ", structure)
    for value in range(100, 0, -10):
        structure.put_item(value)
    say("List after 'PutItem' calls: ", structure)
    say("Length after 'PutItem' calls: ", len(structure))
    say("IsFull after 'PutItem' calls? ", int(structure.is_full()))
    structure.delete_item(50)
    say("List after 'DeleteItem' call: ", structure)
    say("Length of List: ", len(structure))
    say("IsFull after 'DeleteItem' call? ", int(structure.is_full()))
    say("Index of value 80: ", structure.get_item(80))
    say("Index of value 25: ", structure.get_item(25))
    structure.make_empty()
    say("List after 'MakeEmpty': ", structure)
    try:
        next(iter(structure))
    except StopIteration:
        say("No items in list to iterate through.")


def bst_demo(out: Optional[TextIO] = None) -> None:
    """Build a small tree, clone it, delete from it and show its traversals."""
    out = sys.stdout if out is None else out

    def say(*parts) -> None:
        print(*parts, sep="", file=out)

    tree = BST()
    for value in (6, 3, 7, 9, 5, 1):
        tree.put_item(value)
    clone = tree.copy()
    tree.delete_item(3)

    say("My Tree: ", tree)
    say("Cloned Tree: ", clone)
    clone.make_empty()
    say("Cloned Tree V2: ", clone)
    say("My Tree Pre-Order: ", ", ".join(map(str, tree.traverse(OrderType.PRE_ORDER))))
    say("My Tree Post-Order: ", ", ".join(map(str, tree.traverse(OrderType.POST_ORDER))))