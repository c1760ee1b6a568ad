# listbench

`listbench` holds five small integer list structures that share one
interface. It also has a benchmark that times them against each other.

| Class | Module | Storage | Order |
|-------|--------|---------|-------|
| `ASList` | `listbench.aslist` | fixed-capacity array | sorted |
| `AUList` | `listbench.aulist` | fixed-capacity array | insertion order |
| `LLSList` | `listbench.llslist` | singly linked list | sorted |
| `LLUList` | `listbench.llulist` | singly linked list | newest first |
| `BST` | `listbench.bst` | binary search tree | sorted in-order |

`CLQueue` in `listbench.clqueue` is a FIFO queue built on a circular linked
list. It has `enqueue`, `dequeue`, `is_empty`, `is_full`, `make_empty`,
`len()` and iteration from front to back. Calling `dequeue` on an empty queue
raises `IndexError`. The tree uses this queue for its traversals.

## Installing

```
pip install .
```

## Using the structures

Every structure has `put_item`, `get_item`, `delete_item`, `make_empty`,
`is_full`, `len()`, iteration and `str()`:

```python
from listbench.aslist import ASList

items = ASList(10)
for value in (30, 10, 20):
    items.put_item(value)

print(items)               # (10, 20, 30)
print(items.get_item(20))  # 1, the index of 20
print(items.get_item(25))  # -1, not present
items.delete_item(10)
print(list(items))         # [20, 30]
```

- The default capacity of `ASList` and `AUList` is 3500, and a negative
  capacity raises `ValueError`. If you call `put_item` on a full array list,
  it raises `OverflowError`. The linked structures and the tree never report
  that they are full.
- For the list classes, `get_item` returns the position of the item, or `-1`
  when the item is missing:
  - `ASList` uses a binary search.
  - `AUList` searches from the end.
  - `LLSList` and `LLUList` search from the front.
- For `BST`, `get_item` returns the item itself, or `-1` when it is missing.
- `delete_item` removes one occurrence of the item. If the item is not
  present, it raises `ValueError`.
- A list renders as `(a, b, c)`. A tree renders its items in sorted order as
  `a, b, c`, or as `(Empty Tree)` when it is empty.

The tree puts equal items to the right. `copy()` returns a deep copy of the
tree, and `is_empty()` reports whether the tree holds any items. You can walk
the tree in any order of `OrderType`:

```python
from listbench.bst import BST, OrderType

tree = BST()
for value in (6, 3, 7, 9, 5, 1):
    tree.put_item(value)

print(list(tree.traverse(OrderType.PRE_ORDER)))   # [6, 3, 1, 5, 7, 9]
print(list(tree.traverse(OrderType.POST_ORDER)))  # [1, 5, 3, 9, 7, 6]
print(list(tree))                                 # [1, 3, 5, 6, 7, 9]
clone = tree.copy()
```

`traverse` takes a snapshot of the items at the moment you call it.

## Demonstrations

`listbench.demos` has two functions. Each one carries out a short scripted
run and prints every step to `out`, which defaults to standard output:

- `list_demo(structure, out)` takes an empty list of any kind. It fills the
  list with 100 down to 10, then deletes 50 and looks up 80 and 25. Last, it
  empties the list.
- `bst_demo(out)` builds a small tree and clones it. It deletes from the
  tree, then prints the pre-order and post-order traversals.

## Running the benchmark

```
listbench
listbench --items 200 --loops 50 --seed 1
```

| Option | What it sets | Default |
|--------|--------------|---------|
| `--items` | how many random values each round inserts | 100 |
| `--loops` | how many rounds run | 100 |
| `--seed` | the seed of the random generator | none |

The benchmark works in three phases:

1. Each round empties every structure, then inserts random values from 0 to
   `--items` into it.
2. It times as many random searches as there are rounds.
3. It times deletes of random values that are present in every structure.
   This phase stops after as many deletes as there are rounds, or after more
   than `--items` misses in a row.

As it works, the benchmark prints each step and the time it took. At the end
it prints one line per structure with the average empty, insert, search and
delete times.

From Python, call `listbench.benchmark.run_benchmark(num_items, loops, rng,
out)`. It returns a list of `Timings` records, one for each structure. Each
record holds the measured times. Its `averages` property gives the means, and
`summary()` gives the printed line.