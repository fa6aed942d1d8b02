# aedstructs

Classic data structures in plain Python, with no dependencies outside the
standard library. Each class lives in its own module under `aedstructs`.

| Module | Class | What it is |
| --- | --- | --- |
| `aedstructs.forward_list` | `ForwardList` | Singly linked list with merge sort, in-place reversal and positional insert/remove |
| `aedstructs.circular_list` | `CircularDoublyLinkedList` | Circular doubly linked list built around a sentinel node |
| `aedstructs.stack` | `Stack` | Bounded LIFO stack (default capacity 100) |
| `aedstructs.circular_queue` | `CircularQueue` | Ring-buffer FIFO queue; a ring of `slots` holds at most `slots - 1` values (default 100 slots) |
| `aedstructs.bst` | `BinarySearchTree` | Unbalanced binary search tree without duplicates |
| `aedstructs.avl` | `AVLTree` | Self-balancing AVL tree without duplicates, with level-order output |
| `aedstructs.hash_table` | `HashTable` | Separately chained hash table with a randomised universal hash; doubles its capacity once the load factor exceeds 0.75 |

## Installation

```
pip install .
```

## Usage

```python
from aedstructs.forward_list import ForwardList
from aedstructs.stack import Stack
from aedstructs.avl import AVLTree
from aedstructs.hash_table import HashTable

items = ForwardList([3, 5, 2, 9])
items.sort()
print(items)                # 2 -> 3 -> 5 -> 9

stack = Stack(capacity=100)
stack.push(10)
stack.push(20)
print(stack.peek())         # 20

tree = AVLTree()
tree.insert(1, 2, 3, 4, 5)  # returns how many values were newly added
print(list(tree))           # [1, 2, 3, 4, 5]
print(list(tree.levels()))  # [[2], [1, 4], [3, 5]]

counts = HashTable(int, seed=1)
counts["apple"] += 1
print("apple" in counts, len(counts))  # True 1
```

## Behaviour worth knowing

- `ForwardList` and `CircularDoublyLinkedList` raise `IndexError` when
  reading or popping from an empty list and for indexes out of range.
  Note the argument order: `ForwardList.insert(index, value)` but
  `CircularDoublyLinkedList.insert(value, index)`.
- `Stack.push` raises `StackOverflowError` (an `OverflowError`) when full;
  `pop` and `peek` raise `StackEmptyError` (an `IndexError`) when empty.
  Iteration and `str()` go from top to bottom.
- `CircularQueue.enqueue` raises `QueueFullError` (an `OverflowError`);
  `dequeue` and `peek` raise `QueueEmptyError` (an `IndexError`).
- `BinarySearchTree.insert` and `remove` return `False` when the value was
  already present or not found; `height()` counts nodes (0 when empty);
  `find_min` and `find_max` raise `ValueError` on an empty tree.
- `AVLTree.remove` raises `KeyError` for a missing value; `height()` counts
  edges (-1 when empty); `levels()` yields one list per depth.
- `HashTable` behaves like a `defaultdict` when given a `default_factory`,
  otherwise reading a missing key raises `KeyError`. Pass `seed` to make the
  hash parameters reproducible. `load_factor()` and `capacity()` report the
  table's state; `clear()` keeps the current capacity.

## What this package does not do

It is a library only: there is no command-line tool, no demo program and no
persistence. The hash table has no deletion of single keys.

## Running the tests

```
pip install .[test]
pytest
```