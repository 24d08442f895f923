# algokit

A small library of classic data structures and algorithms, written in plain
Python with no third-party dependencies. Every operation returns its result or
raises an exception; nothing is printed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.avl` | `AVLTree`: `insert`, `delete`, `level_order`, `height`, `minimum`. Insertion rebalances; deletion removes the key without rotating. Equal keys go to the right. |
| `algokit.binary_heap` | `MinHeap(capacity)`: `insert`, `extract_min`, `peek`, `decrease_key`, `delete_key`, `len()`. Inserting into a full heap raises `HeapOverflowError`; reading an empty heap raises `IndexError`. |
| `algokit.trie` | `Trie` of lower-case `a`–`z` words: `insert`, `search`, `delete` (returns whether the word was present), `in`. Other characters raise `ValueError`. |
| `algokit.disjoint_set` | `DisjointSet(n)` over `1..n`: `find`, `union` (returns whether two sets were merged), `same_set`. Union by rank and path compression. |
| `algokit.binary_tree` | `TreeNode`; `insert_level_order`, `insert_at_path` (a path of `'l'`/`'r'` steps); traversals `morris_inorder`, `breadth_first`, `preorder`, `inorder`, `postorder`, each returning a list. |
| `algokit.graphs` | `build_adjacency` (undirected), `bfs_order`, `bfs_distances`, `dfs_visited`, `bellman_ford`; `NegativeCycleError`. |
| `algokit.segment_tree` | `MaxSegmentTree`: `query(left, right)` inclusive range maximum, `update(index, value)`, `first_at_least(x, start=0)` returning an index or `None`. |
| `algokit.sequences` | `max_activities`, `majority_element`, `max_chunks_to_sorted`, `contains`, `fibonacci`, `fibonacci_memo`. |
| `algokit.linked_list` | `LinkedList`: `append`, `push_front`, `remove`, `reverse`, `rotate_last_k`, `odd_even`, iteration, `len()`, `in`. |
| `algokit.array_list` | `ArrayLinkedList(capacity=100)`: linked list in a fixed pool of slots; `insert_front`, `insert_end`, iteration, `len()`. A full pool raises `ListFullError`. |
| `algokit.queues` | `CircularQueue` (`traverse` repeats the front at the end), `ArrayQueue(capacity=10)` (freed slots are reused only once the queue empties), `LinkedQueue`; `QueueFullError`, `QueueEmptyError`. |
| `algokit.stack` | `BoundedStack(capacity=5)`: `push`, `pop`, iteration from top to bottom, `len()`; `StackFullError`, `StackEmptyError`. |

The Fibonacci functions count from `fibonacci(0) == fibonacci(1) == 0` and
`fibonacci(2) == 1`.

## Examples

```python
from algokit.avl import AVLTree

tree = AVLTree()
for value in range(1, 8):
    tree.insert(value)
print(tree.level_order())   # [4, 2, 6, 1, 3, 5, 7]
```

```python
from algokit.segment_tree import MaxSegmentTree

tree = MaxSegmentTree([1, 3, 2, 5])
tree.query(0, 2)             # 3
tree.first_at_least(4, 0)    # 3
tree.update(1, 7)
tree.first_at_least(4, 0)    # 1
```

```python
from algokit.graphs import bellman_ford, NegativeCycleError

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2)]
bellman_ford(3, edges, 0)    # [0, 3, 1]
```

Unreachable nodes get `math.inf`; a reachable negative cycle raises
`NegativeCycleError`.

```python
from algokit.disjoint_set import DisjointSet

sets = DisjointSet(10)
sets.union(1, 2)
sets.same_set(1, 2)          # True
```

Bounded containers raise their own exceptions instead of printing a message:

```python
from algokit.stack import BoundedStack, StackFullError

stack = BoundedStack()
try:
    for item in range(10):
        stack.push(item)
except StackFullError:
    pass
```

## What this package does not do

It is a library only. There is no command-line program and no interactive menu
for building trees, lists, queues or stacks; call the classes and functions
from your own code.