# dstructs

A small library of the classic data structures and algorithms from an
introductory course: ordered lists, sparse matrices, singly linked lists,
polynomials, stacks, bracket matching and postfix evaluation, queues,
deques, binary trees, binary search trees, max heaps and graphs with
depth-first search.

It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dstructs.basics` | `factorial`, `factorial_trace`, `times_table`, `char_codes`, `string_length` |
| `dstructs.linear_list` | `insert_sorted`, `delete_element` on a Python list, counting element moves |
| `dstructs.sparse` | `Term` and `transpose` for sparse matrices kept as (row, col, value) triples |
| `dstructs.linked_list` | `Node`, `LinkedList` |
| `dstructs.polynomial` | `Polynomial`, a list of (coefficient, exponent) terms |
| `dstructs.stacks` | `ArrayStack`, `LinkedStack`, `StackEmptyError`, `StackFullError` |
| `dstructs.expressions` | `brackets_balanced`, `eval_postfix` |
| `dstructs.queues` | `LinearQueue`, `CircularQueue`, `LinkedQueue`, `QueueEmptyError`, `QueueFullError` |
| `dstructs.linked_deque` | `LinkedDeque`, `DequeEmptyError` |
| `dstructs.trees` | `TreeNode`, `preorder`, `inorder`, `postorder`, `BinarySearchTree` |
| `dstructs.max_heap` | `MaxHeap`, `HeapEmptyError` |
| `dstructs.graphs` | `AdjacencyMatrixGraph`, `AdjacencyListGraph`, `GraphError` |

## Examples

Basics:

```python
from dstructs.basics import factorial, factorial_trace, times_table, char_codes

factorial(5)                   # 120
value, lines = factorial_trace(3)
value                          # 6
lines[-1]                      # 'factorial(3) 값 6 반환'
times_table(3)                 # [3, 6, 9, ..., 27]; ValueError outside 0..9
char_codes("AB\n")             # [65, 66]
```

`factorial_trace` returns the call and return messages of a recursive
evaluation, in Korean.

Ordered list and sparse matrix:

```python
from dstructs.linear_list import insert_sorted, delete_element
from dstructs.sparse import Term, transpose

items = [10, 20, 40, 50, 60, 70]
insert_sorted(items, 30)       # 4 elements moved; items now holds 30 after 20
delete_element(items, 30)      # 4; ValueError if the value is absent

transpose([Term(2, 3, 1), Term(0, 2, 5)])
# [Term(row=3, col=2, value=1), Term(row=2, col=0, value=5)]
```

The first `Term` of a sparse matrix is its header: number of rows, number
of columns and number of non-zero entries.

Linked list:

```python
from dstructs.linked_list import LinkedList

days = LinkedList()
for day in ("Mon", "Wed", "Sun"):
    days.insert_last(day)
wed = days.search("Wed")
days.insert_after(wed, "Fri")
days.delete(days.search("Sun"))
days.reverse()
print(days)        # L = (Fri, Wed, Mon)
```

Polynomial addition (terms are expected in descending exponent order):

```python
from dstructs.polynomial import Polynomial

a = Polynomial([(4, 3), (3, 2), (5, 1)])
b = Polynomial()
for coef, expo in ((3, 4), (1, 3), (2, 1), (1, 0)):
    b.append_term(coef, expo)
print(a + b)       # "  3x^4 +  5x^3 +  3x^2 +  7x^1 +  1x^0"
```

Stacks and expressions:

```python
from dstructs.stacks import LinkedStack
from dstructs.expressions import brackets_balanced, eval_postfix

stack = LinkedStack()
stack.push(1)
stack.push(2)
stack.pop()                                          # 2

brackets_balanced("{(A+B)-3}*5+[{cos(x+y)+7}-1]*4")  # True
eval_postfix("35*62/-")                              # 12
```

`eval_postfix` takes single-digit operands, truncates division toward zero
and raises `ValueError` for a malformed expression.

Queues, deques and heaps:

```python
from dstructs.queues import CircularQueue
from dstructs.linked_deque import LinkedDeque
from dstructs.max_heap import MaxHeap

queue = CircularQueue()        # capacity 4, holds at most 3 items
queue.enqueue("A")
queue.dequeue()                # 'A'

dq = LinkedDeque()
dq.insert_front("A")
dq.insert_rear("C")
dq.peek_rear()                 # 'C'

heap = MaxHeap()
for item in (10, 45, 19, 11, 96):
    heap.insert(item)
print(heap)                    # Heap : [96] [45] [19] [10] [11]
heap.delete()                  # 96
```

`ArrayStack` holds 100 items by default. `LinearQueue` (capacity 4 by
default) never reuses freed slots, so it reports itself full once it has
taken `capacity` items in total. Operations on an empty structure raise the
matching error, such as `StackEmptyError`, `QueueEmptyError`,
`DequeEmptyError` or `HeapEmptyError`; adding to a full fixed-size structure
raises `StackFullError` or `QueueFullError`.

Trees:

```python
from dstructs.trees import TreeNode, preorder, inorder, postorder, BinarySearchTree

expr = TreeNode("-",
                TreeNode("*", TreeNode("A"), TreeNode("B")),
                TreeNode("/", TreeNode("C"), TreeNode("D")))
"".join(preorder(expr))        # '-*AB/CD'
"".join(inorder(expr))         # 'A*B-C/D'
"".join(postorder(expr))       # 'AB*CD/-'

bst = BinarySearchTree()
for key in "GIHDBMNAJEQ":
    bst.insert(key)
"A" in bst                     # True
bst.delete("D")
bst.inorder()                  # keys in ascending order
```

Inserting a key twice raises `ValueError`; `search` and `delete` raise
`KeyError` for a missing key.

Graphs:

```python
from dstructs.graphs import AdjacencyListGraph, AdjacencyMatrixGraph

g = AdjacencyListGraph()
for _ in range(4):
    g.insert_vertex()
g.insert_edge(0, 1)
g.insert_edge(1, 2)
g.insert_edge(2, 3)
g.dfs(0)                       # [0, 1, 2, 3]

m = AdjacencyMatrixGraph()
m.insert_vertex()
m.insert_vertex()
m.insert_edge(0, 1)
m.matrix()                     # [[0, 1], [0, 0]]
```

Both graph types hold at most 30 vertices by default. Edges are directed;
insert both directions for an undirected graph. A missing vertex or one
vertex too many raises `GraphError`. The adjacency list puts each new edge
at the head of its vertex's list, and `str()` of a list graph labels
vertices A, B, C, … in Korean-language lines.

## What it does not do

This is a library only: it has no command-line program and prints
nothing. Every structure lives in memory; nothing is saved to or loaded
from files.