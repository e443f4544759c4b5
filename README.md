# dsalgo

A library of classic data structures and algorithms in plain Python. It has no third-party dependencies. The test suite uses pytest, which comes with the `test` extra.

## Modules

| Module | Contents |
| --- | --- |
| `dsalgo.lexer` | `TokenKind`, `OperPrec`, `Token` (with `oper_prec()`), `TokenizeError`, `Tokenizer` (with `next_token()`), and `tokenize`, which splits an arithmetic expression into tokens ending in an EOF token. |
| `dsalgo.expr_ast` | The expression nodes `Number`, `Negative`, `Add`, `Subtract`, `Multiply`, `Divide` and `Caret`, and `evaluate`, which computes a tree's value with IEEE float rules. Division by zero gives an infinity or NaN and does not raise. |
| `dsalgo.stack_algorithms` | `to_base` (bases 2 to 16; a bad base or a negative number raises `ValueError`), `is_valid_brackets`, `infix_to_postfix`. |
| `dsalgo.bounded` | `BoundedQueue` and `BoundedDeque`. Both have a fixed capacity and raise `CapacityError` when full and `IndexError` when empty. |
| `dsalgo.linked_list` | `LinkedList`, a singly linked stack with `push`, `pop`, `peek`, `replace_head`, `drain` and head-to-tail iteration. |
| `dsalgo.queue_stack` | `QueueStack`, a last-in first-out stack kept in a single queue. |
| `dsalgo.avl` | `AvlTree`, a self-balancing tree with `insert`, `delete`, `in`, `depth`, `find_min` and `inorder`. |
| `dsalgo.binary_heap` | `MinHeap`, with `push`, `pop`, `peek` and `MinHeap.from_iterable`. |
| `dsalgo.binary_tree` | `BinaryTree`, filled by search-tree insertion, with `preorder`, `inorder` and `postorder`. |
| `dsalgo.bst` | `BinarySearchTree`, a key/value tree with `insert`, `get`, `delete`, `min`, `max`, `in` and the three traversals as `(key, value)` lists. |
| `dsalgo.adjacency_list` | `Graph` and `Vertex`, a weighted undirected graph. `edge_count()` counts each direction of an edge separately and counts a self-loop once. |
| `dsalgo.adjacency_matrix` | `MatrixGraph`, an unweighted graph over vertices `0..n-1` with `add_edge`, `remove_edge`, `has_edge`, `dfs`, `bfs` and `render`. |
| `dsalgo.traversal` | `build_adjacency`, `bfs`, `dfs_iterative`, `dfs_recursive` over adjacency lists. |
| `dsalgo.dijkstra` | `dijkstra`, which gives shortest distances and raises `ValueError` on a negative cost, and `format_graph`. |
| `dsalgo.searching` | `sequential_search`, `binary_search`, `interpolation_search`, and `parallel_search`, which scans chunks on a thread pool. Each returns an index or `None`. |
| `dsalgo.kmp` | `compute_lps`, `kmp_search`. |
| `dsalgo.hashing` | `ChainingHashMap` and `LinearProbingHashMap` for integer keys. The probing map raises `OverflowError` when it is full. |
| `dsalgo.comparison_sorts` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `shell_sort`. Each returns a new sorted list. |
| `dsalgo.distribution_sorts` | `bucket_sort` for floats, and `counting_sort` and `radix_sort` for non-negative integers, which raise `ValueError` on negatives. |

## Examples

```python
from dsalgo.stack_algorithms import infix_to_postfix, to_base
from dsalgo.lexer import tokenize, TokenKind
from dsalgo.expr_ast import Add, Multiply, Number, evaluate
from dsalgo.avl import AvlTree
from dsalgo.dijkstra import dijkstra

infix_to_postfix("(A + B) * C")   # "AB+C*"
to_base(255, 16)                  # "FF"

[t.kind for t in tokenize("2*3")]
# [TokenKind.NUM, TokenKind.MULTIPLY, TokenKind.NUM, TokenKind.EOF]

evaluate(Add(Number(1), Multiply(Number(2), Number(3))))   # 7.0

tree = AvlTree()
for v in [10, 5, 15, 3, 7, 12, 18]:
    tree.insert(v)
7 in tree                         # True
tree.depth()                      # 3

graph = {
    "s": [("t", 10), ("y", 5)],
    "t": [("y", 2), ("x", 1)],
    "x": [("z", 4)],
    "y": [("t", 3), ("x", 9), ("z", 2)],
    "z": [("s", 7), ("x", 6)],
}
dijkstra("s", graph)              # {"s": 0, "t": 8, "y": 5, "x": 9, "z": 7}
```

## What it does not do

- The package has no parser that builds an expression tree from tokens. `dsalgo.lexer` produces tokens, and `dsalgo.expr_ast.evaluate` computes the value of a tree. You build the tree yourself from the node classes.
- The package has no command-line program. It is a library to import.