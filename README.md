# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Every function and class works on ordinary Python values.
Sorting functions return new lists. Errors are raised as exceptions.

## Installation

```
pip install .
```

## Modules

### `dsakit.arrays`

- `sort_012(values)` returns a list of 0s, 1s and 2s in ascending order. It raises `ValueError` for any other value.
- `longest_consecutive_subsequence(values)` returns the length of the longest run of consecutive integers. The integers may appear in any order.
- `remove_sorted_duplicates(values)` drops adjacent duplicates from a sorted sequence.
- `binary_search(values, target)` returns an index of `target` in a sorted sequence, or `None` if `target` is absent.

### `dsakit.sorting`

Each function returns a new sorted list:

- `insertion_sort`
- `quick_sort`, which uses the first element as the pivot
- `radix_sort`, base 10, which also accepts negative numbers
- `selection_sort`
- `bubble_sort`
- `heap_sort`
- `merge_sort`, which is stable

`counting_sort(text)` returns the characters of a string in code-point order.

### `dsakit.recursion`

- `power(base, exponent)` computes the power by repeated multiplication.
- `fast_power(base, exponent)` computes the power by repeated squaring.
- `factorial(n)` returns n!.
- `n_choose_r(n, r)` returns the binomial coefficient as a `float`.

Negative arguments, or an `r` outside `0..n`, raise `ValueError`.

### `dsakit.backtracking`

- `josephus(n, k)` returns the zero-based safe position.
- `solve_n_queens(n)` returns the first board it finds as rows of 0/1 cells, or `None` when no board exists.
- `format_board(board)` renders a board as lines of space-separated cells.

### `dsakit.strings`

- `is_anagram(first, second)` returns `True` when every character of `first` occurs somewhere in `second`. It checks which characters are present. It does not compare how many times each one occurs.
- `remove_duplicate_characters(text)` keeps only the first occurrence of each character.

### `dsakit.trees`

`TreeNode(val, left, right)` is a binary tree node.

Building trees:
- `build_tree(text)` builds a tree from space-separated level-order values, with `N` marking a missing child.
- `build_preorder(values)` builds a tree from preorder values, with `-1` marking a missing child.

Traversals:
- `inorder`
- `level_order`
- `reverse_level_order`
- `right_side_view`

Queries:
- `height` and `diameter` count nodes.
- `max_width` returns the widest level, counting the gaps between its outermost nodes.
- `is_balanced`
- `is_bst`
- `count_nodes`
- `lowest_common_ancestor(root, p, q)` takes nodes.
- `distance_between(root, first, second)` takes values and returns the number of edges between them. It raises `ValueError` if either value is missing.

### `dsakit.bst`

`BinarySearchTree(values)` holds distinct integers.

- `insert(key)` returns `False` for a duplicate.
- `count_in_range(low, high)` counts keys in the closed range.
- `is_dead_end()` reports whether some leaf has both neighbouring integers taken. Zero counts as taken.
- `preorder()` returns the keys in root-left-right order.
- The tree supports `len()` and `in`.

### `dsakit.graphs`

`Graph(vertex_count)` is an undirected weighted graph.

- `add_edge` returns `False` when the edge already exists.
- `has_edge` and `neighbors` look up edges.
- `minimum_spanning_tree()` runs Prim's algorithm from vertex 0. It returns a `SpanningTree` with `total_weight` and `edges`, where `edges` holds `(parent, child, weight)` triples. It raises `ValueError` for a disconnected graph.

### `dsakit.queues`

- `ArrayQueue(capacity=100)` holds a fixed number of slots. Slots are reclaimed only once the queue empties. `push` raises `OverflowError` when no slot is free.
- `LinkedQueue()` is unbounded.

Both queues offer `push`, `pop`, `front`, `is_empty` and `len()`. Reading an empty queue raises `QueueEmptyError`.

### `dsakit.expressions`

- `simple_infix_to_postfix(infix)` converts an infix expression without parentheses.
- `to_postfix` and `to_prefix` convert infix expressions of single-character operands, with parentheses allowed.
- `evaluate_postfix` and `evaluate_prefix` evaluate expressions of single digits. Division truncates toward zero.
- `brackets_balanced` checks `()`, `[]` and `{}`.
- `parentheses_balanced` checks only round parentheses.

Malformed input raises `ExpressionError`.

### `dsakit.linked_list`

`SinglyLinkedList(values)` supports:
- `append`, `prepend`, `insert_at` and `delete_at`
- `swap(i, j)`, which exchanges the values at two indexes
- `remove_first` and `remove_last`
- `count` and `find_last`
- `middle`
- `in`, iteration and `len()`

Two functions work on raw chains of `ListNode`s:
- `loop_length(head)` returns the size of a cycle, or 0 if there is none.
- `middle_value(head)` returns the middle value.

### `dsakit.doubly_linked_list`

`DoublyLinkedList(values)` supports:
- insertion and deletion at either end
- `get_node` and `search`
- keyed `insert_after`, `insert_before`, `delete_before` and `delete_after`
- in-place `reverse()`
- iteration in both directions

A missing key raises `ValueError`.

### `dsakit.sorted_linked_list`

`LinkedList(values)` is a singly linked list.

- `swap(x, y)` relinks the nodes that first hold the two values.
- `sort_insert(value)` adds a value and leaves the list in ascending order.

### `dsakit.min_stack`

`ResizingStack(capacity=10)` has the following behaviour:
- Its capacity doubles when it is full and halves when it is at most a quarter used.
- `min()` returns the smallest value without changing the stack.
- Reading an empty stack raises `StackEmptyError`.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.arrays import binary_search
from dsakit.trees import build_tree, level_order, diameter
from dsakit.expressions import to_postfix, evaluate_postfix
from dsakit.graphs import Graph

merge_sort([0, -8, 54, 9, 7, 18, 45])      # [-8, 0, 7, 9, 18, 45, 54]
binary_search([1, 3, 5, 7], 5)             # 2

root = build_tree("1 2 3 4 5 6 7")
level_order(root)                          # [1, 2, 3, 4, 5, 6, 7]
diameter(root)                             # 5

postfix = to_postfix("2+3*4")              # "234*+"
evaluate_postfix(postfix)                  # 14

graph = Graph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
graph.add_edge(0, 2, 3)
graph.minimum_spanning_tree()
# SpanningTree(total_weight=4, edges=((2, 1, 1), (0, 2, 3)))
```

## What it does not do

dsakit is a library only. It has no command-line program and does not read input from the terminal. To use an algorithm, call its function from Python.

## Running the tests

```
pip install .[test]
pytest
```