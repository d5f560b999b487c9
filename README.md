# arbor

Tree data structures and algorithms that run over them. It is a library only:
there is no command-line program.

## Modules

- `arbor.binary_tree`: `BinaryTree` and `BinaryNode`, a linked binary tree with
  parent links. Nodes are added with `insert_root`, `insert_left` and
  `insert_right`, and detached with `remove_subtree`. Traversals: `preorder`,
  `inorder`, `postorder`, `breadth_first`, plus `dfs_levels` and `bfs_levels`,
  which yield `(value, level)` pairs. `render` returns indented text.
- `arbor.bst`: `BinarySearchTree` and `BSTNode`. `insert` puts equal values in the
  right subtree. Also `height`, `is_balanced`, `min_node`, `max_node` (these two
  raise `EmptyTreeError` on an empty tree), `clear` and the three depth-first
  traversals.
- `arbor.nary_tree`: `NaryTree` and `NaryNode`, an ordered tree linked through
  first-child and next-sibling pointers. It supports `insert_first_child`,
  `insert_sibling`, copying another tree in with `insert_first_subtree` or
  `insert_subtree`, and `remove_subtree`. Traversals: `preorder`, `postorder`,
  `inorder(node, i)`, `breadth_first`, `dfs_levels`, `bfs_levels`. Both `children`
  and `render` are available.
- `arbor.tree_list`: `TreeList`, an n-ary tree kept in a table of fixed capacity
  (100 slots by default). Nodes are integer slots. `insert_root`,
  `insert_first_child`, `insert_sibling`, `remove_subtree`, `parent`,
  `first_child`, `next_sibling`, `read_node`, `write_node` and `render` are
  available. Allocating past capacity raises `OverflowError`.
- `arbor.linked_list`: `LinkedList`, a circular singly linked list with a
  sentinel. Access goes through positions (`begin`, `last`, `next`, `previous`,
  `is_end`, `read`, `write`, `insert` before a position, `erase`). It also
  supports `len()`, iteration, `==` and `str()`.
- `arbor.binary_exams`: queries over `BinaryTree`, including `even_values`,
  `common_values`, `level_averages`, `odd_at_level`, `even_leaves`,
  `leaves_with_even_parent`, `subtree_sum`, `count_subtrees_with_sum`,
  `divisible_by_three_at_level`, `sum_leaves_deeper_than`, and updating ones such
  as `make_even`, `increment_sparse` and `increment_even_and_sum` (these print
  each visited node).
- `arbor.nary_measures`: `depth(tree)` and `width(tree)`. Both return -1 for an
  empty tree.
- `arbor.nary_queries`: `sample_tree`, `few_even_children`,
  `contains_successor`, `many_children`, `difference_list`, `presence`,
  `average_to_parent`, `size_difference`, `repeated_deeper`, `sum_to_parent` and
  `greater_in_both`.
- `arbor.nary_transforms`: `special_descendants`, `cascade_minimum`,
  `increment_odd_levels`, `count_even_in_subtrees`,
  `count_inorder_even_parent`, `max_level`, `subtree_sums`, `greater_above`,
  `max_to_grandparent` and `constant_at_level`.

Functions that collect values return a `LinkedList`, with each match put at the
front.

## Installation

```
pip install .
```

## Example

```python
from arbor.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (30, 50, 15, 20, 10, 40, 60):
    tree.insert(value)

tree.height(tree.root)          # 3
tree.max_node().value           # 60
tree.min_node().value           # 10
tree.is_balanced(tree.root)     # True
list(tree.inorder(tree.root))   # [10, 15, 20, 30, 40, 50, 60]
```

```python
from arbor.nary_tree import NaryTree
from arbor.nary_measures import depth, width

tree = NaryTree()
root = tree.insert_root(1)
for value in (4, 3, 2):
    tree.insert_first_child(root, value)

list(tree.preorder(root))   # [1, 2, 3, 4]
depth(tree)                 # 1
width(tree)                 # 3
```

## Running the tests

```
pip install .[test]
pytest
```