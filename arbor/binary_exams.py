"""Counting, searching and updating queries over binary trees."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from arbor.binary_tree import BinaryNode, BinaryTree
from arbor.linked_list import LinkedList


def _inorder(
    node: Optional[BinaryNode], level: int = 0
) -> Iterator[tuple[BinaryNode, int]]:
    """Yield ``(node, level)`` pairs in symmetric order."""
    if node is None:
        return
    yield from _inorder(node.left, level + 1)
    yield node, level
    yield from _inorder(node.right, level + 1)


def _preorder(node: Optional[BinaryNode]) -> Iterator[BinaryNode]:
    """Yield nodes, each before its subtrees."""
    if node is None:
        return
    yield node
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _prepend_matching(tree: BinaryTree, predicate) -> LinkedList:
    result = LinkedList()
    for node, _ in _inorder(tree.root):
        if predicate(node.value):
            result.insert(node.value, result.begin())
    return result


def even_values(tree: BinaryTree) -> LinkedList:
    """Even values met in symmetric order, each put at the front of the list."""
    return _prepend_matching(tree, lambda value: value % 2 == 0)


def _contains(node: Optional[BinaryNode], value: Any) -> bool:
    return any(current.value == value for current, _ in _inorder(node))


def common_values(first: BinaryTree, second: BinaryTree) -> LinkedList:
    """Values of ``first`` also found in ``second``, each put at the front."""
    if first.is_empty() or second.is_empty():
        return LinkedList()
    return _prepend_matching(first, lambda value: _contains(second.root, value))


def transfer_even(tree: BinaryTree) -> LinkedList:
    """Copy the even values into a list through a symmetric visit."""
    return even_values(tree)


def increment_sparse(tree: BinaryTree) -> int:
    """Increment every node with at most one child; return the sum of the new values.

    Each visited node is printed before it is examined.
    """
    total = 0
    for node, _ in _inorder(tree.root):
        print(f"current node: {node.value}")
        if node.left is None or node.right is None:
            node.value += 1
            total += node.value
    return total


def level_averages(tree: BinaryTree) -> list[float]:
    """Average of the node values on each level, root level first."""
    sums: list[float] = []
    counts: list[int] = []
    for node, level in _inorder(tree.root):
        while len(sums) <= level:
            sums.append(0)
            counts.append(0)
        sums[level] += node.value
        counts[level] += 1
    return [total / count for total, count in zip(sums, counts)]


def make_even(tree: BinaryTree) -> int:
    """Increment every odd value in symmetric order; return how many changed.

    Each visited value is printed, and the new value after an update.
    """
    updates = 0
    for node, _ in _inorder(tree.root):
        print(f"visited node: {node.value}")
        if node.value % 2 != 0:
            updates += 1
            node.value += 1
            print(f"incremented node: {node.value}")
    return updates


def increment_even_and_sum(tree: BinaryTree) -> int:
    """Increment every even value in preorder; return the sum of the new values.

    Each visited value is printed.
    """
    total = 0
    for node in _preorder(tree.root):
        print(f"visited node: {node.value}")
        if node.value % 2 == 0:
            node.value += 1
            total += node.value
    return total


def odd_at_level(tree: BinaryTree, k: int) -> int:
    """Number of nodes on level ``k`` holding an odd value."""
    return sum(
        1 for node, level in _inorder(tree.root) if level == k and node.value % 2 != 0
    )


def even_leaves(tree: BinaryTree) -> int:
    """Number of leaves holding an even value."""
    return sum(
        1 for node, _ in _inorder(tree.root) if node.is_leaf() and node.value % 2 == 0
    )


def _leaves_with_parent(tree: BinaryTree, predicate) -> int:
    count = 0
    for node, _ in _inorder(tree.root):
        if not node.is_leaf():
            continue
        parent = tree.parent(node)
        if parent is not None and predicate(parent.value):
            count += 1
    return count


def leaves_with_even_parent(tree: BinaryTree) -> int:
    """Number of leaves whose parent holds an even value."""
    return _leaves_with_parent(tree, lambda value: value % 2 == 0)


def subtree_sum(tree: BinaryTree, node: Optional[BinaryNode]) -> Any:
    """Sum of the values in the subtree rooted at ``node``."""
    return sum(current.value for current, _ in _inorder(node))


def count_subtrees_with_sum(tree: BinaryTree, k: int) -> int:
    """Number of nodes whose subtree values add up to ``k``."""
    return sum(1 for node, _ in _inorder(tree.root) if subtree_sum(tree, node) == k)


def divisible_by_three_at_level(tree: BinaryTree, k: int) -> int:
    """Number of nodes on level ``k`` holding a multiple of three."""
    return sum(
        1 for node, level in _inorder(tree.root) if level == k and node.value % 3 == 0
    )


def even_leaf_count(tree: BinaryTree) -> int:
    """Number of leaves holding an even value."""
    return even_leaves(tree)


def leaves_with_parent_multiple_of_five(tree: BinaryTree) -> int:
    """Number of leaves whose parent holds a multiple of five."""
    return _leaves_with_parent(tree, lambda value: value % 5 == 0)


def sum_leaves_deeper_than(tree: BinaryTree, depth: int) -> Any:
    """Sum of the leaves lying on a level greater than ``depth``."""
    return sum(
        node.value
        for node, level in _inorder(tree.root)
        if level > depth and node.is_leaf()
    )