"""Searching, counting and updating queries over n-ary trees."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from arbor.linked_list import LinkedList
from arbor.nary_tree import NaryNode, NaryTree


def _nodes(
    tree: NaryTree, node: Optional[NaryNode], level: int = 0
) -> Iterator[tuple[NaryNode, int]]:
    """Yield ``(node, level)`` pairs in preorder."""
    if node is None:
        return
    yield node, level
    for child in tree.children(node):
        yield from _nodes(tree, child, level + 1)


def _contains(tree: NaryTree, value: Any) -> bool:
    return any(node.value == value for node, _ in _nodes(tree, tree.root))


def _prepend(result: LinkedList, value: Any) -> None:
    result.insert(value, result.begin())


def sample_tree() -> NaryTree:
    """A fixed tree of integers used by the examples."""
    tree = NaryTree()
    root = tree.insert_root(11)
    for value in (4, 2, 6):
        tree.insert_first_child(root, value)
    first = tree.first_child(root)
    second = tree.next_sibling(first)
    third = tree.next_sibling(second)
    for value in (7, 8):
        tree.insert_first_child(first, value)
    for value in (10, 12, 8, 6):
        tree.insert_first_child(second, value)
    for value in (20, 6):
        tree.insert_first_child(third, value)
    tree.insert_first_child(tree.first_child(first), 30)
    grandchild = tree.first_child(third)
    for value in (40, 2, 1, 20):
        tree.insert_first_child(grandchild, value)
    return tree


def _few_even(tree: NaryTree, node: NaryNode, result: LinkedList) -> None:
    kids = list(tree.children(node))
    if not kids:
        _prepend(result, node.value)
        return
    even = 0
    stop = kids[-1]
    for child in kids[:-1]:
        if even >= 3:
            stop = child
            break
        # Only even children before the stopping one are explored further.
        if child.value % 2 == 0:
            even += 1
            _few_even(tree, child, result)
    if stop.value % 2 == 0:
        even += 1
    _few_even(tree, stop, result)
    if even < 3:
        _prepend(result, node.value)


def few_even_children(tree: NaryTree) -> LinkedList:
    """Values of nodes with fewer than three even children, each put at the front.

    Children that are odd and not the last examined are not explored.
    """
    result = LinkedList()
    if tree.root is not None:
        _few_even(tree, tree.root, result)
    return result


def contains_successor(first: NaryTree, second: NaryTree) -> LinkedList:
    """Values ``v`` of ``first`` such that ``v + 1`` occurs in ``second``."""
    result = LinkedList()
    if first.is_empty() or second.is_empty():
        return result
    for node, _ in _nodes(first, first.root):
        if _contains(second, node.value + 1):
            _prepend(result, node.value)
    return result


def _many(tree: NaryTree, node: NaryNode, result: LinkedList) -> None:
    kids = list(tree.children(node))
    if not kids:
        return
    # Counting stops at the fourth child, and so does the exploration.
    visited = kids[:4]
    for child in visited:
        _many(tree, child, result)
    if len(visited) > 3:
        _prepend(result, node.value)


def many_children(tree: NaryTree) -> LinkedList:
    """Values of nodes with more than three children, each put at the front.

    Only the first four children of a node are explored further.
    """
    result = LinkedList()
    if tree.root is not None:
        _many(tree, tree.root, result)
    return result


def difference_list(first: NaryTree, second: NaryTree) -> LinkedList:
    """Values of ``first`` that do not occur in ``second``, each put at the front."""
    result = LinkedList()
    for node, _ in _nodes(first, first.root):
        if not _contains(second, node.value):
            _prepend(result, node.value)
    return result


def presence(first: NaryTree, second: NaryTree, x: Any) -> int:
    """2 if ``x`` is in both trees, 1 if in exactly one, 0 if in neither."""
    return int(_contains(first, x)) + int(_contains(second, x))


def _average(tree: NaryTree, node: NaryNode) -> int:
    kids = list(tree.children(node))
    if not kids:
        return 1
    values = [child.value for child in kids]
    unchanged = sum(_average(tree, child) for child in kids)
    mean = sum(values) / len(values)
    if node.value != mean:
        node.value = mean
        return unchanged
    return unchanged + 1


def average_to_parent(tree: NaryTree) -> int:
    """Set each inner node to the mean of its children's original values.

    Return the number of nodes whose value did not change, leaves included.
    """
    if tree.root is None:
        return 0
    return _average(tree, tree.root)


def size_difference(first: NaryTree, second: NaryTree) -> int:
    """Absolute difference between the node counts of the two trees."""
    first_size = sum(1 for _ in _nodes(first, first.root))
    second_size = sum(1 for _ in _nodes(second, second.root))
    return abs(first_size - second_size)


def repeated_deeper(tree: NaryTree) -> LinkedList:
    """Values of nodes whose value also occurs on a level nearer the root."""
    result = LinkedList()
    for node, level in _nodes(tree, tree.root):
        if any(
            other.value == node.value
            for other, other_level in _nodes(tree, tree.root)
            if other_level < level
        ):
            _prepend(result, node.value)
    return result


def _sum_children(tree: NaryTree, node: NaryNode) -> None:
    kids = list(tree.children(node))
    if not kids:
        return
    total = sum(child.value for child in kids)
    for child in kids:
        _sum_children(tree, child)
    node.value = total


def sum_to_parent(tree: NaryTree) -> None:
    """Set each inner node to the sum of its children's original values."""
    if tree.root is not None:
        _sum_children(tree, tree.root)


def greater_in_both(first: NaryTree, second: NaryTree, x: Any, k: int) -> bool:
    """Check that at least ``k`` values greater than ``x`` are found in each tree.

    The tally is shared between the trees: it is not reset before ``second`` is
    searched, so once ``first`` reaches ``k`` the search of ``second`` succeeds
    at its root.
    """
    count = 0

    def reaches(tree: NaryTree, node: NaryNode) -> bool:
        nonlocal count
        if node.value > x:
            count += 1
        if count >= k:
            return True
        return any(reaches(tree, child) for child in tree.children(node))

    if first.root is None or second.root is None:
        return False
    return reaches(first, first.root) and reaches(second, second.root)