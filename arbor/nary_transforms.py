"""Queries that rewrite n-ary trees level by level or subtree by subtree."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from arbor.linked_list import LinkedList
from arbor.nary_tree import NaryNode, NaryTree


def _walk(
    tree: NaryTree, node: Optional[NaryNode], level: int = 0
) -> Iterator[tuple[NaryNode, int]]:
    """Yield ``(node, level)`` pairs in preorder."""
    if node is None:
        return
    yield node, level
    for child in tree.children(node):
        yield from _walk(tree, child, level + 1)


def _depth(node: NaryNode) -> int:
    level = 0
    while node.parent is not None:
        node = node.parent
        level += 1
    return level


def _prepend(result: LinkedList, value: Any) -> None:
    result.insert(value, result.begin())


def special_descendants(tree: NaryTree, node: NaryNode) -> LinkedList:
    """Values of descendants of ``node`` that also occur on a level nearer the root.

    Levels are counted from the root of ``tree``; each match is put at the front.
    """
    result = LinkedList()
    if tree.is_empty():
        return result
    everything = list(_walk(tree, tree.root))
    for descendant, level in _walk(tree, node, _depth(node)):
        if descendant is node:
            continue
        if any(
            other.value == descendant.value
            for other, other_level in everything
            if other_level < level
        ):
            _prepend(result, descendant.value)
    return result


def _cascade(tree: NaryTree, node: NaryNode) -> None:
    kids = list(tree.children(node))
    if not kids:
        return
    smallest = min([node.value, *(child.value for child in kids)])
    for child in kids:
        _cascade(tree, child)
    if node.value > smallest:
        node.value = smallest


def cascade_minimum(tree: NaryTree) -> None:
    """Lower each inner node to the least of itself and its children's original values."""
    if tree.root is not None:
        _cascade(tree, tree.root)


def increment_odd_levels(tree: NaryTree) -> LinkedList:
    """Increment inner nodes on odd levels; return their old values, each put at the front."""
    result = LinkedList()
    for node, level in _walk(tree, tree.root):
        if level % 2 != 0 and not tree.is_leaf(node):
            _prepend(result, node.value)
            node.value += 1
    return result


def _count_even(tree: NaryTree, node: NaryNode) -> int:
    total = int(node.value % 2 == 0)
    total += sum(_count_even(tree, child) for child in tree.children(node))
    node.value = total
    return total


def count_even_in_subtrees(tree: NaryTree) -> None:
    """Set each node to the number of even values originally in its subtree."""
    if tree.root is not None:
        _count_even(tree, tree.root)


def _inorder_nodes(tree: NaryTree, node: NaryNode) -> Iterator[NaryNode]:
    kids = list(tree.children(node))
    for child in kids[:1]:
        yield from _inorder_nodes(tree, child)
    yield node
    for child in kids[1:]:
        yield from _inorder_nodes(tree, child)


def count_inorder_even_parent(tree: NaryTree) -> int:
    """Number of nodes whose parent holds an even value.

    The nodes are visited in symmetric order with one subtree before the node,
    and the visited values are printed on one line.
    """
    if tree.root is None:
        return 0
    count = 0
    visited = []
    for node in _inorder_nodes(tree, tree.root):
        visited.append(f" {node.value}")
        parent = tree.parent(node)
        if node is not tree.root and parent is not None and parent.value % 2 == 0:
            count += 1
    print("".join(visited))
    return count


def max_level(tree: NaryTree) -> int:
    """Level whose values add up to the largest sum; the shallowest wins ties.

    The sum of each level is printed.
    """
    if tree.root is None:
        raise LookupError("tree is empty")
    sums: list[Any] = []
    for node, level in _walk(tree, tree.root):
        while len(sums) <= level:
            sums.append(0)
        sums[level] += node.value
    for level, total in enumerate(sums):
        print(f"sum of level {level}: {total}")
    return max(range(len(sums)), key=sums.__getitem__)


def _sum_subtree(tree: NaryTree, node: NaryNode) -> Any:
    total = node.value + sum(
        _sum_subtree(tree, child) for child in tree.children(node)
    )
    node.value = total
    return total


def subtree_sums(tree: NaryTree) -> None:
    """Set each node to the sum of the values originally in its subtree."""
    if tree.root is not None:
        _sum_subtree(tree, tree.root)


def greater_above(tree: NaryTree) -> LinkedList:
    """Values of nodes below which, nearer the root, some greater value occurs."""
    result = LinkedList()
    everything = list(_walk(tree, tree.root))
    for node, level in everything:
        if any(
            other.value > node.value
            for other, other_level in everything
            if other_level < level
        ):
            _prepend(result, node.value)
    return result


def _grandparent_max(tree: NaryTree, node: NaryNode) -> int:
    kids = list(tree.children(node))
    unchanged = sum(_grandparent_max(tree, child) for child in kids)
    grandchildren = [g.value for child in kids for g in tree.children(child)]
    best = max([node.value, *grandchildren])
    if best == node.value:
        return unchanged + 1
    node.value = best
    return unchanged


def max_to_grandparent(tree: NaryTree) -> int:
    """Set each node to the largest of itself and its grandchildren, bottom up.

    Return the number of nodes whose value did not change.
    """
    if tree.root is None:
        return 0
    return _grandparent_max(tree, tree.root)


def constant_at_level(tree: NaryTree, k: int, v: Any) -> LinkedList:
    """Set every node on level ``k`` to ``v``.

    Return the values of the nodes left unchanged, each put at the front.
    """
    result = LinkedList()
    for node, level in _walk(tree, tree.root):
        if level == k and node.value != v:
            node.value = v
        else:
            _prepend(result, node.value)
    return result