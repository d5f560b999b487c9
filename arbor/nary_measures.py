"""Depth and width of n-ary trees."""

from __future__ import annotations

from collections import Counter

from arbor.nary_tree import NaryTree


def depth(tree: NaryTree) -> int:
    """Deepest level holding a node; -1 for an empty tree."""
    if tree.is_empty():
        return -1
    return max(level for _, level in tree.bfs_levels())


def width(tree: NaryTree) -> int:
    """Largest number of nodes sharing one level; -1 for an empty tree."""
    if tree.is_empty():
        return -1
    return max(Counter(level for _, level in tree.bfs_levels()).values())