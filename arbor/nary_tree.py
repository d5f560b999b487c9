"""Ordered n-ary tree of linked nodes using first-child / next-sibling links."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class NaryNode:
    """A node of an n-ary tree."""

    value: Any = None
    parent: Optional[NaryNode] = field(default=None, repr=False)
    first_child: Optional[NaryNode] = field(default=None, repr=False)
    next_sibling: Optional[NaryNode] = field(default=None, repr=False)


class NaryTree:
    """Ordered tree where each node keeps its first child and next sibling."""

    def __init__(self) -> None:
        self.root: Optional[NaryNode] = None

    def is_empty(self) -> bool:
        """True if the tree has no root."""
        return self.root is None

    def insert_root(self, value: Any) -> NaryNode:
        """Make a new root holding ``value``, replacing any previous tree."""
        self.root = NaryNode(value)
        return self.root

    def parent(self, node: NaryNode) -> Optional[NaryNode]:
        """Parent of ``node``, or None for the root."""
        return node.parent

    def is_leaf(self, node: NaryNode) -> bool:
        """True if ``node`` has no children."""
        return node.first_child is None

    def first_child(self, node: NaryNode) -> NaryNode:
        """The leftmost child of ``node``."""
        if node.first_child is None:
            raise LookupError("node is a leaf")
        return node.first_child

    def is_last_sibling(self, node: NaryNode) -> bool:
        """True if no sibling follows ``node``."""
        return node.next_sibling is None

    def next_sibling(self, node: NaryNode) -> NaryNode:
        """The sibling right after ``node``."""
        if node.next_sibling is None:
            raise LookupError("node is the last sibling")
        return node.next_sibling

    def children(self, node: NaryNode) -> Iterator[NaryNode]:
        """Yield the children of ``node`` from left to right."""
        child = node.first_child
        while child is not None:
            yield child
            child = child.next_sibling

    def insert_first_child(self, node: NaryNode, value: Any) -> NaryNode:
        """Add a new leftmost child of ``node`` holding ``value``; return it."""
        child = NaryNode(value, parent=node, next_sibling=node.first_child)
        node.first_child = child
        return child

    def insert_sibling(self, node: NaryNode, value: Any) -> NaryNode:
        """Add a new sibling right after ``node`` holding ``value``; return it."""
        if node is self.root or node.parent is None:
            raise ValueError("the root has no siblings")
        sibling = NaryNode(value, parent=node.parent, next_sibling=node.next_sibling)
        node.next_sibling = sibling
        return sibling

    def _clone(self, source: NaryNode, parent: Optional[NaryNode]) -> NaryNode:
        node = NaryNode(source.value, parent=parent)
        previous: Optional[NaryNode] = None
        for child in self.children(source):
            copy = self._clone(child, node)
            if previous is None:
                node.first_child = copy
            else:
                previous.next_sibling = copy
            previous = copy
        return node

    def _check_both_filled(self, other: NaryTree) -> NaryNode:
        if self.is_empty() or other.is_empty():
            raise ValueError("both trees must be non-empty")
        assert other.root is not None
        return other.root

    def insert_first_subtree(self, node: NaryNode, other: NaryTree) -> NaryNode:
        """Copy ``other`` in as the new first child of ``node``; return its root."""
        source = self._check_both_filled(other)
        copy = self._clone(source, node)
        copy.next_sibling = node.first_child
        node.first_child = copy
        return copy

    def insert_subtree(self, node: NaryNode, other: NaryTree) -> NaryNode:
        """Copy ``other`` in as the sibling right after ``node``; return its root."""
        source = self._check_both_filled(other)
        if node is self.root or node.parent is None:
            raise ValueError("the root has no siblings")
        copy = self._clone(source, node.parent)
        copy.next_sibling = node.next_sibling
        node.next_sibling = copy
        return copy

    def remove_subtree(self, node: NaryNode) -> None:
        """Detach ``node`` and all its descendants from the tree."""
        if self.is_empty():
            raise LookupError("tree is empty")
        if node is self.root:
            self.root = None
            return
        parent = node.parent
        if parent is None:
            raise ValueError("node does not belong to this tree")
        if parent.first_child is node:
            parent.first_child = node.next_sibling
        else:
            previous = next(
                (c for c in self.children(parent) if c.next_sibling is node), None
            )
            if previous is None:
                raise ValueError("node does not belong to this tree")
            previous.next_sibling = node.next_sibling
        node.parent = None
        node.next_sibling = None

    def preorder(self, node: Optional[NaryNode]) -> Iterator[Any]:
        """Yield values below ``node``, each before its subtrees."""
        if node is None:
            return
        yield node.value
        for child in self.children(node):
            yield from self.preorder(child)

    def postorder(self, node: Optional[NaryNode]) -> Iterator[Any]:
        """Yield values below ``node``, each after its subtrees."""
        if node is None:
            return
        for child in self.children(node):
            yield from self.postorder(child)
        yield node.value

    def inorder(self, node: Optional[NaryNode], i: int = 1) -> Iterator[Any]:
        """Yield values symmetrically: the first ``i`` subtrees, the node, the rest."""
        if i < 0:
            raise ValueError("i must not be negative")
        if node is None:
            return
        kids = list(self.children(node))
        for child in kids[:i]:
            yield from self.inorder(child, i)
        yield node.value
        for child in kids[i:]:
            yield from self.inorder(child, i)

    def breadth_first(self) -> Iterator[Any]:
        """Yield the values level by level from the root."""
        for value, _ in self.bfs_levels():
            yield value

    def dfs_levels(
        self, node: Optional[NaryNode], level: int = 0
    ) -> Iterator[tuple[Any, int]]:
        """Yield ``(value, level)`` pairs in preorder, starting at ``level``."""
        if node is None:
            return
        yield node.value, level
        for child in self.children(node):
            yield from self.dfs_levels(child, level + 1)

    def bfs_levels(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(value, level)`` pairs breadth first, the root at level 0."""
        if self.root is None:
            return
        queue: deque[tuple[NaryNode, int]] = deque([(self.root, 0)])
        while queue:
            current, level = queue.popleft()
            yield current.value, level
            queue.extend((child, level + 1) for child in self.children(current))

    def render(self, node: NaryNode) -> str:
        """Text with one line per node: its value, a colon and its children."""
        kids = list(self.children(node))
        line = f"{node.value}:" + "".join(f" {child.value}" for child in kids) + "\n"
        return line + "".join(self.render(child) for child in kids)