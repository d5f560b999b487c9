"""Binary tree of linked nodes with parent links and the classic traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional

_INDENT = 4


@dataclass(eq=False)
class BinaryNode:
    """A node of a binary tree."""

    value: Any = None
    left: Optional[BinaryNode] = None
    right: Optional[BinaryNode] = None
    parent: Optional[BinaryNode] = None

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None


class BinaryTree:
    """Binary tree built node by node from the root downwards."""

    def __init__(self) -> None:
        self.root: Optional[BinaryNode] = None

    def is_empty(self) -> bool:
        """True if the tree has no root."""
        return self.root is None

    def parent(self, node: BinaryNode) -> Optional[BinaryNode]:
        """Parent of ``node``, or None for the root."""
        if node is self.root:
            return None
        return node.parent

    def insert_root(self, value: Any) -> BinaryNode:
        """Create the root holding ``value``; return it."""
        if self.root is not None:
            raise ValueError("tree already has a root")
        self.root = BinaryNode(value)
        return self.root

    def insert_left(self, node: BinaryNode, value: Any) -> BinaryNode:
        """Add a left child holding ``value`` to ``node``; return it."""
        if node.left is not None:
            raise ValueError("node already has a left child")
        node.left = BinaryNode(value, parent=node)
        return node.left

    def insert_right(self, node: BinaryNode, value: Any) -> BinaryNode:
        """Add a right child holding ``value`` to ``node``; return it."""
        if node.right is not None:
            raise ValueError("node already has a right child")
        node.right = BinaryNode(value, parent=node)
        return node.right

    def remove_subtree(self, node: Optional[BinaryNode]) -> None:
        """Detach ``node`` and everything below it from the tree."""
        if node is None:
            return
        if node is self.root:
            self.root = None
            return
        parent = node.parent
        if parent is None:
            raise ValueError("node does not belong to this tree")
        if parent.left is node:
            parent.left = None
        else:
            parent.right = None
        node.parent = None

    def preorder(self, node: Optional[BinaryNode]) -> Iterator[Any]:
        """Yield values below ``node``, each before its subtrees."""
        if node is None:
            return
        yield node.value
        yield from self.preorder(node.left)
        yield from self.preorder(node.right)

    def postorder(self, node: Optional[BinaryNode]) -> Iterator[Any]:
        """Yield values below ``node``, each after its subtrees."""
        if node is None:
            return
        yield from self.postorder(node.left)
        yield from self.postorder(node.right)
        yield node.value

    def inorder(self, node: Optional[BinaryNode]) -> Iterator[Any]:
        """Yield values below ``node`` in symmetric order."""
        if node is None:
            return
        yield from self.inorder(node.left)
        yield node.value
        yield from self.inorder(node.right)

    def breadth_first(self, node: Optional[BinaryNode]) -> Iterator[Any]:
        """Yield values below ``node`` level by level, left to right."""
        for value, _ in self.bfs_levels(node):
            yield value

    def dfs_levels(
        self, node: Optional[BinaryNode], level: int = 0
    ) -> Iterator[tuple[Any, int]]:
        """Yield ``(value, level)`` pairs in preorder, starting at ``level``."""
        if node is None:
            return
        yield node.value, level
        yield from self.dfs_levels(node.left, level + 1)
        yield from self.dfs_levels(node.right, level + 1)

    def bfs_levels(self, node: Optional[BinaryNode]) -> Iterator[tuple[Any, int]]:
        """Yield ``(value, level)`` pairs breadth first, ``node`` at level 0."""
        if node is None:
            return
        queue: deque[tuple[BinaryNode, int]] = deque([(node, 0)])
        while queue:
            current, level = queue.popleft()
            yield current.value, level
            for child in (current.left, current.right):
                if child is not None:
                    queue.append((child, level + 1))

    def render(self, node: Optional[BinaryNode], level: int = 0) -> str:
        """Indented text of the subtree at ``node``, one value per line."""
        if node is None:
            return ""
        indent = " " * max(level * _INDENT - 1, 0)
        lines = [f"{indent}{node.value}\n"]
        lines.append(self.render(node.left, level + 1))
        lines.append(self.render(node.right, level + 1))
        return "".join(lines)