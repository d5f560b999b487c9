"""Binary search tree with ordered insertion and depth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


class EmptyTreeError(LookupError):
    """Raised when a query needs at least one node but the tree has none."""


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    value: Any
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def insert(self, value: Any) -> BSTNode:
        """Insert ``value`` and return the node that holds it."""
        new_node = BSTNode(value)
        if self.root is None:
            self.root = new_node
            return new_node
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new_node
                    return new_node
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return new_node
                node = node.right

    def height(self, node: Optional[BSTNode]) -> int:
        """Number of nodes on the longest path down from ``node``; 0 for none."""
        if node is None:
            return 0
        return 1 + max(self.height(node.left), self.height(node.right))

    def is_balanced(self, node: Optional[BSTNode]) -> bool:
        """True if the heights of the two subtrees of ``node`` differ by at most one."""
        if node is None:
            return False
        return abs(self.height(node.left) - self.height(node.right)) <= 1

    def max_node(self) -> BSTNode:
        """Node holding the largest value."""
        if self.root is None:
            raise EmptyTreeError("binary search tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node

    def min_node(self) -> BSTNode:
        """Node holding the smallest value."""
        if self.root is None:
            raise EmptyTreeError("binary search tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def inorder(self, node: Optional[BSTNode]) -> Iterator[Any]:
        """Yield the values below ``node`` in symmetric order."""
        if node is None:
            return
        yield from self.inorder(node.left)
        yield node.value
        yield from self.inorder(node.right)

    def preorder(self, node: Optional[BSTNode]) -> Iterator[Any]:
        """Yield the values below ``node``, each before its subtrees."""
        if node is None:
            return
        yield node.value
        yield from self.preorder(node.left)
        yield from self.preorder(node.right)

    def postorder(self, node: Optional[BSTNode]) -> Iterator[Any]:
        """Yield the values below ``node``, each after its subtrees."""
        if node is None:
            return
        yield from self.postorder(node.left)
        yield from self.postorder(node.right)
        yield node.value