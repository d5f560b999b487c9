"""Ordered n-ary tree stored in a fixed-size table of records with child lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

MAX_NODES = 100


@dataclass
class _Record:
    value: Any = None
    used: bool = False
    children: list[int] = field(default_factory=list)


class TreeList:
    """N-ary tree whose nodes are integer slots in a table of limited capacity."""

    def __init__(self, capacity: int = MAX_NODES) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._records = [_Record() for _ in range(capacity)]
        self._root: Optional[int] = None

    @property
    def root(self) -> int:
        """The root node."""
        if self._root is None:
            raise LookupError("tree is empty")
        return self._root

    def _record(self, node: int) -> _Record:
        if not 0 <= node < len(self._records) or not self._records[node].used:
            raise IndexError(f"no node {node} in tree")
        return self._records[node]

    def _allocate(self, value: Any) -> int:
        slot = next(
            (index for index, record in enumerate(self._records) if not record.used),
            None,
        )
        if slot is None:
            raise OverflowError("tree is full")
        record = self._records[slot]
        record.used = True
        record.value = value
        record.children = []
        return slot

    def _siblings(self, node: int) -> list[int]:
        return self._records[self.parent(node)].children

    def is_empty(self) -> bool:
        """True if the tree has no root."""
        return self._root is None

    def insert_root(self) -> int:
        """Create the root if the tree is empty; return the root node."""
        if self._root is None:
            record = self._records[0]
            record.used = True
            record.value = None
            record.children = []
            self._root = 0
        return self._root

    def parent(self, node: int) -> int:
        """The node whose child list holds ``node``."""
        self._record(node)
        for index, record in enumerate(self._records):
            if node in record.children:
                return index
        raise LookupError(f"node {node} has no parent")

    def is_leaf(self, node: int) -> bool:
        """True if ``node`` has no children."""
        return not self._record(node).children

    def first_child(self, node: int) -> int:
        """The leftmost child of ``node``."""
        record = self._record(node)
        if not record.children:
            raise LookupError(f"node {node} is a leaf")
        return record.children[0]

    def is_last_sibling(self, node: int) -> bool:
        """True if no sibling follows ``node``."""
        self._record(node)
        if node == self._root:
            return True
        return self._siblings(node)[-1] == node

    def next_sibling(self, node: int) -> int:
        """The sibling right after ``node``."""
        siblings = self._siblings(node)
        position = siblings.index(node)
        if position == len(siblings) - 1:
            raise LookupError(f"node {node} is the last sibling")
        return siblings[position + 1]

    def insert_first_child(self, node: int, value: Any) -> int:
        """Add a new leftmost child of ``node`` holding ``value``; return it."""
        record = self._record(node)
        child = self._allocate(value)
        record.children.insert(0, child)
        return child

    def insert_sibling(self, node: int, value: Any) -> int:
        """Add a new sibling right after ``node`` holding ``value``; return it."""
        siblings = self._siblings(node)
        sibling = self._allocate(value)
        siblings.insert(siblings.index(node) + 1, sibling)
        return sibling

    def _release(self, node: int) -> None:
        record = self._records[node]
        for child in record.children:
            self._release(child)
        record.children = []
        record.used = False
        record.value = None

    def remove_subtree(self, node: int) -> None:
        """Remove ``node`` and all its descendants, freeing their slots."""
        self._record(node)
        if node == self._root:
            self._root = None
        else:
            self._siblings(node).remove(node)
        self._release(node)

    def write_node(self, node: int, value: Any) -> None:
        """Store ``value`` in ``node``."""
        self._record(node).value = value

    def read_node(self, node: int) -> Any:
        """The value stored in ``node``."""
        return self._record(node).value

    def render(self) -> str:
        """Text listing each node in slot order followed by its children."""
        parts = ["\n{"]
        for record in self._records:
            if not record.used:
                continue
            parts.append(f"\n  {record.value}:  ")
            parts.extend(f"{self._records[child].value} " for child in record.children)
        parts.append("\n}\n")
        return "".join(parts)