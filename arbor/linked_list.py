"""Singly linked list with a sentinel head and position-based access."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _Node:
    """A cell of the list; also serves as a position."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.next: _Node = self


class LinkedList:
    """Circular singly linked list addressed through node positions.

    The end position is the sentinel that follows the last element; inserting
    at a position puts the new element before it.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head = _Node()
        if values is not None:
            for value in values:
                self.insert(value, self.last())

    def is_empty(self) -> bool:
        """True if the list holds no element."""
        return self._head.next is self._head

    def begin(self) -> _Node:
        """Position of the first element, or the end position if empty."""
        return self._head.next

    def last(self) -> _Node:
        """The end position, past the last element, where insertion appends."""
        position = self.begin()
        while not self.is_end(position):
            position = self.next(position)
        return position

    def is_end(self, position: _Node) -> bool:
        """True if ``position`` is the end position."""
        return position is self._head

    def next(self, position: _Node) -> _Node:
        """The position following ``position``."""
        return position.next

    def previous(self, position: _Node) -> _Node:
        """The position before ``position``; the end position precedes the first."""
        prev = self.begin()
        while not self.is_end(prev) and prev.next is not position:
            prev = prev.next
        return prev

    def read(self, position: _Node) -> Any:
        """The value at ``position``."""
        if self.is_end(position):
            raise IndexError("cannot read the end position")
        return position.value

    def write(self, value: Any, position: _Node) -> None:
        """Replace the value at ``position``."""
        if self.is_end(position):
            raise IndexError("cannot write the end position")
        position.value = value

    def insert(self, value: Any, position: _Node) -> _Node:
        """Insert ``value`` before ``position``; return the new position."""
        prev = self.previous(position)
        if prev.next is not position:
            raise ValueError("position does not belong to this list")
        node = _Node(value)
        node.next = position
        prev.next = node
        return node

    def erase(self, position: _Node) -> None:
        """Remove the element at ``position``."""
        if self.is_end(position):
            raise IndexError("cannot erase the end position")
        prev = self.previous(position)
        if prev.next is not position:
            raise ValueError("position does not belong to this list")
        prev.next = position.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        position = self.begin()
        while not self.is_end(position):
            yield position.value
            position = position.next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"