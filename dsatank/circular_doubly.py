"""A circular doubly linked list: a ring of nodes linked both ways."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO, TypeVar

from .node import Node
from .singly import _LinkedList

T = TypeVar("T")


class CircularDoublyLinkedList(_LinkedList[T]):
    """A ring of nodes; the head's ``prev`` is the tail and the tail's ``next`` is the head."""

    _PREFIX = ""
    _ARROW = " <-> "
    _SUFFIX = "(Head)"

    def __init__(self, values: Iterable[T] = ()) -> None:
        super().__init__(values)

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()

    def render(self) -> str:
        """Return the ring as a single line of text."""
        return super().render()

    def display(self, file: Optional[TextIO] = None) -> None:
        """Print the rendered ring."""
        super().display(file)

    def _insert_before(self, value: T, anchor: Optional[Node[T]]) -> Node[T]:
        """Link a new node before ``anchor``, or start the ring if it is None."""
        node = Node(value)
        if anchor is None:
            node.next = node
            node.prev = node
            self.head = node
        else:
            node.next = anchor
            node.prev = anchor.prev
            anchor.prev.next = node
            anchor.prev = node
        self.size += 1
        return node

    def prepend(self, value: T) -> None:
        """Make a new node holding ``value`` the head."""
        self.head = self._insert_before(value, self.head)

    def append(self, value: T) -> None:
        """Add a new node holding ``value`` just before the head."""
        self._insert_before(value, self.head)

    def insert_before(self, value: T, target: T) -> bool:
        """Insert ``value`` before the first node holding ``target``.

        Inserting before the head makes the new node the head.
        """
        found = self._find(target)
        if found is None:
            return False
        node = self._insert_before(value, found)
        if found is self.head:
            self.head = node
        return True

    def insert_after(self, value: T, target: T) -> bool:
        """Insert ``value`` after the first node holding ``target``."""
        found = self._find(target)
        if found is None:
            return False
        self._insert_before(value, found.next)
        return True

    def _unlink(self, node: Optional[Node[T]]) -> Optional[Node[T]]:
        if node is None:
            return None
        if node.next is node:
            self.head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self.head:
                self.head = node.next
        node.next = None
        node.prev = None
        self.size -= 1
        return node

    def delete_head(self) -> Optional[Node[T]]:
        """Remove and return the head node, or None if the ring is empty."""
        return self._unlink(self.head)

    def delete_tail(self) -> Optional[Node[T]]:
        """Remove and return the last node, or None if the ring is empty."""
        return self._unlink(None if self.head is None else self.head.prev)

    def delete(self, target: T) -> Optional[Node[T]]:
        """Remove and return the first node holding ``target``, or None."""
        return self._unlink(self._find(target))