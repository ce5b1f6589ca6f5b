"""A doubly linked list: a linear chain of nodes linked in both directions."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO, TypeVar

from .node import Node
from .singly import _LinkedList

T = TypeVar("T")


class DoublyLinkedList(_LinkedList[T]):
    """A chain of nodes, each linked to both its predecessor and successor."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        super().__init__(values)

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()

    def render(self) -> str:
        """Return the list as a single line of text."""
        return super().render()

    def display(self, file: Optional[TextIO] = None) -> None:
        """Print the rendered list."""
        super().display(file)

    def _link(
        self, value: T, prev: Optional[Node[T]], following: Optional[Node[T]]
    ) -> None:
        node = Node(value, next=following, prev=prev)
        if prev is None:
            self.head = node
        else:
            prev.next = node
        if following is not None:
            following.prev = node
        self.size += 1

    def prepend(self, value: T) -> None:
        """Put a new node holding ``value`` at the front."""
        self._link(value, None, self.head)

    def append(self, value: T) -> None:
        """Put a new node holding ``value`` at the end."""
        self._link(value, self._tail(), None)

    def insert_after(self, target: T, value: T) -> bool:
        """Insert ``value`` after the first node holding ``target``."""
        found = self._find(target)
        if found is None:
            return False
        self._link(value, found, found.next)
        return True

    def insert_before(self, target: T, value: T) -> bool:
        """Insert ``value`` before the first node holding ``target``."""
        found = self._find(target)
        if found is None:
            return False
        self._link(value, found.prev, found)
        return True

    def _unlink(self, node: Optional[Node[T]]) -> Optional[Node[T]]:
        if node is None:
            return None
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.next = None
        node.prev = None
        self.size -= 1
        return node

    def delete_head(self) -> Optional[Node[T]]:
        """Remove and return the first node, or None if the list is empty."""
        return self._unlink(self.head)

    def delete_tail(self) -> Optional[Node[T]]:
        """Remove and return the last node, or None if the list is empty."""
        return self._unlink(self._tail())

    def delete(self, target: T) -> Optional[Node[T]]:
        """Remove and return the first node holding ``target``, or None."""
        return self._unlink(self._find(target))