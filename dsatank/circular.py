"""A circular singly linked list whose last node points back to the head."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO, TypeVar

from .node import Node
from .singly import _LinkedList

T = TypeVar("T")


class CircularLinkedList(_LinkedList[T]):
    """A singly linked ring of nodes; the last node links to the head."""

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

    def _insert(self, value: T) -> Node[T]:
        """Link a new node between the tail and the head and return it."""
        node = Node(value)
        tail = self._tail()
        if tail is None:
            node.next = node
            self.head = node
        else:
            node.next = self.head
            tail.next = node
        self.size += 1
        return node

    def prepend(self, value: T) -> None:
        """Make a new node holding ``value`` the head."""
        self.head = self._insert(value)

    def append(self, value: T) -> None:
        """Add a new node holding ``value`` just before the head."""
        self._insert(value)

    def _unlink(self, prev: Optional[Node[T]], node: Node[T]) -> Node[T]:
        if node.next is node:
            self.head = None
        else:
            if prev is None:
                prev = self._tail()
            prev.next = node.next
            if node is self.head:
                self.head = node.next
        self.size -= 1
        return node

    def delete_head(self) -> Optional[Node[T]]:
        """Remove and return the head node, or None if the ring is empty."""
        if self.head is None:
            return None
        return self._unlink(None, self.head)

    def delete_last(self) -> Optional[Node[T]]:
        """Remove and return the last node, or None if the ring is empty."""
        prev, tail = self._last_pair()
        if tail is None:
            return None
        return self._unlink(prev, tail)

    def delete(self, target: T) -> Optional[Node[T]]:
        """Remove and return the first node holding ``target``, or None."""
        prev, found = self._locate(target)
        if found is None:
            return None
        return self._unlink(prev, found)