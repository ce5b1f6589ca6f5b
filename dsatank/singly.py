"""A singly linked list: a linear chain of nodes linked in one direction."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TextIO, Tuple, TypeVar

from .node import Node

T = TypeVar("T")

_Pair = Tuple[Optional[Node[T]], Optional[Node[T]]]


class _LinkedList(Generic[T]):
    """Traversal, lookup and rendering shared by every list in the package.

    Walking stops at the end of a chain or when it comes back round to the
    head, so linear and circular lists share the same traversal.
    """

    _PREFIX = "Start -> "
    _ARROW = " -> "
    _SUFFIX = ""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        self.size = 0
        for value in values:
            self.append(value)

    def append(self, value: T) -> None:
        raise NotImplementedError

    def _nodes(self) -> Iterator[Node[T]]:
        curr = self.head
        while curr is not None:
            yield curr
            curr = curr.next
            if curr is self.head:
                return

    def _pairs(self) -> Iterator[_Pair]:
        """Yield (previous, node) pairs; the head's previous is None."""
        prev: Optional[Node[T]] = None
        for node in self._nodes():
            yield prev, node
            prev = node

    def _find(self, value: T) -> Optional[Node[T]]:
        return next((node for node in self._nodes() if node.data == value), None)

    def _locate(self, value: T) -> _Pair:
        return next(
            ((prev, node) for prev, node in self._pairs() if node.data == value),
            (None, None),
        )

    def _last_pair(self) -> _Pair:
        last: _Pair = (None, None)
        for last in self._pairs():
            pass
        return last

    def _tail(self) -> Optional[Node[T]]:
        return self._last_pair()[1]

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self.size

    def render(self) -> str:
        """Return the list as a single line of text."""
        if self.head is None:
            return "List is empty"
        body = "".join(f"{data}{self._ARROW}" for data in self)
        return f"{self._PREFIX}{body}{self._SUFFIX}"

    def display(self, file: Optional[TextIO] = None) -> None:
        """Print the rendered list."""
        print(self.render(), file=file)


class SinglyLinkedList(_LinkedList[T]):
    """A chain of nodes, each pointing to the next, ending in None."""

    _SUFFIX = "nil"

    def __init__(self, values: Iterable[T] = ()) -> None:
        super().__init__(values)

    def __iter__(self) -> Iterator[T]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()

    @property
    def count(self) -> int:
        """Number of nodes in the list."""
        return self.size

    def render(self) -> str:
        """Return the list as a single line of text."""
        return super().render()

    def display(self, file: Optional[TextIO] = None) -> None:
        """Print the rendered list."""
        super().display(file)

    def search(self, value: T) -> Optional[Node[T]]:
        """Return the first node whose data equals ``value``, or None."""
        return self._find(value)

    def prepend(self, value: T) -> None:
        """Put a new node holding ``value`` at the front."""
        self.head = Node(value, next=self.head)
        self.size += 1

    def append(self, value: T) -> None:
        """Put a new node holding ``value`` at the end."""
        node = Node(value)
        tail = self._tail()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        self.size += 1

    def insert_after(self, target: T, value: T) -> bool:
        """Insert ``value`` after the first node holding ``target``."""
        found = self._find(target)
        if found is None:
            return False
        found.next = Node(value, next=found.next)
        self.size += 1
        return True

    def insert_before(self, target: T, value: T) -> bool:
        """Insert ``value`` before the first node holding ``target``."""
        prev, found = self._locate(target)
        if found is None:
            return False
        node = Node(value, next=found)
        if prev is None:
            self.head = node
        else:
            prev.next = node
        self.size += 1
        return True

    def _unlink(self, prev: Optional[Node[T]], node: Node[T]) -> Node[T]:
        if prev is None:
            self.head = node.next
        else:
            prev.next = node.next
        self.size -= 1
        return node

    def delete_head(self) -> Optional[Node[T]]:
        """Remove and return the first node, or None if the list is empty."""
        if self.head is None:
            return None
        return self._unlink(None, self.head)

    def delete_tail(self) -> Optional[Node[T]]:
        """Remove and return the last node, or None if the list is empty."""
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