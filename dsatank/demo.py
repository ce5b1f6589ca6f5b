"""A short walk through the linked lists using process records."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from .circular import CircularLinkedList
from .doubly import DoublyLinkedList
from .singly import SinglyLinkedList


@dataclass(frozen=True)
class Process:
    """A process identified by its PID."""

    pid: int

    def __str__(self) -> str:
        return f"{{PID:{self.pid}}}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Exercise each list type and print what happens."""
    parser = argparse.ArgumentParser(description="Demonstrate the linked lists.")
    parser.parse_args(argv)

    sll = SinglyLinkedList([Process(1), Process(2)])
    sll.display()
    print(sll.search(Process(2)))
    sll.prepend(Process(0))
    sll.append(Process(3))
    sll.insert_after(Process(0), Process(4))
    sll.insert_before(Process(3), Process(10))
    print(sll.delete_head())
    print(sll.delete_tail())
    print(sll.delete(Process(2)))
    sll.display()

    cll: CircularLinkedList[Process] = CircularLinkedList()
    cll.prepend(Process(0))
    cll.append(Process(1))
    cll.prepend(Process(-1))
    cll.append(Process(2))
    cll.display()
    print(cll.delete(Process(2)))

    dll: DoublyLinkedList[Process] = DoublyLinkedList()
    dll.prepend(Process(0))
    dll.display()
    return 0