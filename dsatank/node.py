"""The cell type shared by every linked list in the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False, repr=False)
class Node(Generic[T]):
    """A list cell holding a value and links to its neighbours.

    Nodes compare by identity, so two cells holding equal data stay distinct.
    """

    data: T
    next: Optional["Node[T]"] = None
    prev: Optional["Node[T]"] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"