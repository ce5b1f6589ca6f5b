"""Linked list variants and a recursive Tower of Hanoi solver."""

__version__ = "0.1.0"

__all__ = ["circular", "circular_doubly", "demo", "doubly", "hanoi", "node", "singly"]