"""Tower of Hanoi solved recursively on three list-backed pegs."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def hanoi(n: int, src: List[T], dst: List[T], tmp: List[T]) -> int:
    """Move the top ``n`` disks from ``src`` to ``dst`` using ``tmp``.

    The end of each list is the top of its peg. The pegs are changed in
    place and the number of single-disk moves, 2**n - 1, is returned.
    """
    if n < 1:
        raise ValueError("at least one disk must be moved")
    if n > len(src):
        raise ValueError(f"cannot move {n} disks from a peg holding {len(src)}")
    if n == 1:
        dst.append(src.pop())
        return 1
    moves = hanoi(n - 1, src, tmp, dst)
    dst.append(src.pop())
    moves += 1
    moves += hanoi(n - 1, tmp, dst, src)
    return moves


def _format_peg(peg: Sequence[str]) -> str:
    return "[" + " ".join(peg) + "]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the puzzle for a stack of disks and print every move."""
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument(
        "disks", nargs="?", type=int, default=4, help="number of disks (default 4)"
    )
    args = parser.parse_args(argv)
    if args.disks < 1:
        parser.error("the number of disks must be at least 1")

    src = [str(disk) for disk in range(args.disks - 1, -1, -1)]
    dst: List[str] = []
    tmp: List[str] = []

    moves = hanoi(len(src), src, dst, tmp)
    for _ in range(moves):
        print("Move disk from src to dst")

    print(f"Final State - Source: {_format_peg(src)}")
    print(f"Final State - Destination: {_format_peg(dst)}")
    print(f"Final State - Temporary: {_format_peg(tmp)}")
    return 0