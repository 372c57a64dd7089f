"""
Solution optimizer.

A wall follower backs out of every dead end it explores, so the raw walk
visits some cells more than once. Everything between the first and the last
visit of a cell is a detour; cutting it leaves the route the walk implies.
"""

from typing import Hashable, Sequence, TypeVar

T = TypeVar("T", bound=Hashable)


def find_loops(path: Sequence[T]) -> dict[T, tuple[int, int]]:
    """
    Map every repeated position to its (first, last) index in `path`.

    Positions visited once are left out.
    """
    first: dict[T, int] = {}
    loops: dict[T, tuple[int, int]] = {}
    for index, position in enumerate(path):
        if position in first:
            loops[position] = (first[position], index)
        else:
            first[position] = index
    return loops


def optimize_path(path: Sequence[T]) -> list[T]:
    """
    Drop the loops from a walk.

    A cursor moves forward through the walk. The position under the cursor is
    kept and the cursor jumps past the last visit of that position, so the
    whole loop (and any loop nested in it) is cut at once. The cursor never
    moves back, so a cut index is never re-inserted.

    The result starts and ends where `path` does, holds each position once,
    and is a subsequence of `path`. The input is not modified.
    """
    last = {position: index for index, position in enumerate(path)}

    optimized: list[T] = []
    cursor = 0
    while cursor < len(path):
        position = path[cursor]
        optimized.append(position)
        cursor = last[position] + 1

    return optimized
