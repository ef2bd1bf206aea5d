"""Backtrack predecessor links into a forward route."""

from __future__ import annotations

from typing import List

from threatnav.errors import InvalidRequest, Unreachable
from threatnav.types import Cell

from .distance_table import DistanceTable


def reconstruct_path(table: DistanceTable, origin: Cell, target: Cell) -> List[Cell]:
    """Return the cells after ``origin`` up to and including ``target``."""
    if origin == target:
        return []
    if not table.grid.contains(origin):
        raise InvalidRequest(f"Origin {origin} missing from distance table")

    stack: List[Cell] = []
    cur = target
    # A valid chain never revisits a cell, so it is shorter than the grid.
    for _ in range(len(table)):
        prev = table.predecessor(cur)
        if prev is None:
            raise Unreachable(origin, target)
        stack.append(cur)
        if prev == origin:
            stack.reverse()
            return stack
        if prev == cur:
            # Only the search origin points at itself.
            raise Unreachable(origin, target)
        cur = prev
    raise Unreachable(origin, target)


__all__ = ["reconstruct_path"]
