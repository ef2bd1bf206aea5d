"""Binary-heap frontier with per-cell removal (decrease-key by reinsertion)."""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, Tuple

from threatnav.types import Cell


class Frontier:
    """Min-priority queue of ``(cell, cost)`` with at most one live entry per cell.

    Removed entries stay in the heap as tombstones and are skipped on pop.
    Equal costs pop in insertion order.
    """

    def __init__(self) -> None:
        self._heap: List[List[object]] = []
        self._entries: Dict[Cell, List[object]] = {}
        self._counter = itertools.count()

    def push(self, cell: Cell, cost: int) -> None:
        if cell in self._entries:
            self.remove(cell)
        entry: List[object] = [cost, next(self._counter), cell, True]
        self._entries[cell] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, cell: Cell) -> None:
        entry = self._entries.pop(cell, None)
        if entry is not None:
            entry[3] = False

    def pop_min(self) -> Optional[Tuple[Cell, int]]:
        while self._heap:
            cost, _, cell, live = heapq.heappop(self._heap)
            if live:
                del self._entries[cell]
                return cell, cost
        return None

    def cost_of(self, cell: Cell) -> Optional[int]:
        entry = self._entries.get(cell)
        return None if entry is None else entry[0]

    def __contains__(self, cell: object) -> bool:
        return cell in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


__all__ = ["Frontier"]
