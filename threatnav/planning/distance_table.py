"""Dense per-cell distance/predecessor table and the Dijkstra pass that fills it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from threatnav.errors import InvalidRequest
from threatnav.types import Cell, GridSpec, NavigationMode

from .adjacency import neighbors
from .costs import DISTANCE_SCALE, REPULSION_SCALE, edge_cost
from .frontier import Frontier

LOGGER = logging.getLogger(__name__)

_UNVISITED: int = -1
_NO_PREDECESSOR: int = -1


@dataclass(frozen=True, slots=True)
class DistanceRecord:
    cost: Optional[int] = None  # None while unvisited.
    predecessor: Optional[Cell] = None


class DistanceTable:
    """Best-known cost and predecessor for every cell of a grid.

    Storage is three flat numpy arrays indexed by ``row * columns + column``.
    """

    def __init__(self, grid: GridSpec):
        self.grid = grid
        self._cost = np.full(grid.size, _UNVISITED, dtype=np.int64)
        self._pred = np.full(grid.size, _NO_PREDECESSOR, dtype=np.int64)
        self._settled = np.zeros(grid.size, dtype=bool)

    # ------------------------------------------------------------------ lookups
    def _index(self, cell: Cell) -> int:
        if not self.grid.contains(cell):
            raise InvalidRequest(f"Cell {cell} missing from distance table")
        return self.grid.index(cell)

    def cost(self, cell: Cell) -> Optional[int]:
        value = int(self._cost[self._index(cell)])
        return None if value == _UNVISITED else value

    def predecessor(self, cell: Cell) -> Optional[Cell]:
        value = int(self._pred[self._index(cell)])
        return None if value == _NO_PREDECESSOR else self.grid.cell(value)

    def record(self, cell: Cell) -> DistanceRecord:
        return DistanceRecord(cost=self.cost(cell), predecessor=self.predecessor(cell))

    def is_settled(self, cell: Cell) -> bool:
        return bool(self._settled[self._index(cell)])

    def reachable(self) -> List[Cell]:
        return [self.grid.cell(int(i)) for i in np.flatnonzero(self._cost != _UNVISITED)]

    def __len__(self) -> int:
        return self.grid.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceTable):
            return NotImplemented
        return (
            self.grid == other.grid
            and np.array_equal(self._cost, other._cost)
            and np.array_equal(self._pred, other._pred)
        )

    # ---------------------------------------------------------------- mutations
    def seed(self, origin: Cell) -> None:
        idx = self._index(origin)
        self._cost[idx] = 0
        self._pred[idx] = idx

    def relax(self, cell: Cell, cost: int, predecessor: Cell) -> bool:
        """Record ``cost`` via ``predecessor`` if it beats what is stored."""
        idx = self._index(cell)
        current = int(self._cost[idx])
        if current != _UNVISITED and cost >= current:
            return False
        self._cost[idx] = cost
        self._pred[idx] = self._index(predecessor)
        return True

    def settle(self, cell: Cell) -> None:
        self._settled[self._index(cell)] = True


def build_distance_table(
    grid: GridSpec,
    origin: Cell,
    target: Cell,
    mode: NavigationMode,
    threats: Sequence[Cell] = (),
    agent: Optional[Cell] = None,
    *,
    exclusion_radius: int = 1,
    distance_scale: int = DISTANCE_SCALE,
    repulsion_scale: int = REPULSION_SCALE,
) -> DistanceTable:
    """Run Dijkstra from ``origin`` over the whole grid.

    The table is always completed; reaching ``target`` does not stop the
    search. ``agent`` is the evader's position for the exclusion escape hatch
    and defaults to ``origin``.
    """
    if not grid.contains(origin):
        raise InvalidRequest(f"Origin {origin} is outside {grid.rows}x{grid.columns} grid")
    if not grid.contains(target):
        raise InvalidRequest(f"Target {target} is outside {grid.rows}x{grid.columns} grid")
    agent = origin if agent is None else agent
    threats = tuple(threats)

    table = DistanceTable(grid)
    table.seed(origin)
    frontier = Frontier()
    frontier.push(origin, 0)
    settled = 0

    while frontier:
        popped = frontier.pop_min()
        if popped is None:
            break
        current, current_cost = popped
        table.settle(current)
        settled += 1
        for neighbor in neighbors(grid, current, mode, threats, target, agent, exclusion_radius):
            candidate = current_cost + edge_cost(
                neighbor,
                target,
                mode,
                threats,
                distance_scale=distance_scale,
                repulsion_scale=repulsion_scale,
            )
            if table.relax(neighbor, candidate, current):
                frontier.push(neighbor, candidate)

    LOGGER.debug(
        "Settled %s/%s cells from %s (mode=%s, threats=%s)",
        settled,
        grid.size,
        origin,
        mode.value,
        len(threats),
    )
    return table


__all__ = ["DistanceRecord", "DistanceTable", "build_distance_table"]
