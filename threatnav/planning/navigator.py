"""Threat-aware Dijkstra navigation over a bounded grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from threatnav.types import Cell, GridSpec, NavigationMode

from .costs import DISTANCE_SCALE, REPULSION_SCALE
from .distance_table import DistanceTable, build_distance_table
from .reconstruct import reconstruct_path

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class NavigatorConfig:
    """Weights and zone size used for every planning call."""

    distance_scale: int = DISTANCE_SCALE  # Pull toward the target per unit of distance.
    repulsion_scale: int = REPULSION_SCALE  # Evader penalty numerator near threats.
    exclusion_radius: int = 1  # Half-width of the no-go block around each threat.

    def __post_init__(self) -> None:
        if self.distance_scale < 0 or self.repulsion_scale < 0:
            raise ValueError("cost scales must be non-negative")
        if self.exclusion_radius < 0:
            raise ValueError("exclusion_radius must be non-negative")


class Navigator:
    """Compute routes for evaders and pursuers sharing one grid.

    Each call rebuilds the distance table from scratch; nothing is cached
    between calls.
    """

    def __init__(self, config: NavigatorConfig | None = None):
        self.config = config or NavigatorConfig()

    def distance_table(
        self,
        grid: GridSpec,
        origin: Cell,
        target: Cell,
        mode: NavigationMode | str,
        threats: Sequence[Cell] = (),
        agent: Optional[Cell] = None,
    ) -> DistanceTable:
        return build_distance_table(
            grid,
            origin,
            target,
            NavigationMode.parse(mode),
            threats,
            agent,
            exclusion_radius=self.config.exclusion_radius,
            distance_scale=self.config.distance_scale,
            repulsion_scale=self.config.repulsion_scale,
        )

    def plan(
        self,
        grid: GridSpec,
        origin: Cell,
        target: Cell,
        mode: NavigationMode | str,
        threats: Sequence[Cell] = (),
        agent: Optional[Cell] = None,
    ) -> List[Cell]:
        """Return the route from just after ``origin`` through ``target``.

        Raises ``InvalidRequest`` for out-of-grid endpoints and ``Unreachable``
        when exclusion zones cut the target off.
        """
        table = self.distance_table(grid, origin, target, mode, threats, agent)
        path = reconstruct_path(table, origin, target)
        LOGGER.debug("Planned %s -> %s in %s steps", origin, target, len(path))
        return path


def find_path(
    grid: GridSpec,
    origin: Cell,
    target: Cell,
    mode: NavigationMode | str,
    threats: Sequence[Cell] = (),
) -> List[Cell]:
    return Navigator().plan(grid, origin, target, mode, threats)


def next_move(path: Sequence[Cell]) -> Optional[Cell]:
    """First step of a route, or ``None`` when already on target."""
    return path[0] if path else None


__all__ = ["Navigator", "NavigatorConfig", "find_path", "next_move"]
