"""Edge weights: a pull toward the target plus, for evaders, a push from threats."""

from __future__ import annotations

import math
from typing import Sequence

from threatnav.types import Cell, NavigationMode

DISTANCE_SCALE = 1000
REPULSION_SCALE = 10000


def _round_half_up(value: float) -> int:
    # Inputs are never negative here.
    return int(math.floor(value + 0.5))


def euclidean(a: Cell, b: Cell) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def edge_cost(
    neighbor: Cell,
    target: Cell,
    mode: NavigationMode,
    threats: Sequence[Cell] = (),
    *,
    distance_scale: int = DISTANCE_SCALE,
    repulsion_scale: int = REPULSION_SCALE,
) -> int:
    """Cost of stepping onto ``neighbor``.

    Depends only on where the neighbour is, never on how it was reached, so
    the same call always returns the same weight within one planning run.
    """
    cost = _round_half_up(distance_scale * euclidean(neighbor, target))
    if mode is NavigationMode.EVADER and threats:
        d_min = min(euclidean(neighbor, threat) for threat in threats)
        if d_min == 0:
            d_min = 1.0
        cost += _round_half_up(repulsion_scale / d_min)
    return cost


__all__ = ["DISTANCE_SCALE", "REPULSION_SCALE", "edge_cost", "euclidean"]
