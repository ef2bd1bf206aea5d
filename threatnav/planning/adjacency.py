"""Moore-neighbourhood expansion with threat exclusion zones."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from threatnav.types import Cell, GridSpec, NavigationMode

# Left column top-to-bottom, centre column, right column top-to-bottom.
_DELTAS: tuple[Cell, ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


def in_exclusion_zone(cell: Cell, threats: Iterable[Cell], radius: int = 1) -> bool:
    """True when ``cell`` sits in the (2r+1)x(2r+1) block around any threat."""
    r, c = cell
    for tr, tc in threats:
        if abs(r - tr) <= radius and abs(c - tc) <= radius:
            return True
    return False


def neighbors(
    grid: GridSpec,
    cell: Cell,
    mode: NavigationMode,
    threats: Sequence[Cell] = (),
    target: Optional[Cell] = None,
    agent: Optional[Cell] = None,
    radius: int = 1,
) -> List[Cell]:
    """Return the in-bounds king-move neighbours of ``cell``.

    In evader mode a neighbour inside a threat's exclusion zone is dropped
    unless it is the target or the evader's own cell, so a threat standing
    next to either never disconnects them outright.
    """
    r, c = cell
    out: List[Cell] = []
    for dr, dc in _DELTAS:
        candidate = (r + dr, c + dc)
        if not grid.contains(candidate):
            continue
        if (
            mode is NavigationMode.EVADER
            and candidate != target
            and candidate != agent
            and in_exclusion_zone(candidate, threats, radius)
        ):
            continue
        out.append(candidate)
    return out


__all__ = ["in_exclusion_zone", "neighbors"]
