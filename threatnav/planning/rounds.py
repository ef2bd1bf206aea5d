"""One simulation step worth of routes: the evader plus every pursuer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from threatnav.errors import Unreachable
from threatnav.types import Cell, GridSpec, NavigationMode

from .navigator import Navigator, next_move

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RoundPlan:
    """Routes for a single tick. ``None`` means the agent has no route."""

    evader: Cell
    pursuers: List[Cell]
    evader_path: Optional[List[Cell]] = None
    pursuer_paths: List[Optional[List[Cell]]] = field(default_factory=list)

    def next_positions(self) -> tuple[Cell, List[Cell]]:
        """Where each agent stands after taking its first step.

        Agents without a route, or already on their target, hold position.
        """
        evader_next = next_move(self.evader_path or []) or self.evader
        pursuers_next = [
            next_move(path or []) or start
            for start, path in zip(self.pursuers, self.pursuer_paths)
        ]
        return evader_next, pursuers_next


def plan_round(
    navigator: Navigator,
    grid: GridSpec,
    evader: Cell,
    target: Cell,
    pursuers: Sequence[Cell],
) -> RoundPlan:
    """Plan the evader toward ``target`` and each pursuer toward the evader.

    The evader treats every pursuer as a threat. ``Unreachable`` for any agent
    is recorded as ``None``; ``InvalidRequest`` propagates.
    """
    pursuers = list(pursuers)
    plan = RoundPlan(evader=evader, pursuers=pursuers)
    try:
        plan.evader_path = navigator.plan(
            grid, evader, target, NavigationMode.EVADER, threats=pursuers, agent=evader
        )
    except Unreachable as exc:
        LOGGER.warning("Evader holds position: %s", exc)

    for idx, pursuer in enumerate(pursuers):
        try:
            path: Optional[List[Cell]] = navigator.plan(
                grid, pursuer, evader, NavigationMode.PURSUER
            )
        except Unreachable as exc:
            LOGGER.warning("Pursuer %s holds position: %s", idx, exc)
            path = None
        plan.pursuer_paths.append(path)
    return plan


__all__ = ["RoundPlan", "plan_round"]
