"""Threat-aware grid navigation for evaders and pursuers."""

from threatnav.errors import InvalidRequest, NavigationError, Unreachable
from threatnav.planning import (
    DistanceTable,
    Navigator,
    NavigatorConfig,
    RoundPlan,
    find_path,
    next_move,
    plan_round,
)
from threatnav.types import Cell, GridSpec, NavigationMode

__all__ = [
    "Cell",
    "DistanceTable",
    "GridSpec",
    "InvalidRequest",
    "NavigationError",
    "NavigationMode",
    "Navigator",
    "NavigatorConfig",
    "RoundPlan",
    "Unreachable",
    "find_path",
    "next_move",
    "plan_round",
]
