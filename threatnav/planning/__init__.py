"""Planning exports."""

from .adjacency import in_exclusion_zone, neighbors
from .costs import edge_cost, euclidean
from .distance_table import DistanceRecord, DistanceTable, build_distance_table
from .frontier import Frontier
from .navigator import Navigator, NavigatorConfig, find_path, next_move
from .reconstruct import reconstruct_path
from .rounds import RoundPlan, plan_round

__all__ = [
    "DistanceRecord",
    "DistanceTable",
    "Frontier",
    "Navigator",
    "NavigatorConfig",
    "RoundPlan",
    "build_distance_table",
    "edge_cost",
    "euclidean",
    "find_path",
    "in_exclusion_zone",
    "neighbors",
    "next_move",
    "plan_round",
    "reconstruct_path",
]
