"""Entry-point for planning a single route from a YAML scenario."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

import yaml

from threatnav.errors import NavigationError
from threatnav.planning import Navigator, NavigatorConfig
from threatnav.types import Cell, GridSpec, NavigationMode

LOGGER = logging.getLogger("threatnav")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Threat-aware grid navigation")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/default.yaml"),
        help="Path to YAML scenario",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        help="Override navigation mode from config (evader|pursuer)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Python logging level",
    )
    return parser.parse_args(argv)


def load_config(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _cell(value: Any, name: str) -> Cell:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be a [row, column] pair, got {value!r}")
    return (int(value[0]), int(value[1]))


def build_grid(cfg: dict[str, Any]) -> GridSpec:
    grid_cfg = cfg.get("grid", {})
    return GridSpec(rows=int(grid_cfg.get("rows", 24)), columns=int(grid_cfg.get("columns", 12)))


def build_navigator(cfg: dict[str, Any]) -> Navigator:
    nav_cfg = cfg.get("navigator", {})
    config = NavigatorConfig(
        distance_scale=int(nav_cfg.get("distance_scale", 1000)),
        repulsion_scale=int(nav_cfg.get("repulsion_scale", 10000)),
        exclusion_radius=int(nav_cfg.get("exclusion_radius", 1)),
    )
    return Navigator(config)


def format_path(path: Sequence[Cell]) -> str:
    return "\n".join(f"{r},{c}" for r, c in path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    cfg = load_config(args.config)
    try:
        grid = build_grid(cfg)
        navigator = build_navigator(cfg)
        mode = NavigationMode.parse(args.mode or cfg.get("mode", "evader"))
        origin = _cell(cfg.get("origin"), "origin")
        target = _cell(cfg.get("target"), "target")
        threats: List[Cell] = [_cell(t, "threat") for t in cfg.get("threats", []) or []]
        path = navigator.plan(grid, origin, target, mode, threats)
    except (NavigationError, ValueError) as exc:
        LOGGER.error("Planning failed: %s", exc)
        return 2
    LOGGER.info("Route %s -> %s (%s, %s steps)", origin, target, mode.value, len(path))
    output = format_path(path)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
