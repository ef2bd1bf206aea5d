"""Failures reported by the navigation engine."""

from __future__ import annotations

from typing import Optional, Tuple


class NavigationError(Exception):
    """Base class for every engine failure."""


class InvalidRequest(NavigationError, ValueError):
    """Inputs outside the grid, or a cell missing from a distance table."""


class Unreachable(NavigationError):
    """No route exists from origin to target under the current exclusion rules."""

    def __init__(
        self,
        origin: Optional[Tuple[int, int]] = None,
        target: Optional[Tuple[int, int]] = None,
        message: Optional[str] = None,
    ):
        self.origin = origin
        self.target = target
        super().__init__(message or f"No route from {origin} to {target}")


__all__ = ["NavigationError", "InvalidRequest", "Unreachable"]
