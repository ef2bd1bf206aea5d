"""Core data contracts shared across the navigation stack."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

from threatnav.errors import InvalidRequest

Cell = Tuple[int, int]


class NavigationMode(Enum):
    """Behaviour used when expanding and weighting the grid."""

    PURSUER = "pursuer"  # Ignore threats, head straight for the target.
    EVADER = "evader"  # Skirt threat exclusion zones, pay to get close to threats.

    @classmethod
    def parse(cls, value: "NavigationMode | str") -> "NavigationMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidRequest(f"Unknown navigation mode {value!r}") from None


@dataclass(frozen=True, slots=True)
class GridSpec:
    """Bounded rows x columns grid; cells are ``(row, column)``."""

    rows: int
    columns: int

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise InvalidRequest(
                f"Grid dimensions must be positive, got {self.rows}x{self.columns}"
            )

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def contains(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.columns

    def index(self, cell: Cell) -> int:
        """Flat offset of ``cell`` in row-major order."""
        if not self.contains(cell):
            raise InvalidRequest(f"Cell {cell} is outside {self.rows}x{self.columns} grid")
        return cell[0] * self.columns + cell[1]

    def cell(self, index: int) -> Cell:
        if not 0 <= index < self.size:
            raise InvalidRequest(f"Index {index} is outside {self.rows}x{self.columns} grid")
        return divmod(index, self.columns)

    def cells(self) -> Iterator[Cell]:
        for r in range(self.rows):
            for c in range(self.columns):
                yield (r, c)


__all__ = [
    "Cell",
    "GridSpec",
    "NavigationMode",
]
