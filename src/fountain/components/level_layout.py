"""Static level layouts: board size plus fixed objective and hazard cells."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from fountain.components.room import HAZARD_KINDS, RoomKind

Coordinate = Tuple[int, int]

ENTRANCE_COORDINATE: Coordinate = (0, 0)


class LevelSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True, slots=True)
class HazardPlacement:
    kind: RoomKind
    coordinate: Coordinate


@dataclass(frozen=True)
class LevelLayout:
    """Read-only description of one level.

    Construction validates the board invariants: the objective and every
    hazard are inside the grid, nothing sits on the entrance, and no two
    placements share a cell.
    """
    size: LevelSize
    rows: int
    cols: int
    objective: Coordinate
    hazards: Tuple[HazardPlacement, ...] = ()

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"{self.size.value}: board must have at least one row and column")
        occupied: set[Coordinate] = {ENTRANCE_COORDINATE}
        self._claim(occupied, self.objective, "objective")
        for placement in self.hazards:
            if placement.kind not in HAZARD_KINDS:
                raise ValueError(f"{self.size.value}: {placement.kind.name} is not a hazard")
            self._claim(occupied, placement.coordinate, placement.kind.name.lower())

    def _claim(self, occupied: set[Coordinate], coordinate: Coordinate, label: str) -> None:
        row, col = coordinate
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise ValueError(f"{self.size.value}: {label} at {coordinate} is outside the board")
        if coordinate in occupied:
            raise ValueError(f"{self.size.value}: {label} at {coordinate} overlaps another room")
        occupied.add(coordinate)

    def hazards_of(self, kind: RoomKind) -> list[Coordinate]:
        return [p.coordinate for p in self.hazards if p.kind is kind]
