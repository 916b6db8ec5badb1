from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from fountain.components.level_layout import ENTRANCE_COORDINATE, Coordinate, LevelLayout
from fountain.components.room import Room, RoomKind


class OutOfBoundsError(IndexError):
    """Raised when a board cell outside the grid is accessed directly."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"cell ({row}, {col}) is outside a {rows}x{cols} board")
        self.row = row
        self.col = col


@dataclass(slots=True)
class Board:
    """Grid of rooms for the current level.

    rows/cols never change after creation. The only permitted mutations are
    demoting a hazard to an empty room and activating the objective room.
    """
    rows: int
    cols: int
    rooms: List[List[Room]] = field(default_factory=list)
    objective_coordinate: Coordinate = (0, 0)

    @classmethod
    def create(cls, layout: LevelLayout) -> "Board":
        rooms = [[Room(RoomKind.EMPTY) for _ in range(layout.cols)] for _ in range(layout.rows)]
        entrance_row, entrance_col = ENTRANCE_COORDINATE
        rooms[entrance_row][entrance_col] = Room(RoomKind.ENTRANCE)
        objective_row, objective_col = layout.objective
        rooms[objective_row][objective_col] = Room(RoomKind.OBJECTIVE)
        for placement in layout.hazards:
            row, col = placement.coordinate
            rooms[row][col] = Room(placement.kind)
        return cls(rows=layout.rows, cols=layout.cols, rooms=rooms, objective_coordinate=layout.objective)

    @property
    def entrance(self) -> Coordinate:
        return ENTRANCE_COORDINATE

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Room:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)
        return self.rooms[row][col]

    def set(self, row: int, col: int, room: Room) -> None:
        current = self.get(row, col)
        if current.kind in (RoomKind.ENTRANCE, RoomKind.OBJECTIVE):
            raise ValueError(f"cannot replace the {current.kind.name.lower()} room at ({row}, {col})")
        if room.kind in (RoomKind.ENTRANCE, RoomKind.OBJECTIVE):
            raise ValueError(f"cannot place a second {room.kind.name.lower()} room")
        self.rooms[row][col] = room

    def objective(self) -> Room:
        return self.get(*self.objective_coordinate)

    def find(self, kind: RoomKind) -> Iterator[Coordinate]:
        for row, line in enumerate(self.rooms):
            for col, room in enumerate(line):
                if room.kind is kind:
                    yield row, col
