from __future__ import annotations

from typing import Iterable, Mapping

from fountain.components.level_layout import HazardPlacement, LevelLayout, LevelSize
from fountain.components.room import RoomKind


def _hazards(kind: RoomKind, *coordinates: tuple[int, int]) -> tuple[HazardPlacement, ...]:
    return tuple(HazardPlacement(kind=kind, coordinate=coordinate) for coordinate in coordinates)


_LEVEL_LAYOUTS: Mapping[LevelSize, LevelLayout] = {
    LevelSize.SMALL: LevelLayout(
        size=LevelSize.SMALL,
        rows=4,
        cols=4,
        objective=(0, 2),
        hazards=(
            *_hazards(RoomKind.PIT, (0, 1)),
            *_hazards(RoomKind.WHIRLWIND, (3, 2)),
            *_hazards(RoomKind.PREDATOR, (3, 0)),
        ),
    ),
    LevelSize.MEDIUM: LevelLayout(
        size=LevelSize.MEDIUM,
        rows=6,
        cols=6,
        objective=(4, 3),
        hazards=(
            *_hazards(RoomKind.PIT, (1, 3), (3, 1)),
            *_hazards(RoomKind.WHIRLWIND, (2, 4)),
            *_hazards(RoomKind.PREDATOR, (5, 0), (4, 5)),
        ),
    ),
    LevelSize.LARGE: LevelLayout(
        size=LevelSize.LARGE,
        rows=8,
        cols=8,
        objective=(6, 5),
        hazards=(
            *_hazards(RoomKind.PIT, (1, 4), (3, 2), (5, 6), (7, 1)),
            *_hazards(RoomKind.WHIRLWIND, (2, 6), (4, 3)),
            *_hazards(RoomKind.PREDATOR, (3, 7), (6, 1), (7, 4)),
        ),
    ),
}


def all_level_layouts() -> Iterable[LevelLayout]:
    return _LEVEL_LAYOUTS.values()


def get_level_layout(size: LevelSize | str) -> LevelLayout:
    """Return the layout for ``size``; raises KeyError for unknown sizes."""
    if isinstance(size, str):
        try:
            size = LevelSize(size)
        except ValueError:
            raise KeyError(size) from None
    return _LEVEL_LAYOUTS[size]
