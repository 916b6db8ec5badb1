"""Room variants stored in the board grid."""
from dataclasses import dataclass
from enum import Enum, auto


class RoomKind(Enum):
    """Identity tag for every room on the board."""
    EMPTY = auto()
    ENTRANCE = auto()
    OBJECTIVE = auto()
    PIT = auto()
    WHIRLWIND = auto()
    PREDATOR = auto()


HAZARD_KINDS = frozenset({RoomKind.PIT, RoomKind.WHIRLWIND, RoomKind.PREDATOR})
DEADLY_KINDS = frozenset({RoomKind.PIT, RoomKind.PREDATOR})
SHOOTABLE_KINDS = frozenset({RoomKind.WHIRLWIND, RoomKind.PREDATOR})


@dataclass(slots=True)
class Room:
    """Single tagged room value.

    Only OBJECTIVE rooms use ``activated``; it starts False and is only ever
    flipped to True by :meth:`activate`.
    """
    kind: RoomKind
    activated: bool = False

    def __post_init__(self) -> None:
        if self.activated and self.kind is not RoomKind.OBJECTIVE:
            raise ValueError(f"{self.kind.name} rooms cannot be activated")

    @property
    def is_hazard(self) -> bool:
        return self.kind in HAZARD_KINDS

    @property
    def is_deadly(self) -> bool:
        return self.kind in DEADLY_KINDS

    @property
    def is_shootable(self) -> bool:
        return self.kind in SHOOTABLE_KINDS

    def activate(self) -> bool:
        if self.kind is not RoomKind.OBJECTIVE:
            return False
        self.activated = True
        return True


def empty_room() -> Room:
    return Room(RoomKind.EMPTY)
