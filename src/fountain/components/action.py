"""Player commands.

An ``Action`` is a tagged value: ``kind`` selects the verb and ``direction``
is only meaningful for MOVE and SHOOT.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Direction(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


class ActionKind(Enum):
    MOVE = auto()
    SHOOT = auto()
    ACTIVATE_OBJECTIVE = auto()
    HELP = auto()


_DIRECTIONAL = frozenset({ActionKind.MOVE, ActionKind.SHOOT})


@dataclass(frozen=True, slots=True)
class Action:
    kind: ActionKind
    direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        if (self.kind in _DIRECTIONAL) != (self.direction is not None):
            raise ValueError(f"{self.kind.name} action has an invalid direction: {self.direction!r}")

    @classmethod
    def move(cls, direction: Direction) -> "Action":
        return cls(ActionKind.MOVE, direction)

    @classmethod
    def shoot(cls, direction: Direction) -> "Action":
        return cls(ActionKind.SHOOT, direction)

    @classmethod
    def activate_objective(cls) -> "Action":
        return cls(ActionKind.ACTIVATE_OBJECTIVE)

    @classmethod
    def help(cls) -> "Action":
        return cls(ActionKind.HELP)
