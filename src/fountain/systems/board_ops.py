from __future__ import annotations

from esper import World

from fountain.components.action import Direction
from fountain.components.attack_charges import AttackCharges
from fountain.components.board import Board
from fountain.components.board_position import BoardPosition
from fountain.components.explorer import Explorer
from fountain.components.level_layout import Coordinate
from fountain.components.room import Room
from fountain.constants import DIRECTION_DELTAS


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found; no level has been loaded")


def get_explorer(world: World) -> int:
    for entity, _ in world.get_component(Explorer):
        return entity
    raise RuntimeError("Explorer entity not found")


def explorer_position(world: World) -> BoardPosition:
    return world.component_for_entity(get_explorer(world), BoardPosition)


def explorer_charges(world: World) -> AttackCharges:
    return world.component_for_entity(get_explorer(world), AttackCharges)


def explorer_room(world: World) -> Room:
    position = explorer_position(world)
    return get_board(world).get(position.row, position.col)


def step(coordinate: Coordinate, direction: Direction) -> Coordinate:
    """Coordinate one cell away in ``direction``; may be off the board."""
    d_row, d_col = DIRECTION_DELTAS[direction]
    return coordinate[0] + d_row, coordinate[1] + d_col
