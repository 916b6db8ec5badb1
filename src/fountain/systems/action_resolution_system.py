from __future__ import annotations

import logging

from esper import World

from fountain.components.action import Action, ActionKind, Direction
from fountain.components.room import RoomKind, empty_room
from fountain.events.bus import (
    EventBus,
    EVENT_HELP_REQUESTED,
    EVENT_HAZARD_SLAIN,
    EVENT_OBJECTIVE_ACTIVATED,
    EVENT_PLAYER_MOVED,
    EVENT_SHOT_FIRED,
)
from fountain.systems.board_ops import explorer_charges, explorer_position, get_board, step

logger = logging.getLogger(__name__)


class ActionResolutionSystem:
    """Applies one player action to the board and the explorer.

    Every operation returns True when the action was legal here and had its
    effect, False when it is not possible in the current situation. A False
    result is an expected outcome, never an error; the caller reports it and
    re-prompts.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def resolve(self, action: Action) -> bool:
        match action.kind:
            case ActionKind.MOVE:
                return self.move(action.direction)
            case ActionKind.SHOOT:
                return self.shoot(action.direction)
            case ActionKind.ACTIVATE_OBJECTIVE:
                return self.activate_objective()
            case ActionKind.HELP:
                return self.help()
        raise ValueError(f"Unhandled action kind: {action.kind!r}")

    def move(self, direction: Direction) -> bool:
        board = get_board(self.world)
        position = explorer_position(self.world)
        origin = position.as_tuple()
        row, col = step(origin, direction)
        if not board.in_bounds(row, col):
            logger.debug("Move %s from %s blocked by board edge", direction.value, origin)
            return False
        position.row = row
        position.col = col
        logger.debug("Moved %s from %s to %s", direction.value, origin, (row, col))
        self.event_bus.emit(
            EVENT_PLAYER_MOVED,
            direction=direction,
            origin=origin,
            destination=(row, col),
        )
        return True

    def shoot(self, direction: Direction) -> bool:
        charges = explorer_charges(self.world)
        if not charges.has_charge():
            logger.debug("Shot %s rejected: no attack charges left", direction.value)
            return False
        board = get_board(self.world)
        target = step(explorer_position(self.world).as_tuple(), direction)
        if not board.in_bounds(*target):
            logger.debug("Shot %s rejected: %s is off the board", direction.value, target)
            return False

        charges.spend()
        room = board.get(*target)
        hit = room.is_shootable
        if hit:
            slain_kind = room.kind
            board.set(*target, empty_room())
            logger.info("Shot %s killed %s at %s", direction.value, slain_kind.name, target)
        self.event_bus.emit(
            EVENT_SHOT_FIRED,
            direction=direction,
            target=target,
            hit=hit,
            charges=charges.current,
        )
        if hit:
            self.event_bus.emit(EVENT_HAZARD_SLAIN, kind=slain_kind, position=target)
        return True

    def activate_objective(self) -> bool:
        position = explorer_position(self.world)
        room = get_board(self.world).get(position.row, position.col)
        if room.kind is not RoomKind.OBJECTIVE:
            return False
        already_active = room.activated
        room.activate()
        if not already_active:
            logger.info("Objective activated at %s", position.as_tuple())
        self.event_bus.emit(
            EVENT_OBJECTIVE_ACTIVATED,
            position=position.as_tuple(),
            already_active=already_active,
        )
        return True

    def help(self) -> bool:
        self.event_bus.emit(EVENT_HELP_REQUESTED)
        return True
