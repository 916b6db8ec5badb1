from __future__ import annotations

import logging

from esper import World

from fountain.components.room import Room, RoomKind
from fountain.constants import WHIRLWIND_DISPLACEMENT
from fountain.events.bus import EventBus, EVENT_PLAYER_DISPLACED
from fountain.systems.action_resolution_system import ActionResolutionSystem
from fountain.systems.board_ops import explorer_position

logger = logging.getLogger(__name__)


class HazardSystem:
    """Applies the side effects of the room the explorer stands in."""

    def __init__(self, world: World, event_bus: EventBus, resolver: ActionResolutionSystem):
        self.world = world
        self.event_bus = event_bus
        self.resolver = resolver

    def is_fatal(self, room: Room) -> bool:
        return room.is_deadly

    def process(self, room: Room) -> bool:
        """Apply non-fatal hazard effects; returns True if the explorer was moved."""
        if room.kind is not RoomKind.WHIRLWIND:
            return False
        return self._displace(room.kind)

    def _displace(self, kind: RoomKind) -> bool:
        position = explorer_position(self.world)
        origin = position.as_tuple()
        for direction in WHIRLWIND_DISPLACEMENT:
            # Steps that would leave the board are skipped by the move resolver.
            self.resolver.move(direction)
        destination = position.as_tuple()
        logger.info("Whirlwind carried explorer from %s to %s", origin, destination)
        self.event_bus.emit(
            EVENT_PLAYER_DISPLACED,
            kind=kind,
            origin=origin,
            destination=destination,
        )
        return destination != origin
