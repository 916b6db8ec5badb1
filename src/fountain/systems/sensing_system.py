from __future__ import annotations

import logging
from dataclasses import dataclass

from esper import World

from fountain.components.level_layout import Coordinate
from fountain.components.room import RoomKind
from fountain.constants import SENSING_SCAN_ORDER
from fountain.events.bus import EventBus, EVENT_HAZARD_SENSED
from fountain.systems.board_ops import explorer_position, get_board

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SensedHazard:
    direction: str
    position: Coordinate
    kind: RoomKind


class SensingSystem:
    """Reports hazards in the eight cells around the explorer.

    Neighbours are scanned in a fixed order (north first, then clockwise) and
    every in-bounds hazard cell yields exactly one hint.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def scan(self) -> list[SensedHazard]:
        board = get_board(self.world)
        row, col = explorer_position(self.world).as_tuple()
        sensed: list[SensedHazard] = []
        for label, d_row, d_col in SENSING_SCAN_ORDER:
            n_row, n_col = row + d_row, col + d_col
            if not board.in_bounds(n_row, n_col):
                continue
            room = board.get(n_row, n_col)
            if room.is_hazard:
                sensed.append(SensedHazard(direction=label, position=(n_row, n_col), kind=room.kind))
        return sensed

    def process(self) -> list[SensedHazard]:
        sensed = self.scan()
        for hint in sensed:
            logger.debug("Sensed %s to the %s at %s", hint.kind.name, hint.direction, hint.position)
            self.event_bus.emit(
                EVENT_HAZARD_SENSED,
                kind=hint.kind,
                direction=hint.direction,
                position=hint.position,
            )
        return sensed
