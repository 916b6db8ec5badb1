"""High-level coordinator for level selection and the turn loop."""
from __future__ import annotations

import logging

from esper import World

from fountain.components.action import ActionKind
from fountain.components.game_state import GameMode, GameState
from fountain.components.level_layout import LevelLayout
from fountain.components.room import Room
from fountain.constants import REJECTION_MESSAGE
from fountain.events.bus import (
    EventBus,
    EVENT_ACTION_REJECTED,
    EVENT_GAME_INTRO,
    EVENT_GAME_LOST,
    EVENT_GAME_WON,
    EVENT_ROOM_ENTERED,
    EVENT_TURN_STARTED,
)
from fountain.factories.levels import get_level_layout
from fountain.input.console_input import InputProvider
from fountain.systems.action_resolution_system import ActionResolutionSystem
from fountain.systems.board_ops import explorer_charges, explorer_position, explorer_room, get_board
from fountain.systems.hazard_system import HazardSystem
from fountain.systems.sensing_system import SensingSystem
from fountain.utils.game_state import get_game_state, set_game_mode
from fountain.world import load_level

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Drives one session: SELECTING -> PLAYING -> WON or LOST.

    Each turn reports the explorer's position, checks for victory, describes
    the room, checks for death, applies whirlwind displacement, runs sensing
    and finally resolves exactly one player action. An action that is not
    possible here is reported and the loop starts over.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        input_provider: InputProvider,
        *,
        resolver: ActionResolutionSystem | None = None,
        sensing: SensingSystem | None = None,
        hazards: HazardSystem | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.input_provider = input_provider
        self.resolver = resolver or ActionResolutionSystem(world, event_bus)
        self.sensing = sensing or SensingSystem(world, event_bus)
        self.hazards = hazards or HazardSystem(world, event_bus, self.resolver)

    @property
    def state(self) -> GameState:
        return get_game_state(self.world)

    def run(self, layout: LevelLayout | None = None) -> GameMode:
        """Play a full session and return the terminal mode."""
        self.event_bus.emit(EVENT_GAME_INTRO)
        if self.state.mode == GameMode.SELECTING:
            self.select_level(layout)
        while not self.state.mode.is_terminal:
            self.step()
        return self.state.mode

    def select_level(self, layout: LevelLayout | None = None) -> LevelLayout:
        if layout is None:
            size = self.input_provider.request_level_size()
            layout = get_level_layout(size)
        load_level(self.world, self.event_bus, layout)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        return layout

    def step(self) -> GameMode:
        """Run one turn and return the mode afterwards."""
        state = self.state
        if state.mode != GameMode.PLAYING:
            return state.mode

        position = explorer_position(self.world)
        charges = explorer_charges(self.world)
        self.event_bus.emit(
            EVENT_TURN_STARTED,
            row=position.row,
            col=position.col,
            charges=charges.current,
            turn=state.turns_taken,
        )

        if self._has_won():
            logger.info("Explorer escaped after %d turns", state.turns_taken)
            set_game_mode(self.world, self.event_bus, GameMode.WON)
            self.event_bus.emit(EVENT_GAME_WON, turns=state.turns_taken)
            return state.mode

        room = self._enter_room()
        if self.hazards.is_fatal(room):
            return self._lose(room)

        if self.hazards.process(room):
            # The new room is judged before the explorer may act again.
            room = self._enter_room()
            if self.hazards.is_fatal(room):
                return self._lose(room)

        self.sensing.process()

        action = self.input_provider.request_action()
        if not self.resolver.resolve(action):
            logger.debug("Rejected %s at %s", action, position.as_tuple())
            self.event_bus.emit(EVENT_ACTION_REJECTED, action=action, message=REJECTION_MESSAGE)
        elif action.kind is not ActionKind.HELP:
            state.turns_taken += 1
        return state.mode

    def _has_won(self) -> bool:
        board = get_board(self.world)
        position = explorer_position(self.world)
        return position.as_tuple() == board.entrance and board.objective().activated

    def _enter_room(self) -> Room:
        position = explorer_position(self.world)
        room = explorer_room(self.world)
        self.event_bus.emit(
            EVENT_ROOM_ENTERED,
            kind=room.kind,
            activated=room.activated,
            position=position.as_tuple(),
        )
        return room

    def _lose(self, room: Room) -> GameMode:
        state = self.state
        position = explorer_position(self.world).as_tuple()
        logger.info("Explorer killed by %s at %s", room.kind.name, position)
        set_game_mode(self.world, self.event_bus, GameMode.LOST)
        self.event_bus.emit(
            EVENT_GAME_LOST,
            kind=room.kind,
            position=position,
            turns=state.turns_taken,
        )
        return state.mode
