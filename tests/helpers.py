from __future__ import annotations

from collections import deque
from typing import Iterable

from esper import World

from fountain.components.action import Action
from fountain.components.level_layout import LevelLayout, LevelSize
from fountain.events.bus import EventBus
from fountain.factories.levels import get_level_layout
from fountain.systems.board_ops import explorer_position
from fountain.systems.game_flow_system import GameFlowSystem
from fountain.world import create_world


class ScriptedInput:
    """Input provider that replays a fixed list of choices."""

    def __init__(self, actions: Iterable[Action] = (), level: LevelSize = LevelSize.SMALL):
        self.actions = deque(actions)
        self.level = level
        self.level_requests = 0

    def request_level_size(self) -> LevelSize:
        self.level_requests += 1
        return self.level

    def request_action(self) -> Action:
        if not self.actions:
            raise AssertionError("Game asked for more actions than the script provides")
        return self.actions.popleft()


def record_events(bus: EventBus, *names: str) -> list[tuple[str, dict]]:
    """Subscribe to ``names`` and collect (name, payload) pairs in emit order."""
    captured: list[tuple[str, dict]] = []
    for name in names:
        bus.subscribe(name, lambda sender, _name=name, **payload: captured.append((_name, payload)))
    return captured


def build_game(
    actions: Iterable[Action] = (),
    *,
    layout: LevelLayout | None = None,
    charges: int = 5,
) -> tuple[EventBus, World, GameFlowSystem, ScriptedInput]:
    bus = EventBus()
    world = create_world(bus, initial_charges=charges)
    scripted = ScriptedInput(actions)
    flow = GameFlowSystem(world, bus, scripted)
    flow.select_level(layout or get_level_layout(LevelSize.SMALL))
    return bus, world, flow, scripted


def place_explorer(world: World, row: int, col: int) -> None:
    position = explorer_position(world)
    position.row = row
    position.col = col
