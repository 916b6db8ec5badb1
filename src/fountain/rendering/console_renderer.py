from __future__ import annotations

from esper import World
from rich.console import Console
from rich.markup import escape

from fountain.components.room import RoomKind
from fountain.events.bus import (
    EventBus,
    EVENT_ACTION_REJECTED,
    EVENT_GAME_INTRO,
    EVENT_GAME_LOST,
    EVENT_GAME_WON,
    EVENT_HAZARD_SENSED,
    EVENT_HAZARD_SLAIN,
    EVENT_HELP_REQUESTED,
    EVENT_INPUT_REJECTED,
    EVENT_OBJECTIVE_ACTIVATED,
    EVENT_PLAYER_DISPLACED,
    EVENT_ROOM_ENTERED,
    EVENT_SHOT_FIRED,
    EVENT_TURN_STARTED,
)
from fountain.rendering.text import (
    HAZARD_NAMES,
    HELP_LINES,
    INTRO_LINES,
    LOSS_MESSAGES,
    SENSE_HINTS,
    SEPARATOR,
    WIN_LINES,
    describe_room,
)

ROOM_STYLES = {
    RoomKind.OBJECTIVE: "blue",
    RoomKind.ENTRANCE: "yellow",
    RoomKind.PIT: "bold red",
    RoomKind.WHIRLWIND: "bold red",
    RoomKind.PREDATOR: "bold red",
}

HINT_STYLE = "dark_orange"
NARRATIVE_STYLE = "magenta"
ERROR_STYLE = "red"


class ConsoleRenderSystem:
    """Prints game notifications to the terminal.

    Purely a listener: it subscribes to bus events in the constructor and
    never feeds anything back into the game.
    """

    def __init__(self, world: World, event_bus: EventBus, console: Console | None = None):
        self.world = world
        self.event_bus = event_bus
        self.console = console or Console()
        self.event_bus.subscribe(EVENT_GAME_INTRO, self.on_intro)
        self.event_bus.subscribe(EVENT_TURN_STARTED, self.on_turn_started)
        self.event_bus.subscribe(EVENT_ROOM_ENTERED, self.on_room_entered)
        self.event_bus.subscribe(EVENT_HAZARD_SENSED, self.on_hazard_sensed)
        self.event_bus.subscribe(EVENT_PLAYER_DISPLACED, self.on_player_displaced)
        self.event_bus.subscribe(EVENT_SHOT_FIRED, self.on_shot_fired)
        self.event_bus.subscribe(EVENT_HAZARD_SLAIN, self.on_hazard_slain)
        self.event_bus.subscribe(EVENT_OBJECTIVE_ACTIVATED, self.on_objective_activated)
        self.event_bus.subscribe(EVENT_HELP_REQUESTED, self.on_help_requested)
        self.event_bus.subscribe(EVENT_ACTION_REJECTED, self.on_rejected)
        self.event_bus.subscribe(EVENT_INPUT_REJECTED, self.on_rejected)
        self.event_bus.subscribe(EVENT_GAME_WON, self.on_game_won)
        self.event_bus.subscribe(EVENT_GAME_LOST, self.on_game_lost)

    def _print(self, text: str, style: str | None = None) -> None:
        self.console.print(escape(text), style=style, highlight=False)

    def on_intro(self, sender, **payload):
        for line in INTRO_LINES:
            self._print(line, NARRATIVE_STYLE)

    def on_turn_started(self, sender, **payload):
        self._print(SEPARATOR)
        row = payload.get("row")
        col = payload.get("col")
        charges = payload.get("charges")
        self._print(f"You are in the room at (Row={row} Column={col}). Arrows left: {charges}.")

    def on_room_entered(self, sender, **payload):
        kind = payload.get("kind", RoomKind.EMPTY)
        text = describe_room(kind, bool(payload.get("activated")))
        self._print(text, ROOM_STYLES.get(kind))

    def on_hazard_sensed(self, sender, **payload):
        kind = payload.get("kind")
        hint = SENSE_HINTS.get(kind)
        if hint:
            self._print(hint, HINT_STYLE)

    def on_player_displaced(self, sender, **payload):
        row, col = payload.get("destination", (0, 0))
        self._print(f"The maelstrom sweeps you away to (Row={row} Column={col}).", HINT_STYLE)

    def on_shot_fired(self, sender, **payload):
        charges = payload.get("charges")
        if payload.get("hit"):
            self._print(f"Your arrow strikes true. Arrows left: {charges}.")
        else:
            self._print(f"Your arrow clatters into the darkness and hits nothing. Arrows left: {charges}.")

    def on_hazard_slain(self, sender, **payload):
        name = HAZARD_NAMES.get(payload.get("kind"), "creature")
        self._print(f"You hear the {name} die. The room ahead is clear.", NARRATIVE_STYLE)

    def on_objective_activated(self, sender, **payload):
        if payload.get("already_active"):
            self._print("The Fountain of Objects is already flowing.", "blue")
        else:
            self._print("The Fountain of Objects roars back to life!", "blue")

    def on_help_requested(self, sender, **payload):
        for line in HELP_LINES:
            self._print(line, "cyan")

    def on_rejected(self, sender, **payload):
        self._print(payload.get("message", ""), ERROR_STYLE)

    def on_game_won(self, sender, **payload):
        for line in WIN_LINES:
            self._print(line, NARRATIVE_STYLE)
        turns = payload.get("turns")
        if turns is not None:
            self._print(f"Turns taken: {turns}.")

    def on_game_lost(self, sender, **payload):
        kind = payload.get("kind")
        self._print(LOSS_MESSAGES.get(kind, "You have perished in the caverns."), ERROR_STYLE)
        self._print("You lose.", NARRATIVE_STYLE)
