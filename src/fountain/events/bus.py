from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems and lambdas not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_INTRO = "game_intro"                        # payload: None
EVENT_GAME_MODE_CHANGED = "game_mode_changed"          # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_LEVEL_SELECTED = "level_selected"                # payload: size=LevelSize, rows=int, cols=int
EVENT_GAME_WON = "game_won"                            # payload: turns=int
EVENT_GAME_LOST = "game_lost"                          # payload: kind=RoomKind, position=(r,c), turns=int


# ============================================================================
# TURN SEQUENCE
# ============================================================================
EVENT_TURN_STARTED = "turn_started"                    # payload: row=int, col=int, charges=int, turn=int
EVENT_ROOM_ENTERED = "room_entered"                    # payload: kind=RoomKind, activated=bool, position=(r,c)
EVENT_PLAYER_DISPLACED = "player_displaced"            # payload: kind=RoomKind, origin=(r,c), destination=(r,c)
EVENT_HAZARD_SENSED = "hazard_sensed"                  # payload: kind=RoomKind, direction=str, position=(r,c)


# ============================================================================
# ACTIONS
# ============================================================================
EVENT_PLAYER_MOVED = "player_moved"                    # payload: direction=Direction, origin=(r,c), destination=(r,c)
EVENT_SHOT_FIRED = "shot_fired"                        # payload: direction=Direction, target=(r,c), hit=bool, charges=int
EVENT_HAZARD_SLAIN = "hazard_slain"                    # payload: kind=RoomKind, position=(r,c)
EVENT_OBJECTIVE_ACTIVATED = "objective_activated"      # payload: position=(r,c), already_active=bool
EVENT_HELP_REQUESTED = "help_requested"                # payload: None
EVENT_ACTION_REJECTED = "action_rejected"              # payload: action=Action, message=str


# ============================================================================
# INPUT
# ============================================================================
EVENT_INPUT_REJECTED = "input_rejected"                # payload: text=str, message=str
