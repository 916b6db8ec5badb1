"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from fountain.components.level_layout import LevelSize


class GameMode(Enum):
    """High-level modes of a single session."""
    SELECTING = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GameMode.WON, GameMode.LOST)


@dataclass
class GameState:
    """Singleton component storing the session mode and progress."""
    mode: GameMode = GameMode.SELECTING
    level_size: Optional[LevelSize] = None
    turns_taken: int = 0
