"""Launch options read from FOUNTAIN_* environment variables.

Cavern rules live in ``constants``; this module only holds the knobs a
player may turn before starting a session.
"""

import logging
import os
from dataclasses import dataclass

from fountain.constants import INITIAL_ATTACK_CHARGES

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative", name, raw)
        return default
    return value


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class GameSettings:
    """Arrow count, log level, color and preselected cavern size."""

    attack_charges: int = INITIAL_ATTACK_CHARGES
    log_level: str = "WARNING"
    no_color: bool = False
    level: str | None = None

    @classmethod
    def from_env(cls) -> "GameSettings":
        """Read FOUNTAIN_ATTACK_CHARGES, FOUNTAIN_LOG_LEVEL, FOUNTAIN_NO_COLOR and FOUNTAIN_LEVEL."""
        return cls(
            attack_charges=_env_int("FOUNTAIN_ATTACK_CHARGES", INITIAL_ATTACK_CHARGES),
            log_level=os.getenv("FOUNTAIN_LOG_LEVEL", "WARNING").upper(),
            no_color=_env_flag("FOUNTAIN_NO_COLOR"),
            level=os.getenv("FOUNTAIN_LEVEL") or None,
        )


def get_settings() -> GameSettings:
    """Current launch options, re-read from the environment on every call."""
    return GameSettings.from_env()
