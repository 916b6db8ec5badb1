import sys, os

# Ensure src (and the repo root, for tests.helpers) is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from tests.helpers import ScriptedInput, build_game, place_explorer, record_events

__all__ = [
    "ScriptedInput",
    "build_game",
    "place_explorer",
    "record_events",
]
