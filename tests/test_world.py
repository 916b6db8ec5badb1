from fountain.components.board import Board
from fountain.components.game_state import GameMode
from fountain.components.level_layout import LevelSize
from fountain.events.bus import EventBus, EVENT_GAME_MODE_CHANGED, EVENT_LEVEL_SELECTED
from fountain.factories.levels import get_level_layout
from fountain.systems.board_ops import explorer_charges, explorer_position, get_board
from fountain.utils.game_state import get_game_state, set_game_mode
from fountain.world import create_world, load_level
from tests.helpers import place_explorer, record_events


def test_create_world_with_layout_places_explorer_at_entrance():
    bus = EventBus()
    world = create_world(bus, GameMode.PLAYING, layout=get_level_layout(LevelSize.MEDIUM), initial_charges=3)
    board = get_board(world)
    assert (board.rows, board.cols) == (6, 6)
    assert explorer_position(world).as_tuple() == (0, 0)
    charges = explorer_charges(world)
    assert (charges.current, charges.maximum) == (3, 3)
    state = get_game_state(world)
    assert state.mode == GameMode.PLAYING
    assert state.level_size is LevelSize.MEDIUM


def test_load_level_replaces_board_and_resets_position():
    bus = EventBus()
    world = create_world(bus, layout=get_level_layout(LevelSize.SMALL))
    selected = record_events(bus, EVENT_LEVEL_SELECTED)
    place_explorer(world, 2, 2)
    get_game_state(world).turns_taken = 7

    load_level(world, bus, get_level_layout(LevelSize.LARGE))

    assert len(list(world.get_component(Board))) == 1
    assert get_board(world).rows == 8
    assert explorer_position(world).as_tuple() == (0, 0)
    assert get_game_state(world).turns_taken == 0
    assert selected == [(EVENT_LEVEL_SELECTED, {"size": LevelSize.LARGE, "rows": 8, "cols": 8})]


def test_set_game_mode_only_emits_on_change():
    bus = EventBus()
    world = create_world(bus)
    changes = record_events(bus, EVENT_GAME_MODE_CHANGED)
    set_game_mode(world, bus, GameMode.SELECTING)
    set_game_mode(world, bus, GameMode.PLAYING)
    set_game_mode(world, bus, GameMode.PLAYING)
    assert changes == [
        (EVENT_GAME_MODE_CHANGED, {"previous_mode": GameMode.SELECTING, "new_mode": GameMode.PLAYING}),
    ]
