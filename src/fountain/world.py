import logging

from esper import World

from fountain.components.attack_charges import AttackCharges
from fountain.components.board import Board
from fountain.components.board_position import BoardPosition
from fountain.components.explorer import Explorer
from fountain.components.game_state import GameMode, GameState
from fountain.components.level_layout import ENTRANCE_COORDINATE, LevelLayout
from fountain.constants import INITIAL_ATTACK_CHARGES
from fountain.events.bus import EventBus, EVENT_LEVEL_SELECTED

logger = logging.getLogger(__name__)


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.SELECTING,
    *,
    layout: LevelLayout | None = None,
    initial_charges: int = INITIAL_ATTACK_CHARGES,
) -> World:
    world = World()

    # Register the global game state resource.
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))

    row, col = ENTRANCE_COORDINATE
    world.create_entity(
        Explorer(),
        BoardPosition(row=row, col=col),
        AttackCharges(current=initial_charges, maximum=initial_charges),
    )
    if layout is not None:
        load_level(world, event_bus, layout)
    return world


def load_level(world: World, event_bus: EventBus, layout: LevelLayout) -> Board:
    """Build the board for ``layout`` and put the explorer back on the entrance.

    Any board from a previous level is discarded.
    """
    for entity, _ in list(world.get_component(Board)):
        world.delete_entity(entity, immediate=True)
    board = Board.create(layout)
    world.create_entity(board)

    row, col = ENTRANCE_COORDINATE
    for _, (_, position) in world.get_components(Explorer, BoardPosition):
        position.row = row
        position.col = col
    for _, state in world.get_component(GameState):
        state.level_size = layout.size
        state.turns_taken = 0
    logger.info("Loaded %s level (%dx%d)", layout.size.value, layout.rows, layout.cols)
    event_bus.emit(EVENT_LEVEL_SELECTED, size=layout.size, rows=layout.rows, cols=layout.cols)
    return board
