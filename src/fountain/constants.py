from fountain.components.action import Direction

# Game configuration constants
INITIAL_ATTACK_CHARGES = 5

# Row axis grows away from the entrance, so north is +1 row.
DIRECTION_DELTAS = {
    Direction.NORTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (-1, 0),
    Direction.WEST: (0, -1),
}

# Forced path applied when the explorer enters a whirlwind room.
WHIRLWIND_DISPLACEMENT = (Direction.NORTH, Direction.EAST, Direction.EAST)

# Sensing scan order: (label, row delta, col delta).
SENSING_SCAN_ORDER = (
    ("north", 1, 0),
    ("north-east", 1, 1),
    ("east", 0, 1),
    ("south-east", -1, 1),
    ("south", -1, 0),
    ("south-west", -1, -1),
    ("west", 0, -1),
    ("north-west", 1, -1),
)

REJECTION_MESSAGE = "Cannot do this action here."
INVALID_INPUT_MESSAGE = "Invalid input."
