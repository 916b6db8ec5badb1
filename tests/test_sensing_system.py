from fountain.components.level_layout import HazardPlacement, LevelLayout, LevelSize
from fountain.components.room import RoomKind
from fountain.events.bus import EVENT_HAZARD_SENSED
from fountain.systems.sensing_system import SensingSystem
from tests.helpers import build_game, place_explorer, record_events


def _ring_layout() -> LevelLayout:
    # Explorer sits at (2,2); hazards on all eight neighbours.
    return LevelLayout(
        size=LevelSize.SMALL,
        rows=5,
        cols=5,
        objective=(0, 4),
        hazards=(
            HazardPlacement(RoomKind.PIT, (3, 2)),        # north
            HazardPlacement(RoomKind.WHIRLWIND, (3, 3)),  # north-east
            HazardPlacement(RoomKind.PREDATOR, (2, 3)),   # east
            HazardPlacement(RoomKind.PIT, (1, 3)),        # south-east
            HazardPlacement(RoomKind.WHIRLWIND, (1, 2)),  # south
            HazardPlacement(RoomKind.PREDATOR, (1, 1)),   # south-west
            HazardPlacement(RoomKind.PIT, (2, 1)),        # west
            HazardPlacement(RoomKind.WHIRLWIND, (3, 1)),  # north-west
        ),
    )


def test_scan_reports_all_neighbours_in_fixed_order():
    bus, world, _, _ = build_game(layout=_ring_layout())
    place_explorer(world, 2, 2)
    sensed = SensingSystem(world, bus).scan()
    assert [hint.direction for hint in sensed] == [
        "north", "north-east", "east", "south-east", "south", "south-west", "west", "north-west",
    ]
    assert [hint.kind for hint in sensed] == [
        RoomKind.PIT, RoomKind.WHIRLWIND, RoomKind.PREDATOR, RoomKind.PIT,
        RoomKind.WHIRLWIND, RoomKind.PREDATOR, RoomKind.PIT, RoomKind.WHIRLWIND,
    ]


def test_no_hints_for_non_hazard_rooms():
    bus, world, _, _ = build_game()
    place_explorer(world, 1, 3)
    # Neighbours: objective (0,2), empties, and no hazards.
    assert SensingSystem(world, bus).scan() == []


def test_diagonal_pit_is_sensed_from_north_of_entrance():
    bus, world, _, _ = build_game()
    place_explorer(world, 1, 0)
    sensed = SensingSystem(world, bus).scan()
    assert [(hint.direction, hint.position, hint.kind) for hint in sensed] == [
        ("south-east", (0, 1), RoomKind.PIT),
    ]


def test_corner_scans_use_symmetric_bounds():
    bus, world, _, _ = build_game()
    sensing = SensingSystem(world, bus)
    # Top-left corner (3,0) is the predator itself; its in-bounds neighbours
    # are (2,0), (2,1), (3,1). None are hazards.
    place_explorer(world, 3, 0)
    assert sensing.scan() == []
    # Top-right corner: whirlwind at (3,2) lies to the west.
    place_explorer(world, 3, 3)
    assert [(h.direction, h.kind) for h in sensing.scan()] == [("west", RoomKind.WHIRLWIND)]
    # From (2,1) the predator is north-west and the whirlwind north-east.
    place_explorer(world, 2, 1)
    assert [(h.direction, h.kind) for h in sensing.scan()] == [
        ("north-east", RoomKind.WHIRLWIND),
        ("north-west", RoomKind.PREDATOR),
    ]


def test_process_emits_one_event_per_hazard_cell():
    bus, world, _, _ = build_game()
    events = record_events(bus, EVENT_HAZARD_SENSED)
    place_explorer(world, 2, 2)
    SensingSystem(world, bus).process()
    whirlwind_hints = [payload for _, payload in events if payload["kind"] is RoomKind.WHIRLWIND]
    assert len(whirlwind_hints) == 1
    assert whirlwind_hints[0]["position"] == (3, 2)
    assert whirlwind_hints[0]["direction"] == "north"
