import pytest

from fountain.components.room import Room, RoomKind


def test_hazard_classification_by_kind():
    assert Room(RoomKind.PIT).is_hazard and Room(RoomKind.PIT).is_deadly
    assert Room(RoomKind.PREDATOR).is_deadly and Room(RoomKind.PREDATOR).is_shootable
    whirlwind = Room(RoomKind.WHIRLWIND)
    assert whirlwind.is_hazard and whirlwind.is_shootable and not whirlwind.is_deadly
    for kind in (RoomKind.EMPTY, RoomKind.ENTRANCE, RoomKind.OBJECTIVE):
        assert not Room(kind).is_hazard
    assert not Room(RoomKind.PIT).is_shootable


def test_objective_activation_is_one_way():
    room = Room(RoomKind.OBJECTIVE)
    assert room.activated is False
    assert room.activate() is True
    assert room.activate() is True
    assert room.activated is True


def test_only_objective_can_be_activated():
    room = Room(RoomKind.EMPTY)
    assert room.activate() is False
    assert room.activated is False
    with pytest.raises(ValueError):
        Room(RoomKind.ENTRANCE, activated=True)
