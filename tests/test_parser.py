import pytest

from fountain.components.action import Action, ActionKind, Direction
from fountain.components.level_layout import LevelSize
from fountain.input.parser import ACTION_VOCABULARY, parse_action, parse_level_size


@pytest.mark.parametrize("direction", list(Direction))
def test_directional_commands(direction):
    assert parse_action(f"move {direction.value}").value == Action.move(direction)
    assert parse_action(f"shoot {direction.value}").value == Action.shoot(direction)


def test_fountain_and_help_commands():
    assert parse_action("enable fountain").value.kind is ActionKind.ACTIVATE_OBJECTIVE
    assert parse_action("help").value.kind is ActionKind.HELP
    assert len(ACTION_VOCABULARY) == 10


def test_trailing_newline_is_ignored():
    result = parse_action("move north\n")
    assert result.ok
    assert result.value == Action.move(Direction.NORTH)


@pytest.mark.parametrize("text", ["", "Move North", "move  north", "move up", "jump", " help", None])
def test_malformed_actions_return_errors(text):
    result = parse_action(text)
    assert not result.ok
    assert result.value is None
    assert result.error.startswith("Invalid input.")


def test_level_sizes():
    assert parse_level_size("small").value is LevelSize.SMALL
    assert parse_level_size("medium").value is LevelSize.MEDIUM
    assert parse_level_size("large").value is LevelSize.LARGE
    assert not parse_level_size("Large").ok
    assert not parse_level_size("tiny").ok
    assert not parse_level_size(None).ok
