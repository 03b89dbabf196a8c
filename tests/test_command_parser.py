"""Tests for the raw input parser."""

import pytest

from tilecrawl.interface.command_parser import ActionParseError, CommandParser, ErrorType
from tilecrawl.models.action import Action, Direction


@pytest.mark.parametrize(
    "raw,direction",
    [
        ("w", Direction.UP),
        ("a", Direction.LEFT),
        ("s", Direction.DOWN),
        ("d", Direction.RIGHT),
        ("up", Direction.UP),
        ("  Left ", Direction.LEFT),
        ("south", Direction.DOWN),
        ("move right", Direction.RIGHT),
        ("go up", Direction.UP),
        ("move:down", Direction.DOWN),
    ],
)
def test_parse_moves(raw, direction):
    parser = CommandParser()

    assert parser.parse(raw) == Action.move(direction)


@pytest.mark.parametrize("raw", ["attack", "f", "HIT", "fight"])
def test_parse_attack(raw):
    parser = CommandParser()

    assert parser.parse(raw) == Action.attack()


def test_empty_input_is_ignored():
    parser = CommandParser()

    assert parser.parse("") is None
    assert parser.parse("   ") is None


def test_special_commands():
    parser = CommandParser()

    with pytest.raises(ValueError, match="HELP"):
        parser.parse("help")
    with pytest.raises(ValueError, match="QUIT"):
        parser.parse("q")


def test_unknown_command():
    parser = CommandParser()

    with pytest.raises(ActionParseError) as exc_info:
        parser.parse("jump")
    assert exc_info.value.error_type == ErrorType.UNKNOWN_COMMAND
    assert "jump" in exc_info.value.message


@pytest.mark.parametrize("raw", ["move sideways", "move", "move:", "move:w", "go up now"])
def test_move_with_bad_direction_is_syntax_error(raw):
    parser = CommandParser()

    with pytest.raises(ActionParseError) as exc_info:
        parser.parse(raw)
    assert exc_info.value.error_type == ErrorType.SYNTAX_ERROR


@pytest.mark.parametrize("token", ["move:up", "move:left", "move:down", "move:right", "attack"])
def test_wire_tokens_match_action_tokens(token):
    """Wire tokens parse to the same Action the token model builds."""
    parser = CommandParser()

    action = parser.parse(token)

    assert action == Action.from_token(token)
    assert action.token == token
