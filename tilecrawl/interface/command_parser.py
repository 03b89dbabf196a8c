"""Raw input parser for human players.

This module turns keyboard-style input such as "w", "move up" or
"attack" into Action objects the turn executor can run.
"""

import re
from enum import Enum
from typing import Optional

from ..models.action import Action, Direction

# Single-key and word aliases for each direction
DIRECTION_ALIASES = {
    "w": Direction.UP,
    "up": Direction.UP,
    "north": Direction.UP,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "west": Direction.LEFT,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "south": Direction.DOWN,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
    "east": Direction.RIGHT,
}

ATTACK_ALIASES = ("attack", "f", "hit", "fight")

MOVE_VERBS = ("move", "go", "walk")


class ErrorType(Enum):
    """Classification of action input errors."""
    UNKNOWN_COMMAND = "unknown_command"
    SYNTAX_ERROR = "syntax_error"


class ActionParseError(Exception):
    """Raised when action parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class CommandParser:
    """Parse raw player input into Actions."""

    def parse(self, command: str) -> Optional[Action]:
        """Parse a command string into an Action.

        Supported formats:
        - "w" / "a" / "s" / "d"
        - "up" / "left" / "down" / "right" (also north/west/south/east)
        - "move <direction>", "go <direction>", "move:<direction>"
        - "attack" / "f" / "hit"

        Special commands:
        - "" (empty input) returns None
        - "help" raises ValueError("HELP")
        - "quit" raises ValueError("QUIT")

        Args:
            command: Command string to parse

        Returns:
            Action if parsed successfully, None for empty input

        Raises:
            ActionParseError: If the input is not a recognized action
        """
        cmd = command.strip().lower()

        if not cmd:
            return None

        if cmd in ("help", "h", "?"):
            raise ValueError("HELP")  # Special signal for help

        if cmd in ("quit", "exit", "q"):
            raise ValueError("QUIT")  # Special signal for quit

        if cmd in ATTACK_ALIASES:
            return Action.attack()

        if cmd in DIRECTION_ALIASES:
            return Action.move(DIRECTION_ALIASES[cmd])

        action = self._parse_token_pattern(cmd) or self._parse_move_pattern(cmd)
        if action is not None:
            return action

        first_word = re.split(r"[\s:]+", cmd)[0]
        if first_word in MOVE_VERBS:
            raise ActionParseError(
                ErrorType.SYNTAX_ERROR,
                f"Syntax error: unknown direction in '{cmd}'\n"
                "Correct format: move <up|left|down|right>",
            )

        raise ActionParseError(ErrorType.UNKNOWN_COMMAND, f"Unknown command: '{first_word}'")

    def _parse_token_pattern(self, cmd: str) -> Optional[Action]:
        """Parse the wire format 'move:<direction>'.

        Only canonical direction names are accepted here; unrecognized
        tokens fall through to the error reporting in parse().
        """
        if ":" not in cmd:
            return None
        try:
            return Action.from_token(cmd)
        except ValueError:
            return None

    def _parse_move_pattern(self, cmd: str) -> Optional[Action]:
        """Parse 'move <direction>' and its verb variants."""
        match = re.fullmatch(r"(\w+)\s+(\w+)", cmd)
        if match and match.group(1) in MOVE_VERBS and match.group(2) in DIRECTION_ALIASES:
            return Action.move(DIRECTION_ALIASES[match.group(2)])
        return None
