"""Player action data model."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Direction(Enum):
    """Single-step movement directions and their (dx, dy) deltas."""

    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
}

# Index order used when an enemy draws a random direction
DIRECTION_ORDER = (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)


@dataclass(frozen=True)
class Action:
    """A discrete player action: ``move:<direction>`` or ``attack``."""

    kind: str  # "move" or "attack"
    direction: Optional[Direction] = None  # Required for "move"

    def __post_init__(self):
        """Validate action data after initialization."""
        if self.kind not in ("move", "attack"):
            raise ValueError(f"Invalid action kind: {self.kind} (must be 'move' or 'attack')")
        if self.kind == "move" and self.direction is None:
            raise ValueError("move action requires a direction")
        if self.kind == "attack" and self.direction is not None:
            raise ValueError("attack action takes no direction")

    @classmethod
    def move(cls, direction: Direction) -> "Action":
        return cls(kind="move", direction=direction)

    @classmethod
    def attack(cls) -> "Action":
        return cls(kind="attack")

    @classmethod
    def from_token(cls, token: str) -> "Action":
        """Build an Action from a ``move:<direction>`` or ``attack`` token.

        Raises:
            ValueError: If the token is not recognized
        """
        if token == "attack":
            return cls.attack()
        kind, _, name = token.partition(":")
        if kind != "move" or not name:
            raise ValueError(f"Unrecognized action token: {token!r}")
        try:
            direction = Direction(name)
        except ValueError:
            raise ValueError(f"Unrecognized direction in token: {token!r}") from None
        return cls.move(direction)

    @property
    def token(self) -> str:
        if self.kind == "attack":
            return "attack"
        return f"move:{self.direction.value}"
