"""Exception hierarchy for the dungeon engine."""


class GameError(Exception):
    """Base class for engine contract violations."""


class OutOfBoundsError(GameError, IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        super().__init__(
            f"Coordinate ({x}, {y}) is outside the {width}x{height} grid"
        )


class InvalidConfigurationError(GameError, ValueError):
    """Raised at setup time when generation parameters cannot be satisfied."""
