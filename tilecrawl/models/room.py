"""Room data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Room:
    """Axis-aligned rectangle of carved ground, inclusive on both corners.

    Rooms are recorded in generation order and never deduplicated, so two
    rooms may overlap or even coincide.
    """

    x0: int  # Left column
    y0: int  # Top row
    x1: int  # Right column (inclusive)
    y1: int  # Bottom row (inclusive)

    def __post_init__(self):
        """Validate corner ordering."""
        if self.x0 < 0 or self.y0 < 0:
            raise ValueError(f"Invalid room origin: ({self.x0}, {self.y0}) (must be >= 0)")
        if self.x1 < self.x0:
            raise ValueError(f"Invalid room: x1={self.x1} < x0={self.x0}")
        if self.y1 < self.y0:
            raise ValueError(f"Invalid room: y1={self.y1} < y0={self.y0}")

    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the room."""
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x0, self.y0, self.x1, self.y1)
