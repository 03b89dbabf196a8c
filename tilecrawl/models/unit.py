"""Player and enemy unit records."""

from dataclasses import dataclass
from typing import ClassVar

from .tile import TileType


@dataclass
class Unit:
    """A creature standing on the grid.

    The record tracks its own logical position. The grid tile at that
    position normally carries the unit's marker, but a later placement may
    overwrite it during spawning.
    """

    hp: int  # Hit points; the unit is down at <= 0
    attack_power: int  # Damage dealt per hit
    x: int  # Current column
    y: int  # Current row

    marker: ClassVar[TileType]

    def __post_init__(self):
        """Validate unit data after initialization."""
        if self.attack_power < 0:
            raise ValueError(f"Invalid attack_power: {self.attack_power} (must be >= 0)")

    @property
    def is_alive(self) -> bool:
        return self.hp > 0


@dataclass
class Player(Unit):
    """The single unit driven by player actions."""

    marker: ClassVar[TileType] = TileType.PLAYER


@dataclass
class Enemy(Unit):
    """Member of the enemy roster."""

    id: str = ""  # Spawn-order identifier (e.g., "e-003")

    marker: ClassVar[TileType] = TileType.ENEMY
