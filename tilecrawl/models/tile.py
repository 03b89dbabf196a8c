"""Tile data model."""

from dataclasses import dataclass
from enum import Enum


class TileType(Enum):
    """Logical content of a grid cell.

    Values double as the style tags a renderer attaches to each cell.
    """

    WALL = "tile-w"
    GROUND = "tile"
    PLAYER = "tile-p"
    ENEMY = "tile-e"
    SWORD = "tile-sw"
    POTION = "tile-hp"


# Tile types a unit may step onto
WALKABLE_TYPES = frozenset({TileType.GROUND, TileType.POTION, TileType.SWORD})


@dataclass
class Tile:
    """One grid cell: its current type and coordinate."""

    type: TileType
    x: int
    y: int
