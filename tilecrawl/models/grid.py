"""Tile grid storage and coordinate rules."""

from dataclasses import replace

from .errors import InvalidConfigurationError, OutOfBoundsError
from .tile import Tile, TileType


class Grid:
    """Fixed-size width x height tile storage.

    Tiles are kept in a row-major 2D list indexed ``[y][x]``, so every
    coordinate maps to exactly one Tile. The grid is the only record of what
    occupies a cell.
    """

    def __init__(self, width: int, height: int):
        """Create a grid filled with walls.

        Args:
            width: Number of columns
            height: Number of rows
        """
        self.width = 0
        self.height = 0
        self._rows: list[list[Tile]] = []
        self.initialize(width, height)

    def initialize(self, width: int, height: int) -> None:
        """Reset the grid to width x height WALL tiles, row-major.

        Raises:
            InvalidConfigurationError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise InvalidConfigurationError(
                f"Invalid grid size: {width}x{height} (both must be > 0)"
            )
        self.width = width
        self.height = height
        self._rows = [
            [Tile(type=TileType.WALL, x=x, y=y) for x in range(width)]
            for y in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Tile:
        """Return the live tile at (x, y).

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid
        """
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self._rows[y][x]

    def tile_type(self, x: int, y: int) -> TileType:
        return self.get_tile(x, y).type

    def set_tile_type(self, x: int, y: int, tile_type: TileType) -> None:
        """Overwrite the type of the tile at (x, y) in place.

        Raises:
            OutOfBoundsError: If (x, y) is outside the grid
        """
        self.get_tile(x, y).type = tile_type

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, tile_type: TileType) -> None:
        """Overwrite every tile in the inclusive rectangle (x0, y0)-(x1, y1).

        Raises:
            OutOfBoundsError: If either corner is outside the grid
        """
        if not self.in_bounds(x0, y0):
            raise OutOfBoundsError(x0, y0, self.width, self.height)
        if not self.in_bounds(x1, y1):
            raise OutOfBoundsError(x1, y1, self.width, self.height)
        for y in range(y0, y1 + 1):
            for x in range(x0, x1 + 1):
                self._rows[y][x].type = tile_type

    def tiles_of_type(self, tile_type: TileType) -> list[Tile]:
        """Return copies of all tiles of the given type, row-major.

        The result is a point-in-time snapshot: later grid writes do not
        show up in it.
        """
        return [replace(tile) for row in self._rows for tile in row if tile.type == tile_type]

    def tiles(self) -> list[Tile]:
        """Return copies of every tile, row-major."""
        return [replace(tile) for row in self._rows for tile in row]

    def count(self, tile_type: TileType) -> int:
        return sum(1 for row in self._rows for tile in row if tile.type == tile_type)

    def __len__(self) -> int:
        return self.width * self.height
