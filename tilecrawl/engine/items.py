"""Cosmetic item marker placement.

Items are decoration only: stepping onto one has no effect beyond
clearing the marker when the unit walks away.
"""

import logging
from typing import Optional

from ..models.config import ItemConfig
from ..models.errors import InvalidConfigurationError
from ..models.game import Game
from ..models.tile import Tile, TileType

logger = logging.getLogger(__name__)


def add_items(game: Game, item_config: Optional[ItemConfig] = None) -> None:
    """Scatter sword and potion markers over ground tiles.

    The ground population is sampled once, before anything is placed, and
    every draw is taken with replacement from that frozen list. Two markers
    may therefore land on the same tile; the later write wins.

    Args:
        game: Current game state
        item_config: Item counts (defaults to game.config.items)

    Raises:
        InvalidConfigurationError: If items are requested but there is no ground
    """
    item_config = item_config or game.config.items
    ground_tiles = game.grid.tiles_of_type(TileType.GROUND)

    placements = (
        (TileType.SWORD, item_config.sword_count),
        (TileType.POTION, item_config.potion_count),
    )

    if not ground_tiles and any(count > 0 for _, count in placements):
        raise InvalidConfigurationError("Cannot place items: the map has no ground tiles")

    for tile_type, count in placements:
        for _ in range(count):
            tile = pick_tile(game, ground_tiles)
            game.grid.set_tile_type(tile.x, tile.y, tile_type)

    logger.debug(
        f"Placed {item_config.sword_count} swords and {item_config.potion_count} potions "
        f"over {len(ground_tiles)} ground tiles"
    )


def pick_tile(game: Game, tiles: list[Tile]) -> Tile:
    """Draw one tile uniformly from a non-empty list."""
    return tiles[game.rng.randint(0, len(tiles) - 1)]
