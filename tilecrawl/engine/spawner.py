"""Player and enemy spawning."""

import logging
from typing import Optional

from ..models.errors import InvalidConfigurationError
from ..models.game import Game
from ..models.tile import TileType
from ..models.unit import Enemy, Player
from .items import pick_tile

logger = logging.getLogger(__name__)


def add_units(game: Game, enemy_count: Optional[int] = None) -> None:
    """Place the player and the enemy roster on ground tiles.

    One ground snapshot serves every draw, with replacement, so units may
    share a tile with each other (the tile shows the last marker written)
    while each record still keeps its own position.

    Args:
        game: Current game state
        enemy_count: Enemies to spawn (defaults to game.config.enemy_count)

    Raises:
        InvalidConfigurationError: If the map has no ground tiles
    """
    config = game.config
    enemy_count = config.enemy_count if enemy_count is None else enemy_count
    if enemy_count < 0:
        raise InvalidConfigurationError(f"Invalid enemy_count: {enemy_count} (must be >= 0)")

    ground_tiles = game.grid.tiles_of_type(TileType.GROUND)
    if not ground_tiles:
        raise InvalidConfigurationError("Cannot spawn units: the map has no ground tiles")

    tile = pick_tile(game, ground_tiles)
    game.player = Player(
        hp=config.player_max_hp,
        attack_power=config.player_attack_power,
        x=tile.x,
        y=tile.y,
    )
    game.grid.set_tile_type(tile.x, tile.y, TileType.PLAYER)

    for _ in range(enemy_count):
        tile = pick_tile(game, ground_tiles)
        enemy = Enemy(
            hp=config.enemy_max_hp,
            attack_power=config.enemy_attack_power,
            x=tile.x,
            y=tile.y,
            id=game.next_enemy_id(),
        )
        game.enemies.append(enemy)
        game.grid.set_tile_type(tile.x, tile.y, TileType.ENEMY)

    logger.debug(
        f"Spawned player at ({game.player.x}, {game.player.y}) and {enemy_count} enemies"
    )
