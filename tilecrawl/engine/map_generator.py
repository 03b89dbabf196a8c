"""Dungeon map generation: rooms carved from solid wall plus passages.

Algorithm:
1. Fill the grid with walls
2. Carve a random number of rectangular rooms at random positions
   (overlaps are allowed and left as they fall)
3. For every room, carve one full-width row and one full-height column
   through it; passages touch the grid border, which links all rooms
4. Scatter item markers and spawn units on the carved ground
"""

import logging
from typing import Optional

from ..models.config import GameConfig, RoomConfig
from ..models.errors import InvalidConfigurationError
from ..models.game import Game
from ..models.room import Room
from ..models.tile import TileType
from ..utils import GameRNG
from .items import add_items
from .spawner import add_units

logger = logging.getLogger(__name__)


def generate_map(
    seed: int,
    config: Optional[GameConfig] = None,
    rng: Optional[GameRNG] = None,
) -> Game:
    """Generate a complete, ready-to-play game session.

    Args:
        seed: RNG seed for deterministic generation
        config: Session configuration (defaults to GameConfig())
        rng: Optional RNG to inject instead of GameRNG(seed)

    Returns:
        Game with carved map, item markers, player and enemy roster
    """
    config = config or GameConfig()
    game = Game(seed=seed, config=config, rng=rng or GameRNG(seed))

    initialize(game)
    add_rooms(game, config.rooms)
    add_passages(game)
    add_items(game, config.items)
    add_units(game, config.enemy_count)

    logger.info(
        f"Generated {config.width}x{config.height} map (seed={seed}): "
        f"{len(game.rooms)} rooms, {len(game.enemies)} enemies, "
        f"{game.grid.count(TileType.GROUND)} open ground tiles"
    )

    return game


def initialize(game: Game, width: Optional[int] = None, height: Optional[int] = None) -> None:
    """Reset the map to solid wall and forget all rooms.

    Args:
        game: Game whose grid is reset
        width: Grid width (defaults to game.config.width)
        height: Grid height (defaults to game.config.height)
    """
    width = game.config.width if width is None else width
    height = game.config.height if height is None else height
    game.grid.initialize(width, height)
    game.rooms = []


def add_rooms(game: Game, room_config: Optional[RoomConfig] = None) -> list[Room]:
    """Carve a random number of rooms into the grid.

    Args:
        game: Current game state
        room_config: Room parameters (defaults to game.config.rooms)

    Returns:
        The rooms carved by this call, in carving order

    Raises:
        InvalidConfigurationError: If max_size does not fit the grid
    """
    room_config = room_config or game.config.rooms
    grid = game.grid

    if room_config.max_count > 0 and (
        room_config.max_size > grid.width - 1 or room_config.max_size > grid.height - 1
    ):
        raise InvalidConfigurationError(
            f"Room max_size {room_config.max_size} does not fit a "
            f"{grid.width}x{grid.height} grid"
        )

    room_count = game.rng.randint(room_config.min_count, room_config.max_count)

    added = []
    for _ in range(room_count):
        room = _calc_room_coords(game, room_config)
        grid.fill_rect(room.x0, room.y0, room.x1, room.y1, TileType.GROUND)
        game.rooms.append(room)
        added.append(room)

    logger.debug(f"Carved {room_count} rooms: {[room.as_tuple() for room in added]}")

    return added


def add_passages(game: Game) -> None:
    """Carve one horizontal and one vertical passage through every room.

    Args:
        game: Current game state
    """
    for room in game.rooms:
        _add_passage_x(game, room)
        _add_passage_y(game, room)


def _calc_room_coords(game: Game, room_config: RoomConfig) -> Room:
    """Draw a room rectangle that lies fully inside the grid."""
    rng = game.rng
    grid = game.grid

    room_width = rng.randint(room_config.min_size, room_config.max_size)
    room_height = rng.randint(room_config.min_size, room_config.max_size)

    x0 = rng.randint(0, grid.width - 1 - room_width)
    y0 = rng.randint(0, grid.height - 1 - room_height)

    return Room(x0=x0, y0=y0, x1=x0 + room_width, y1=y0 + room_height)


def _add_passage_x(game: Game, room: Room) -> None:
    """Carve a full-width row at a random y within the room."""
    y = game.rng.randint(room.y0, room.y1)
    game.grid.fill_rect(0, y, game.grid.width - 1, y, TileType.GROUND)


def _add_passage_y(game: Game, room: Room) -> None:
    """Carve a full-height column at a random x within the room."""
    x = game.rng.randint(room.x0, room.x1)
    game.grid.fill_rect(x, 0, x, game.grid.height - 1, TileType.GROUND)
