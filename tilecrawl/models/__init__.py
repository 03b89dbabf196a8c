"""Data models for Tile Crawl."""

from .action import Action, Direction
from .config import GameConfig, ItemConfig, RoomConfig
from .errors import GameError, InvalidConfigurationError, OutOfBoundsError
from .game import Game, GameStatus
from .grid import Grid
from .room import Room
from .tile import Tile, TileType
from .unit import Enemy, Player, Unit

__all__ = [
    "Action",
    "Direction",
    "GameConfig",
    "ItemConfig",
    "RoomConfig",
    "GameError",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "Game",
    "GameStatus",
    "Grid",
    "Room",
    "Tile",
    "TileType",
    "Enemy",
    "Player",
    "Unit",
]
