"""Utility functions and constants for Tile Crawl."""

from .constants import (
    ENEMIES_INITIAL_ATTACK_POWER,
    ENEMIES_MAX_HP,
    ENEMY_COUNT,
    MAP_HEIGHT,
    MAP_WIDTH,
    PLAYER_INITIAL_ATTACK_POWER,
    PLAYER_MAX_HP,
    POTION_COUNT,
    RNG_SEED_DEFAULT,
    ROOM_MAX_SIZE,
    ROOM_MIN_SIZE,
    ROOMS_MAX_COUNT,
    ROOMS_MIN_COUNT,
    SWORD_COUNT,
)
from .distance import chebyshev_distance
from .rng import GameRNG

__all__ = [
    "ENEMIES_INITIAL_ATTACK_POWER",
    "ENEMIES_MAX_HP",
    "ENEMY_COUNT",
    "MAP_HEIGHT",
    "MAP_WIDTH",
    "PLAYER_INITIAL_ATTACK_POWER",
    "PLAYER_MAX_HP",
    "POTION_COUNT",
    "RNG_SEED_DEFAULT",
    "ROOM_MAX_SIZE",
    "ROOM_MIN_SIZE",
    "ROOMS_MAX_COUNT",
    "ROOMS_MIN_COUNT",
    "SWORD_COUNT",
    "chebyshev_distance",
    "GameRNG",
]
