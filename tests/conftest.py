"""Shared fixtures for building small, hand-laid dungeons."""

import pytest

from tilecrawl.models.config import GameConfig, ItemConfig, RoomConfig
from tilecrawl.models.game import Game
from tilecrawl.models.room import Room
from tilecrawl.models.tile import TileType
from tilecrawl.models.unit import Enemy, Player


class FixedRNG:
    """RNG stand-in that always draws the same value, clamped into [a, b].

    With the default value 0 every random direction is UP and every sampled
    tile is the first one.
    """

    def __init__(self, value: int = 0):
        self.value = value
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return min(max(self.value, a), b)


class ScriptedRNG:
    """RNG stand-in that replays a list of draws, then falls back to the lower bound."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, a: int, b: int) -> int:
        if not self.values:
            return a
        value = self.values.pop(0)
        assert a <= value <= b, f"scripted draw {value} outside [{a}, {b}]"
        return value


def build_game(
    width=5,
    height=5,
    ground=((1, 1, 3, 3),),
    player=(2, 2),
    enemies=(),
    rng=None,
    player_hp=100,
    player_attack=20,
    enemy_hp=40,
    enemy_attack=10,
):
    """Build a game with explicit rooms and unit positions.

    Args:
        ground: Inclusive (x0, y0, x1, y1) rectangles carved as rooms
        player: Player position, or None to skip the player
        enemies: Enemy positions in roster order
        rng: RNG to inject (defaults to FixedRNG(0))
    """
    config = GameConfig(
        width=width,
        height=height,
        rooms=RoomConfig(min_count=0, max_count=0, min_size=0, max_size=0),
        items=ItemConfig(sword_count=0, potion_count=0),
        enemy_count=len(enemies),
        player_max_hp=player_hp,
        player_attack_power=player_attack,
        enemy_max_hp=enemy_hp,
        enemy_attack_power=enemy_attack,
    )
    game = Game(seed=0, config=config, rng=rng if rng is not None else FixedRNG(0))

    for x0, y0, x1, y1 in ground:
        game.grid.fill_rect(x0, y0, x1, y1, TileType.GROUND)
        game.rooms.append(Room(x0=x0, y0=y0, x1=x1, y1=y1))

    if player is not None:
        game.player = Player(hp=player_hp, attack_power=player_attack, x=player[0], y=player[1])
        game.grid.set_tile_type(player[0], player[1], TileType.PLAYER)

    for x, y in enemies:
        game.enemies.append(
            Enemy(hp=enemy_hp, attack_power=enemy_attack, x=x, y=y, id=game.next_enemy_id())
        )
        game.grid.set_tile_type(x, y, TileType.ENEMY)

    return game


@pytest.fixture
def make_game():
    """Factory fixture returning build_game."""
    return build_game


@pytest.fixture
def fixed_rng():
    """Factory fixture returning the FixedRNG class."""
    return FixedRNG


@pytest.fixture
def scripted_rng():
    """Factory fixture returning the ScriptedRNG class."""
    return ScriptedRNG
