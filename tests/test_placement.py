"""Tests for item placement and unit spawning."""

import pytest

from tilecrawl.engine import generate_map
from tilecrawl.engine.items import add_items
from tilecrawl.engine.spawner import add_units
from tilecrawl.models.config import ItemConfig
from tilecrawl.models.errors import InvalidConfigurationError
from tilecrawl.models.tile import TileType


class TestAddItems:
    """Test cosmetic item placement."""

    def test_two_swords_on_single_ground_tile(self, make_game):
        """Both draws land on the only ground tile; no error is raised."""
        game = make_game(width=3, height=3, ground=[(1, 1, 1, 1)], player=None)

        add_items(game, ItemConfig(sword_count=2, potion_count=0))

        assert game.grid.tile_type(1, 1) == TileType.SWORD
        assert game.grid.count(TileType.SWORD) == 1

    def test_last_write_wins_on_shared_tile(self, make_game):
        game = make_game(width=3, height=3, ground=[(1, 1, 1, 1)], player=None)

        add_items(game, ItemConfig(sword_count=2, potion_count=1))

        assert game.grid.tile_type(1, 1) == TileType.POTION

    def test_draws_come_from_frozen_snapshot(self, make_game, scripted_rng):
        """Index 0 keeps pointing at the first ground tile even after it was overwritten."""
        game = make_game(
            width=5,
            height=3,
            ground=[(1, 1, 3, 1)],
            player=None,
            rng=scripted_rng([0, 0, 2]),
        )

        add_items(game, ItemConfig(sword_count=2, potion_count=1))

        assert game.grid.tile_type(1, 1) == TileType.SWORD
        assert game.grid.tile_type(2, 1) == TileType.GROUND
        assert game.grid.tile_type(3, 1) == TileType.POTION

    def test_items_only_on_former_ground(self):
        game = generate_map(21)
        walls_before = game.grid.count(TileType.WALL)

        add_items(game, ItemConfig(sword_count=5, potion_count=5))

        assert game.grid.count(TileType.WALL) == walls_before

    def test_zero_items_on_empty_map_is_allowed(self, make_game):
        game = make_game(ground=[], player=None)

        add_items(game, ItemConfig(sword_count=0, potion_count=0))

        assert game.grid.count(TileType.WALL) == 25

    def test_items_on_map_without_ground_rejected(self, make_game):
        game = make_game(ground=[], player=None)

        with pytest.raises(InvalidConfigurationError):
            add_items(game, ItemConfig(sword_count=1, potion_count=0))


class TestAddUnits:
    """Test player and enemy spawning."""

    def test_records_and_markers(self, make_game, scripted_rng):
        game = make_game(
            width=5,
            height=3,
            ground=[(1, 1, 3, 1)],
            player=None,
            rng=scripted_rng([2, 0, 1]),
            player_hp=30,
            enemy_hp=12,
            enemy_attack=3,
        )

        add_units(game, 2)

        assert (game.player.x, game.player.y) == (3, 1)
        assert game.player.hp == 30
        assert [(e.id, e.x, e.y) for e in game.enemies] == [("e-001", 1, 1), ("e-002", 2, 1)]
        assert all((e.hp, e.attack_power) == (12, 3) for e in game.enemies)
        assert game.grid.tile_type(3, 1) == TileType.PLAYER
        assert game.grid.tile_type(1, 1) == TileType.ENEMY
        assert game.grid.tile_type(2, 1) == TileType.ENEMY

    def test_spawn_collision_keeps_both_records(self, make_game, scripted_rng):
        """An enemy drawn onto the player's tile overwrites the marker only."""
        game = make_game(
            width=4,
            height=3,
            ground=[(1, 1, 2, 1)],
            player=None,
            rng=scripted_rng([0, 0]),
        )

        add_units(game, 1)

        assert (game.player.x, game.player.y) == (1, 1)
        assert (game.enemies[0].x, game.enemies[0].y) == (1, 1)
        assert game.grid.tile_type(1, 1) == TileType.ENEMY
        assert game.grid.count(TileType.PLAYER) == 0

    def test_units_skip_item_tiles(self, make_game):
        """Only tiles that are ground at spawn time are candidates."""
        game = make_game(width=4, height=3, ground=[(1, 1, 2, 1)], player=None)
        game.grid.set_tile_type(1, 1, TileType.SWORD)

        add_units(game, 0)

        assert (game.player.x, game.player.y) == (2, 1)
        assert game.grid.tile_type(1, 1) == TileType.SWORD

    def test_enemy_count_defaults_to_config(self):
        game = generate_map(8)

        assert len(game.enemies) == game.config.enemy_count

    def test_no_ground_rejected(self, make_game):
        game = make_game(ground=[], player=None)

        with pytest.raises(InvalidConfigurationError):
            add_units(game, 1)

    def test_negative_enemy_count_rejected(self, make_game):
        game = make_game(player=None)

        with pytest.raises(InvalidConfigurationError):
            add_units(game, -1)
