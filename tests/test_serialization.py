"""Tests for state snapshots."""

from tilecrawl.engine.map_generator import generate_map
from tilecrawl.models.tile import TileType
from tilecrawl.utils.serialization import snapshot


def test_snapshot_shape():
    game = generate_map(seed=42)

    state = snapshot(game)

    assert state["width"] == 40
    assert state["height"] == 24
    assert len(state["tiles"]) == 40 * 24
    assert len(state["rooms"]) == len(game.rooms)
    assert state["flags"] == {"isGameOn": True, "isGameOver": False}
    assert state["status"] == "playing"
    assert state["turn"] == 0
    assert state["seed"] == 42
    assert state["units"]["player"] == {
        "hp": game.player.hp,
        "attackPower": game.player.attack_power,
        "x": game.player.x,
        "y": game.player.y,
    }
    assert [e["id"] for e in state["units"]["enemies"]] == [e.id for e in game.enemies]


def test_snapshot_uses_tile_tags(make_game):
    state = snapshot(make_game())

    assert state["tiles"][0] == {"type": "tile-w", "x": 0, "y": 0}
    assert {"type": "tile-p", "x": 2, "y": 2} in state["tiles"]
    assert state["rooms"] == [{"x0": 1, "y0": 1, "x1": 3, "y1": 3}]


def test_snapshot_does_not_alias_game(make_game):
    game = make_game(enemies=[(3, 3)])
    state = snapshot(game)

    state["tiles"][0]["type"] = "tile"
    state["units"]["enemies"][0]["hp"] = 0
    state["rooms"].clear()

    assert game.grid.tile_type(0, 0) == TileType.WALL
    assert game.enemies[0].hp == 40
    assert len(game.rooms) == 1


def test_snapshot_before_units(make_game):
    state = snapshot(make_game(player=None))

    assert state["units"] == {"player": None, "enemies": []}
