"""Game state snapshots for the presentation layer.

The snapshot is a plain, JSON-compatible dictionary rebuilt from scratch on
every call. Nothing in it aliases the live game, so a renderer may keep or
mutate it freely. Sessions are never persisted; there is no loader.
"""

from typing import Any, Optional

from ..models.game import Game
from ..models.room import Room
from ..models.tile import Tile
from ..models.unit import Enemy, Player


def snapshot(game: Game) -> dict[str, Any]:
    """Convert Game object to a read-only state snapshot.

    Args:
        game: Game to snapshot

    Returns:
        Dictionary with grid, rooms, units, flags and last-turn events
    """
    return {
        "seed": game.seed,
        "turn": game.turn,
        "width": game.grid.width,
        "height": game.grid.height,
        "tiles": [_serialize_tile(t) for t in game.grid.tiles()],
        "rooms": [_serialize_room(r) for r in game.rooms],
        "units": {
            "player": _serialize_player(game.player),
            "enemies": [_serialize_enemy(e) for e in game.enemies],
        },
        "flags": {
            "isGameOn": game.is_game_on,
            "isGameOver": game.is_game_over,
        },
        "status": game.status.value,
        "events": [dict(event) for event in game.events_last_turn],
    }


def _serialize_tile(tile: Tile) -> dict[str, Any]:
    """Convert Tile to dictionary."""
    return {"type": tile.type.value, "x": tile.x, "y": tile.y}


def _serialize_room(room: Room) -> dict[str, Any]:
    """Convert Room to dictionary."""
    return {"x0": room.x0, "y0": room.y0, "x1": room.x1, "y1": room.y1}


def _serialize_player(player: Optional[Player]) -> Optional[dict[str, Any]]:
    """Convert Player to dictionary (None before units are spawned)."""
    if player is None:
        return None
    return {
        "hp": player.hp,
        "attackPower": player.attack_power,
        "x": player.x,
        "y": player.y,
    }


def _serialize_enemy(enemy: Enemy) -> dict[str, Any]:
    """Convert Enemy to dictionary."""
    return {
        "id": enemy.id,
        "hp": enemy.hp,
        "attackPower": enemy.attack_power,
        "x": enemy.x,
        "y": enemy.y,
    }
