"""ASCII map rendering from a state snapshot.

This module draws the tile grid as text, one character per tile, using the
snapshot produced by ``utils.serialization.snapshot``.
"""

from ..models.tile import TileType

TILE_CHARS = {
    TileType.WALL.value: "#",
    TileType.GROUND.value: ".",
    TileType.PLAYER.value: "@",
    TileType.ENEMY.value: "E",
    TileType.SWORD.value: "/",
    TileType.POTION.value: "!",
}


class MapRenderer:
    """Renders the dungeon snapshot as ASCII art."""

    def render(self, state: dict) -> str:
        """Render the tile grid.

        Legend:
        - '#' = wall
        - '.' = ground
        - '@' = player
        - 'E' = enemy
        - '/' = sword
        - '!' = potion

        Args:
            state: Snapshot dictionary

        Returns:
            Multi-line string, one line per grid row
        """
        grid = [["?"] * state["width"] for _ in range(state["height"])]

        for tile in state["tiles"]:
            grid[tile["y"]][tile["x"]] = TILE_CHARS[tile["type"]]

        return "\n".join("".join(row) for row in grid)

    def render_status(self, state: dict) -> str:
        """Render the one-line status bar below the map."""
        player = state["units"]["player"]
        hp = player["hp"] if player else "-"
        attack = player["attackPower"] if player else "-"
        enemies = len(state["units"]["enemies"])
        return (
            f"Turn {state['turn']} | HP {hp} | ATK {attack} | "
            f"Enemies {enemies} | {state['status'].upper()}"
        )

    def render_events(self, state: dict) -> list[str]:
        """Describe last turn's combat events, one line each."""
        lines = []
        for event in state["events"]:
            if event["kind"] == "enemy_defeated":
                lines.append(f"{event['defender']} is defeated")
            else:
                lines.append(
                    f"{event['attacker']} hits {event['defender']} for "
                    f"{event['damage']} (hp {event['target_hp']})"
                )
        return lines
