"""Single-step unit movement.

This module handles:
1. Walkability checks (bounds and destination tile type)
2. Applying a move: clear the source tile, update the unit record,
   stamp the unit's marker on the destination

Blocked moves are silent no-ops; the caller sees an unchanged state.
"""

import logging

from ..models.action import DIRECTION_ORDER, Direction
from ..models.game import Game
from ..models.grid import Grid
from ..models.tile import WALKABLE_TYPES, TileType
from ..models.unit import Unit

logger = logging.getLogger(__name__)


def can_step_into(grid: Grid, x: int, y: int) -> bool:
    """Return True if a unit may enter (x, y).

    Ground and item tiles are walkable. Walls and tiles holding another
    unit block movement, as does leaving the grid.
    """
    if not grid.in_bounds(x, y):
        return False
    return grid.tile_type(x, y) in WALKABLE_TYPES


def move_unit(game: Game, unit: Unit, direction: Direction) -> bool:
    """Move a unit one tile in the given direction.

    Args:
        game: Current game state
        unit: Player or enemy record to move
        direction: Step direction

    Returns:
        True if the unit moved, False if the step was blocked
    """
    dx, dy = direction.delta
    new_x, new_y = unit.x + dx, unit.y + dy

    if not can_step_into(game.grid, new_x, new_y):
        return False

    game.grid.set_tile_type(unit.x, unit.y, TileType.GROUND)
    unit.x, unit.y = new_x, new_y
    game.grid.set_tile_type(new_x, new_y, unit.marker)

    return True


def random_direction(game: Game) -> Direction:
    """Draw a uniformly random direction from the game RNG."""
    return DIRECTION_ORDER[game.rng.randint(0, len(DIRECTION_ORDER) - 1)]


def move_randomly(game: Game, unit: Unit) -> bool:
    """Move a unit one step in a random direction (no-op if blocked)."""
    direction = random_direction(game)
    moved = move_unit(game, unit, direction)
    logger.debug(
        f"{type(unit).__name__} wandered {direction.value} "
        f"({'moved' if moved else 'blocked'}) to ({unit.x}, {unit.y})"
    )
    return moved
