"""Player actions and enemy reactions.

This module handles:
1. Adjacency (8-directional, Chebyshev distance <= 1)
2. The move action: player steps, then every enemy strikes or wanders
3. The attack action: player hits each adjacent enemy, which strikes back;
   defeated enemies leave the roster and the board

Only the attack action can remove enemies or win the game. Moving never
deals damage to enemies, so the move pass skips the victory check.
"""

import logging
from dataclasses import asdict, dataclass

from ..models.action import Direction
from ..models.game import Game
from ..models.tile import TileType
from ..models.unit import Enemy, Unit
from ..utils.distance import chebyshev_distance
from .movement import move_randomly, move_unit
from .victory import check_defeat, check_victory

logger = logging.getLogger(__name__)

PLAYER_ID = "player"


@dataclass
class CombatEvent:
    """Record of a hit or a defeat.

    Attributes:
        kind: "enemy_attack", "player_attack" or "enemy_defeated"
        attacker: "player" or an enemy ID
        defender: "player" or an enemy ID
        damage: Hit points removed (0 for "enemy_defeated")
        target_hp: Defender hit points after the event
    """

    kind: str
    attacker: str
    defender: str
    damage: int
    target_hp: int

    def to_dict(self) -> dict:
        return asdict(self)


def is_adjacent(a: Unit, b: Unit) -> bool:
    """Return True if two units touch, diagonals included."""
    return chebyshev_distance(a.x, a.y, b.x, b.y) <= 1


def move_player(game: Game, direction: Direction) -> tuple[bool, list[CombatEvent]]:
    """Execute the move action.

    1. Move the player one step (no-op if blocked)
    2. For each enemy in roster order:
       - Adjacent to the player: strike the player, then check for defeat
       - Otherwise: wander one step in a random direction
    The pass stops as soon as the player falls.

    Args:
        game: Current game state
        direction: Player step direction

    Returns:
        Tuple of (whether the player moved, combat events)
    """
    moved = move_unit(game, game.player, direction)
    logger.debug(
        f"Player move {direction.value}: {'moved' if moved else 'blocked'} "
        f"at ({game.player.x}, {game.player.y})"
    )

    events: list[CombatEvent] = []
    for enemy in list(game.enemies):
        if is_adjacent(enemy, game.player):
            events.append(_enemy_strike(game, enemy))
            if check_defeat(game):
                break
        else:
            move_randomly(game, enemy)

    return moved, events


def attack_enemies(game: Game) -> list[CombatEvent]:
    """Execute the attack action.

    For each enemy in roster order:
    - Not adjacent: the enemy wanders instead and no damage is exchanged
    - Adjacent: the player hits it, it strikes back, and if its hit points
      dropped to 0 or below it is removed and its tile reset to ground
    After each enemy the roster is checked for victory, so an attack against
    an already empty roster leaves the game as it was. The pass stops once
    the player falls, after the current enemy has been cleaned up.

    Args:
        game: Current game state

    Returns:
        Combat events in the order they happened
    """
    player = game.player
    events: list[CombatEvent] = []

    for enemy in list(game.enemies):
        if not is_adjacent(enemy, player):
            move_randomly(game, enemy)
            check_victory(game)
            continue

        enemy.hp -= player.attack_power
        events.append(
            CombatEvent(
                kind="player_attack",
                attacker=PLAYER_ID,
                defender=enemy.id,
                damage=player.attack_power,
                target_hp=enemy.hp,
            )
        )

        events.append(_enemy_strike(game, enemy))
        player_down = check_defeat(game)

        if not enemy.is_alive:
            _remove_enemy(game, enemy)
            events.append(
                CombatEvent(
                    kind="enemy_defeated",
                    attacker=PLAYER_ID,
                    defender=enemy.id,
                    damage=0,
                    target_hp=enemy.hp,
                )
            )

        check_victory(game)

        if player_down:
            break

    return events


def _enemy_strike(game: Game, enemy: Enemy) -> CombatEvent:
    """Apply one enemy hit to the player."""
    game.player.hp -= enemy.attack_power
    logger.debug(f"Enemy {enemy.id} hits player for {enemy.attack_power} (hp={game.player.hp})")
    return CombatEvent(
        kind="enemy_attack",
        attacker=enemy.id,
        defender=PLAYER_ID,
        damage=enemy.attack_power,
        target_hp=game.player.hp,
    )


def _remove_enemy(game: Game, enemy: Enemy) -> None:
    """Drop a defeated enemy from the roster and clear its tile."""
    index = next(i for i, other in enumerate(game.enemies) if other is enemy)
    del game.enemies[index]
    game.grid.set_tile_type(enemy.x, enemy.y, TileType.GROUND)
    logger.debug(f"Enemy {enemy.id} defeated at ({enemy.x}, {enemy.y})")
