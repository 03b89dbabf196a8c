"""End-of-game state machine.

States are PLAYING, WON and LOST. Only PLAYING has outgoing transitions:
- Player hit points reach 0 → LOST (is_game_on=False, is_game_over=True)
- Enemy roster becomes empty → WON (is_game_on=False, is_game_over=False)
"""

import logging

from ..models.game import Game, GameStatus

logger = logging.getLogger(__name__)


def check_defeat(game: Game) -> bool:
    """Transition to LOST if the player has fallen.

    Args:
        game: Current game state

    Returns:
        True if the player is down (whether or not this call transitioned)
    """
    if game.player is None or game.player.is_alive:
        return False

    if game.is_game_on:
        game.is_game_on = False
        game.is_game_over = True
        logger.info(f"Player defeated on turn {game.turn} with hp={game.player.hp}")

    return True


def check_victory(game: Game) -> bool:
    """Transition to WON if the enemy roster is empty.

    Args:
        game: Current game state

    Returns:
        True if the game is in the WON state after the check
    """
    if game.is_game_on and not game.enemies:
        game.is_game_on = False
        game.is_game_over = False
        logger.info(f"All enemies defeated on turn {game.turn}")

    return game.status is GameStatus.WON
