"""Player action orchestrator.

A turn is one player action followed by every enemy's reaction:
- move:<direction> → combat.move_player
- attack → combat.attack_enemies

The whole turn runs to completion before control returns. After it, the
turn counter is incremented and the turn's combat events are stored on the
game so the boundary layer can present them with the next snapshot.

Architecture:
Each action is an independent method; execute_action dispatches a parsed
Action to the matching method.
"""

import logging
from dataclasses import dataclass, field

from ..models.action import Action, Direction
from ..models.game import Game
from .combat import CombatEvent, attack_enemies, move_player

logger = logging.getLogger(__name__)


@dataclass
class TurnResults:
    """Outcome of one player action.

    Attributes:
        action: The action that was executed
        moved: Whether the player changed position (always False for attack)
        events: Combat events in the order they happened
    """

    action: Action
    moved: bool = False
    events: list[CombatEvent] = field(default_factory=list)


class TurnExecutor:
    """Runs player actions against a game and records their results."""

    def execute_move(self, game: Game, direction: Direction) -> TurnResults:
        """Move the player, then let every enemy react.

        Args:
            game: Current game state
            direction: Player step direction

        Returns:
            TurnResults for the move
        """
        moved, events = move_player(game, direction)
        results = TurnResults(action=Action.move(direction), moved=moved, events=events)
        return self._finish_turn(game, results)

    def execute_attack(self, game: Game) -> TurnResults:
        """Attack every adjacent enemy.

        Args:
            game: Current game state

        Returns:
            TurnResults for the attack
        """
        events = attack_enemies(game)
        return self._finish_turn(game, TurnResults(action=Action.attack(), events=events))

    def execute_action(self, game: Game, action: Action) -> TurnResults:
        """Dispatch a parsed action to the matching method."""
        if action.kind == "attack":
            return self.execute_attack(game)
        return self.execute_move(game, action.direction)

    def _finish_turn(self, game: Game, results: TurnResults) -> TurnResults:
        """Store events on the game and advance the turn counter."""
        game.events_last_turn = [event.to_dict() for event in results.events]
        game.turn += 1

        logger.info(
            f"Turn {game.turn}: {results.action.token} "
            f"({len(results.events)} events, player hp={game.player.hp}, "
            f"{len(game.enemies)} enemies left, status={game.status.value})"
        )

        return results
