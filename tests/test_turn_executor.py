"""Tests for the action orchestrator."""

from tilecrawl.engine.turn_executor import TurnExecutor
from tilecrawl.models.action import Action, Direction
from tilecrawl.models.game import GameStatus


class TestTurnExecutor:
    """Test action dispatch and turn bookkeeping."""

    def test_move_action(self, make_game):
        game = make_game()
        executor = TurnExecutor()

        results = executor.execute_action(game, Action.from_token("move:up"))

        assert results.moved is True
        assert results.action.token == "move:up"
        assert (game.player.x, game.player.y) == (2, 1)
        assert game.turn == 1

    def test_blocked_move_still_counts_as_turn(self, make_game):
        """Enemies react even when the player bumps into a wall."""
        game = make_game(player=(1, 1), enemies=[(2, 2)])

        results = TurnExecutor().execute_move(game, Direction.UP)

        assert results.moved is False
        assert game.turn == 1
        assert game.player.hp == 90

    def test_attack_action_records_events(self, make_game):
        game = make_game(enemies=[(2, 3)], player_attack=40)

        results = TurnExecutor().execute_action(game, Action.attack())

        assert results.moved is False
        assert [e.kind for e in results.events] == [
            "player_attack",
            "enemy_attack",
            "enemy_defeated",
        ]
        assert game.events_last_turn == [e.to_dict() for e in results.events]
        assert game.events_last_turn[0] == {
            "kind": "player_attack",
            "attacker": "player",
            "defender": "e-001",
            "damage": 40,
            "target_hp": 0,
        }
        assert game.status is GameStatus.WON

    def test_events_replaced_each_turn(self, make_game):
        game = make_game(enemies=[(3, 3)], player_attack=10)
        executor = TurnExecutor()

        executor.execute_attack(game)
        assert len(game.events_last_turn) == 2

        executor.execute_move(game, Direction.LEFT)
        # Player moved to (1,2); enemy at (3,3) is out of reach and wanders
        assert game.events_last_turn == []
        assert game.turn == 2

    def test_actions_after_game_end_are_still_well_defined(self, make_game):
        """The executor does not block calls after a terminal state."""
        game = make_game(enemies=[(2, 3)], player_attack=40)
        executor = TurnExecutor()
        executor.execute_attack(game)
        assert game.status is GameStatus.WON

        results = executor.execute_move(game, Direction.UP)

        assert results.moved is True
        assert game.status is GameStatus.WON
