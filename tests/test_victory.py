"""Tests for the end-of-game state machine."""

from tilecrawl.engine.victory import check_defeat, check_victory
from tilecrawl.models.game import GameStatus


def test_game_starts_playing(make_game):
    game = make_game(enemies=[(3, 3)])

    assert game.is_game_on is True
    assert game.is_game_over is False
    assert check_defeat(game) is False
    assert check_victory(game) is False
    assert game.status is GameStatus.PLAYING


def test_empty_roster_wins(make_game):
    game = make_game()

    assert check_victory(game) is True
    assert (game.is_game_on, game.is_game_over) == (False, False)


def test_fallen_player_loses(make_game):
    game = make_game(enemies=[(3, 3)])
    game.player.hp = -5

    assert check_defeat(game) is True
    assert (game.is_game_on, game.is_game_over) == (False, True)


def test_lost_is_terminal(make_game):
    """An empty roster after a loss does not turn it into a win."""
    game = make_game(enemies=[(3, 3)])
    game.player.hp = 0
    check_defeat(game)

    game.enemies.clear()

    assert check_victory(game) is False
    assert game.status is GameStatus.LOST


def test_won_is_terminal(make_game):
    """A later fall does not turn a win into a loss."""
    game = make_game()
    check_victory(game)

    game.player.hp = 0

    assert check_defeat(game) is True
    assert game.status is GameStatus.WON


def test_no_player_is_not_a_defeat(make_game):
    game = make_game(player=None, enemies=[(3, 3)])

    assert check_defeat(game) is False
    assert game.status is GameStatus.PLAYING
