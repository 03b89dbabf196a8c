#!/usr/bin/env python3
"""Tile Crawl - Main entry point.

A turn-based dungeon crawl: walk the procedurally carved map and defeat
every enemy before they wear you down.
"""

import argparse
import logging
import sys
from dataclasses import replace

from tilecrawl.engine.map_generator import generate_map
from tilecrawl.engine.turn_executor import TurnExecutor
from tilecrawl.interface.command_parser import ActionParseError, CommandParser
from tilecrawl.interface.renderer import MapRenderer
from tilecrawl.models.config import GameConfig
from tilecrawl.models.errors import InvalidConfigurationError
from tilecrawl.models.game import Game, GameStatus
from tilecrawl.utils.constants import RNG_SEED_DEFAULT
from tilecrawl.utils.serialization import snapshot

HELP_TEXT = """Commands:
  w/a/s/d or up/left/down/right   move one tile
  move <direction>                move one tile
  f or attack                     attack every adjacent enemy
  help                            show this help
  quit                            leave the game"""


class GameOrchestrator:
    """Manages the action loop for one human player."""

    def __init__(self, game: Game, input_fn=input, output_fn=print):
        """Initialize game orchestrator.

        Args:
            game: Generated game state
            input_fn: Callable returning one line of raw input per call
            output_fn: Callable used to print output
        """
        self.game = game
        self.turn_executor = TurnExecutor()
        self.parser = CommandParser()
        self.renderer = MapRenderer()
        self.input_fn = input_fn
        self.output_fn = output_fn

    def run(self) -> Game:
        """Main game loop."""
        self._show_state()

        try:
            while self.game.is_game_on:
                raw = self.input_fn("> ")
                try:
                    action = self.parser.parse(raw)
                except ActionParseError as e:
                    self.output_fn(e.message)
                    continue
                except ValueError as e:
                    if str(e) == "QUIT":
                        self.output_fn("Leaving the dungeon.")
                        break
                    self.output_fn(HELP_TEXT)
                    continue

                if action is None:
                    continue

                self.turn_executor.execute_action(self.game, action)
                self._show_state()

        except (KeyboardInterrupt, EOFError):
            self.output_fn("\nGame interrupted by user. Exiting...")

        if self.game.status is GameStatus.WON:
            self.output_fn("All enemies defeated. You win!")
        elif self.game.status is GameStatus.LOST:
            self.output_fn("You have fallen. Game over.")

        return self.game

    def _show_state(self) -> None:
        state = snapshot(self.game)
        self.output_fn(self.renderer.render(state))
        for line in self.renderer.render_events(state):
            self.output_fn(line)
        self.output_fn(self.renderer.render_status(state))


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Tile Crawl - Turn-based dungeon crawler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # New 40x24 dungeon with seed 42
  %(prog)s --seed 7 --enemies 3     # Specific seed, fewer enemies
  %(prog)s --width 20 --height 12   # Smaller map
        """,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RNG_SEED_DEFAULT,
        help=f"Random seed for map generation (default: {RNG_SEED_DEFAULT})",
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width in tiles")
    parser.add_argument("--height", type=int, default=None, help="Grid height in tiles")
    parser.add_argument("--enemies", type=int, default=None, help="Number of enemies")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (shows every enemy move and hit)",
    )

    args = parser.parse_args()

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    overrides = {
        key: value
        for key, value in (
            ("width", args.width),
            ("height", args.height),
            ("enemy_count", args.enemies),
        )
        if value is not None
    }

    try:
        config = replace(GameConfig(), **overrides)
        game = generate_map(args.seed, config)
    except InvalidConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(HELP_TEXT)
    GameOrchestrator(game).run()


if __name__ == "__main__":
    main()
