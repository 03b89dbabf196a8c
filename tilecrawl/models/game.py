"""Game state container."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..utils import GameRNG
from .config import GameConfig
from .grid import Grid
from .room import Room
from .unit import Enemy, Player


class GameStatus(Enum):
    """Session state derived from the two game flags."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class Game:
    """Main game state container.

    The Game exclusively owns the grid, the room list, the player record and
    the enemy roster, plus the RNG every generation and combat step draws
    from. All engine functions operate on this state.
    """

    seed: int  # RNG seed
    config: GameConfig = field(default_factory=GameConfig)  # Injected settings
    rng: Optional[GameRNG] = None  # Seeded RNG instance (anything with randint)
    grid: Optional[Grid] = None  # Built from config when not provided
    rooms: list[Room] = field(default_factory=list)  # Rooms in carving order
    player: Optional[Player] = None  # Set by add_units
    enemies: list[Enemy] = field(default_factory=list)  # Live roster
    is_game_on: bool = True
    is_game_over: bool = False
    turn: int = 0  # Number of player actions executed
    enemy_counter: int = 0  # Enemy ID generation
    events_last_turn: list[dict] = field(default_factory=list)  # Combat events of last action

    def __post_init__(self):
        """Initialize RNG and grid if not provided."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if self.grid is None:
            self.grid = Grid(self.config.width, self.config.height)
        if self.turn < 0:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 0)")

    @property
    def status(self) -> GameStatus:
        if self.is_game_on:
            return GameStatus.PLAYING
        if self.is_game_over:
            return GameStatus.LOST
        return GameStatus.WON

    def next_enemy_id(self) -> str:
        self.enemy_counter += 1
        return f"e-{self.enemy_counter:03d}"
