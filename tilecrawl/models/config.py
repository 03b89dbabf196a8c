"""Generation and combat configuration."""

from dataclasses import dataclass, field

from ..utils import (
    ENEMIES_INITIAL_ATTACK_POWER,
    ENEMIES_MAX_HP,
    ENEMY_COUNT,
    MAP_HEIGHT,
    MAP_WIDTH,
    PLAYER_INITIAL_ATTACK_POWER,
    PLAYER_MAX_HP,
    POTION_COUNT,
    ROOM_MAX_SIZE,
    ROOM_MIN_SIZE,
    ROOMS_MAX_COUNT,
    ROOMS_MIN_COUNT,
    SWORD_COUNT,
)
from .errors import InvalidConfigurationError


@dataclass(frozen=True)
class RoomConfig:
    """Parameters for room carving.

    Sizes are 0 based: a room of size ``s`` spans ``s + 1`` tiles.
    """

    min_count: int = ROOMS_MIN_COUNT
    max_count: int = ROOMS_MAX_COUNT
    min_size: int = ROOM_MIN_SIZE
    max_size: int = ROOM_MAX_SIZE

    def __post_init__(self):
        """Fail fast on empty or negative ranges."""
        if self.min_count < 0:
            raise InvalidConfigurationError(
                f"Invalid min_count: {self.min_count} (must be >= 0)"
            )
        if self.min_count > self.max_count:
            raise InvalidConfigurationError(
                f"Invalid room count range: min_count={self.min_count} > max_count={self.max_count}"
            )
        if self.min_size < 0:
            raise InvalidConfigurationError(
                f"Invalid min_size: {self.min_size} (must be >= 0)"
            )
        if self.min_size > self.max_size:
            raise InvalidConfigurationError(
                f"Invalid room size range: min_size={self.min_size} > max_size={self.max_size}"
            )


@dataclass(frozen=True)
class ItemConfig:
    """Number of cosmetic item markers to scatter."""

    sword_count: int = SWORD_COUNT
    potion_count: int = POTION_COUNT

    def __post_init__(self):
        if self.sword_count < 0:
            raise InvalidConfigurationError(
                f"Invalid sword_count: {self.sword_count} (must be >= 0)"
            )
        if self.potion_count < 0:
            raise InvalidConfigurationError(
                f"Invalid potion_count: {self.potion_count} (must be >= 0)"
            )


@dataclass(frozen=True)
class GameConfig:
    """Complete session configuration injected into a Game.

    Attributes:
        width: Grid width in tiles
        height: Grid height in tiles
        rooms: Room carving parameters
        items: Item marker counts
        enemy_count: Number of enemies spawned
        player_max_hp: Player starting hit points
        player_attack_power: Damage the player deals per hit
        enemy_max_hp: Enemy starting hit points
        enemy_attack_power: Damage each enemy deals per hit
    """

    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    rooms: RoomConfig = field(default_factory=RoomConfig)
    items: ItemConfig = field(default_factory=ItemConfig)
    enemy_count: int = ENEMY_COUNT
    player_max_hp: int = PLAYER_MAX_HP
    player_attack_power: int = PLAYER_INITIAL_ATTACK_POWER
    enemy_max_hp: int = ENEMIES_MAX_HP
    enemy_attack_power: int = ENEMIES_INITIAL_ATTACK_POWER

    def __post_init__(self):
        """Validate cross-field constraints."""
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfigurationError(
                f"Invalid grid size: {self.width}x{self.height} (both must be > 0)"
            )
        # A room of size s needs x0 in [0, width - 1 - s]
        if self.rooms.max_count > 0 and self.rooms.max_size > min(self.width, self.height) - 1:
            raise InvalidConfigurationError(
                f"Room max_size {self.rooms.max_size} does not fit a "
                f"{self.width}x{self.height} grid"
            )
        if self.enemy_count < 0:
            raise InvalidConfigurationError(
                f"Invalid enemy_count: {self.enemy_count} (must be >= 0)"
            )
        if self.player_max_hp <= 0 or self.enemy_max_hp <= 0:
            raise InvalidConfigurationError("Unit max hp must be > 0")
        if self.player_attack_power < 0 or self.enemy_attack_power < 0:
            raise InvalidConfigurationError("Attack power must be >= 0")
