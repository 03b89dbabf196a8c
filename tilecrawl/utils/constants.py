"""Default game configuration constants."""

# Grid dimensions
MAP_WIDTH = 40
MAP_HEIGHT = 24

# Room generation (sizes are 0 based: a size of 0 is a 1-tile wide room)
ROOMS_MIN_COUNT = 5
ROOMS_MAX_COUNT = 10
ROOM_MIN_SIZE = 2
ROOM_MAX_SIZE = 7

# Item markers
SWORD_COUNT = 2
POTION_COUNT = 10

# Units
ENEMY_COUNT = 10
PLAYER_MAX_HP = 100
PLAYER_INITIAL_ATTACK_POWER = 20
ENEMIES_MAX_HP = 40
ENEMIES_INITIAL_ATTACK_POWER = 10

# Testing
RNG_SEED_DEFAULT = 42  # CLI default seed
