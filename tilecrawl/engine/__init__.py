"""Game engine components."""

from .combat import CombatEvent, attack_enemies, is_adjacent, move_player
from .items import add_items
from .map_generator import add_passages, add_rooms, generate_map, initialize
from .movement import can_step_into, move_unit
from .spawner import add_units
from .turn_executor import TurnExecutor, TurnResults

__all__ = [
    "CombatEvent",
    "attack_enemies",
    "is_adjacent",
    "move_player",
    "add_items",
    "add_passages",
    "add_rooms",
    "generate_map",
    "initialize",
    "can_step_into",
    "move_unit",
    "add_units",
    "TurnExecutor",
    "TurnResults",
]
