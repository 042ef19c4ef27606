"""World management - catalog, rooms, items, obstacles, and loading."""

from .catalog import Catalog
from .definitions import WorldDefinition
from .item import Fixture, Item, calculate_total_weight
from .loader import (
    build_room_graph,
    load_world_file,
    parse_world_definition,
    validate_exits,
)
from .obstacle import Monster, Obstacle, Puzzle, Solution, SolutionType
from .room import Direction, Exit, ExitKind, Room

__all__ = [
    "Catalog",
    "WorldDefinition",
    "Item",
    "Fixture",
    "calculate_total_weight",
    "build_room_graph",
    "load_world_file",
    "parse_world_definition",
    "validate_exits",
    "Monster",
    "Obstacle",
    "Puzzle",
    "Solution",
    "SolutionType",
    "Direction",
    "Exit",
    "ExitKind",
    "Room",
]
