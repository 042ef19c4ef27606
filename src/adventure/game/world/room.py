"""
Room module for the adventure engine.

Defines directions, the exit encoding, and the Room class representing a
location in the game world.

Each room has one exit slot per cardinal direction holding a signed
integer: 0 is a wall, +N leads to room N, and -N leads to room N once the
room's obstacle is resolved. A room caches a neighbor reference for every
positive exit and for no other.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Union

from adventure.game.errors import ValidationError

from .item import Fixture, Item
from .obstacle import Monster, Puzzle


class Direction(StrEnum):
    """Cardinal directions, valued by their single-letter keys."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def full_name(self) -> str:
        """Get the lowercase direction name (e.g. "north")."""
        return self.name.lower()

    @property
    def opposite(self) -> "Direction":
        """Get the reverse of this direction."""
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, value: Union["Direction", str, None]) -> "Direction":
        """
        Resolve a direction from an enum, a letter, or a full name.

        Args:
            value: Direction, "n", "N", "north", "NORTH", ...

        Returns:
            The matching Direction

        Raises:
            ValidationError: If value is None or not a direction
        """
        if isinstance(value, Direction):
            return value
        if value is None:
            raise ValidationError("Direction cannot be None")
        text = str(value).strip().upper()
        for direction in cls:
            if text in (direction.value, direction.name):
                return direction
        raise ValidationError(f"Unknown direction: {value!r}")


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class ExitKind(StrEnum):
    """Connectivity state of an exit slot."""

    WALL = "wall"
    OPEN = "open"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class Exit:
    """
    Tagged view of a raw exit value.

    A BLOCKED exit carries the room's active obstacle when one is known.
    """

    kind: ExitKind
    room_id: str | None = None
    obstacle: Puzzle | Monster | None = field(default=None, compare=False)

    @classmethod
    def from_raw(cls, raw: int, obstacle: Puzzle | Monster | None = None) -> "Exit":
        """Decode a signed exit value; the obstacle is kept only for blocked exits."""
        if raw == 0:
            return cls(ExitKind.WALL)
        if raw > 0:
            return cls(ExitKind.OPEN, str(raw))
        return cls(ExitKind.BLOCKED, str(-raw), obstacle)

    @property
    def raw(self) -> int:
        """Encode back to the signed integer form."""
        if self.kind == ExitKind.WALL or self.room_id is None:
            return 0
        target = int(self.room_id)
        return target if self.kind == ExitKind.OPEN else -target


@dataclass(eq=False)
class Room:
    """
    Represents a room (location) in the game world.

    Attributes:
        id: Unique, stable room identifier (the room number, e.g. "3")
        name: Display name shown to players
        description: Text shown when the room is not obscured by an obstacle
        puzzle: Puzzle in this room, shared with the catalog
        monster: Monster in this room, shared with the catalog
        picture: Optional picture path or URL
    """

    id: str
    name: str
    description: str = ""
    puzzle: Puzzle | None = None
    monster: Monster | None = None
    picture: str | None = None
    _exits: dict[Direction, int] = field(default_factory=dict, repr=False)
    _neighbors: dict[Direction, "Room"] = field(default_factory=dict, repr=False)
    _items: dict[str, Item] = field(default_factory=dict, repr=False)
    _fixtures: dict[str, Fixture] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        for direction in Direction:
            self._exits.setdefault(direction, 0)

    # Exits

    def get_exit(self, direction: Direction | str) -> "Room | None":
        """
        Get the neighbor reached through a direction.

        Args:
            direction: The direction to check

        Returns:
            The neighboring Room if the exit is open, None otherwise
        """
        return self._neighbors.get(Direction.parse(direction))

    def get_exit_raw_value(self, direction: Direction | str) -> int:
        """Get the signed exit value for a direction."""
        return self._exits[Direction.parse(direction)]

    def get_exit_state(self, direction: Direction | str) -> Exit:
        """Get the tagged exit for a direction, naming the obstacle on blocked exits."""
        return Exit.from_raw(
            self.get_exit_raw_value(direction), self.active_puzzle or self.active_monster
        )

    @property
    def exit_values(self) -> dict[Direction, int]:
        """Get a copy of all four raw exit values."""
        return dict(self._exits)

    def set_exit(self, direction: Direction | str, raw: int, rooms: Mapping[str, "Room"]) -> None:
        """
        Rewrite an exit value and resolve or clear its cached neighbor.

        Args:
            direction: Exit slot to rewrite
            raw: New signed exit value
            rooms: All rooms by id, used to resolve the exit's target

        Raises:
            ValidationError: If an open or blocked exit names a room that does not exist
        """
        direction = Direction.parse(direction)
        target = rooms.get(str(abs(raw))) if raw != 0 else None
        if raw != 0 and target is None:
            raise ValidationError(
                f"Room '{self.id}' exit {direction.full_name} leads to unknown room '{abs(raw)}'"
            )
        if raw > 0:
            self._neighbors[direction] = target
        else:
            self._neighbors.pop(direction, None)
        self._exits[direction] = raw

    def blocked_directions(self) -> list[Direction]:
        """Get the directions whose exits are blocked by this room's obstacle."""
        return [direction for direction in Direction if self._exits[direction] < 0]

    def get_available_exits(self) -> list[Direction]:
        """Get the directions the player can currently walk through."""
        return [direction for direction in Direction if direction in self._neighbors]

    # Items and fixtures

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().casefold()

    @property
    def items(self) -> list[Item]:
        """Get the items currently in the room."""
        return list(self._items.values())

    def add_item(self, item: Item) -> None:
        """Place an item in the room."""
        self._items[self._key(item.name)] = item

    def remove_item(self, item: Item) -> bool:
        """
        Remove an item from the room.

        Returns:
            True if the item was present
        """
        key = self._key(item.name)
        if self._items.get(key) is item:
            del self._items[key]
            return True
        return False

    def get_item(self, name: str) -> Item | None:
        """Find an item in the room by name, ignoring case."""
        return self._items.get(self._key(name))

    def clear_items(self) -> None:
        """Remove every item from the room."""
        self._items.clear()

    @property
    def fixtures(self) -> list[Fixture]:
        """Get the fixtures in the room."""
        return list(self._fixtures.values())

    def add_fixture(self, fixture: Fixture) -> None:
        """Place a fixture in the room."""
        self._fixtures[self._key(fixture.name)] = fixture

    def get_fixture(self, name: str) -> Fixture | None:
        """Find a fixture in the room by name, ignoring case."""
        return self._fixtures.get(self._key(name))

    # Obstacles

    def obstacles(self) -> list[Puzzle | Monster]:
        """Get this room's obstacles in resolution order (puzzle first)."""
        return [obstacle for obstacle in (self.puzzle, self.monster) if obstacle is not None]

    @property
    def active_puzzle(self) -> Puzzle | None:
        """Get the puzzle if it is still active."""
        return self.puzzle if self.puzzle is not None and self.puzzle.active else None

    @property
    def active_monster(self) -> Monster | None:
        """Get the monster if it is still active."""
        return self.monster if self.monster is not None and self.monster.active else None

    def look_text(self) -> str:
        """
        Get the text describing the room's current state.

        An active puzzle that affects the room, or an active monster, replaces
        the plain description with its effects text.
        """
        puzzle = self.active_puzzle
        if puzzle is not None and puzzle.affects_target:
            return puzzle.effects
        monster = self.active_monster
        if monster is not None:
            return monster.effects
        return self.description

    def format_description(self) -> str:
        """
        Format the full room description for display to players.

        Returns:
            Formatted string with room name, look text, items, and exits
        """
        lines = [
            f"\n{self.name}",
            "-" * len(self.name),
            self.look_text().strip(),
        ]

        if self._items:
            lines.append(f"\n[Items: {', '.join(item.name for item in self.items)}]")

        exits = self.get_available_exits()
        if exits:
            lines.append(f"\n[Exits: {', '.join(d.full_name for d in exits)}]")
        else:
            lines.append("\n[Exits: none]")

        return "\n".join(lines)

    def __repr__(self) -> str:
        exits = ", ".join(f"{d.value}={v}" for d, v in self._exits.items())
        return f"<Room(id='{self.id}', name='{self.name}', exits=[{exits}])>"
