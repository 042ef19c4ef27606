"""Player state for the adventure engine.

Tracks the player's name, health, score, weight-capped inventory and
current room. Capacity and maximum health come from a PlayerConfig passed
in at construction.
"""

from enum import StrEnum

from adventure.config import PlayerConfig
from adventure.game.errors import ValidationError
from adventure.game.world.item import Item, calculate_total_weight
from adventure.game.world.room import Direction, Room

DEFAULT_PLAYER_NAME = "Player"

# Rank thresholds, highest first: (minimum score, title)
RANK_THRESHOLDS: list[tuple[int, str]] = [
    (1000, "Adventure Master"),
    (750, "Expert Explorer"),
    (500, "Seasoned Adventurer"),
    (250, "Novice Explorer"),
    (0, "Beginner"),
]


class HealthStatus(StrEnum):
    """How awake the player is."""

    AWAKE = "AWAKE"
    FATIGUED = "FATIGUED"
    WOOZY = "WOOZY"
    ASLEEP = "ASLEEP"


def get_rank(score: int) -> str:
    """
    Map a score to a rank title.

    Args:
        score: Player score

    Returns:
        Rank title, from "Beginner" up to "Adventure Master"
    """
    for minimum, title in RANK_THRESHOLDS:
        if score >= minimum:
            return title
    return RANK_THRESHOLDS[-1][1]


def get_health_status(health: int) -> HealthStatus:
    """Map a health value to a health status."""
    if health <= 0:
        return HealthStatus.ASLEEP
    if health < 40:
        return HealthStatus.WOOZY
    if health < 70:
        return HealthStatus.FATIGUED
    return HealthStatus.AWAKE


class Player:
    """
    The adventurer exploring the world.

    Attributes:
        name: Player name
        config: Capacity and health limits
    """

    def __init__(self, start_room: Room, config: PlayerConfig | None = None) -> None:
        """
        Create a player standing in a room.

        Args:
            start_room: Room the player starts in
            config: Limits to apply; defaults to PlayerConfig()

        Raises:
            ValidationError: If start_room is None
        """
        if start_room is None:
            raise ValidationError("Start room cannot be None")
        self.config = config or PlayerConfig()
        self.name = DEFAULT_PLAYER_NAME
        self._health = self.config.max_health
        self._score = 0
        self._inventory: list[Item] = []
        self._current_room = start_room

    # Name

    def set_name(self, name: str) -> None:
        """Set the player's name; blank names are rejected."""
        if name is None or not name.strip():
            raise ValidationError("Name cannot be empty")
        self.name = name.strip()

    # Health

    @property
    def health(self) -> int:
        """Get current health."""
        return self._health

    @property
    def max_health(self) -> int:
        """Get the configured maximum health."""
        return self.config.max_health

    def set_health(self, health: int) -> None:
        """
        Set health directly, clamping to the maximum.

        Raises:
            ValidationError: If health is negative
        """
        if health < 0:
            raise ValidationError("Health cannot be negative")
        self._health = min(health, self.config.max_health)

    def take_damage(self, amount: int) -> None:
        """
        Reduce health, never below zero.

        Raises:
            ValidationError: If amount is negative
        """
        if amount < 0:
            raise ValidationError("Damage amount cannot be negative")
        self._health = max(0, self._health - amount)

    @property
    def health_status(self) -> HealthStatus:
        """Get how awake the player is."""
        return get_health_status(self._health)

    @property
    def is_asleep(self) -> bool:
        """Check whether the player has run out of health."""
        return self._health <= 0

    # Score

    @property
    def score(self) -> int:
        """Get current score."""
        return self._score

    def add_score(self, points: int) -> None:
        """
        Add points to the score.

        Raises:
            ValidationError: If points is negative
        """
        if points < 0:
            raise ValidationError("Points cannot be negative")
        self._score += points

    def set_score(self, score: int) -> None:
        """
        Set the score directly.

        Raises:
            ValidationError: If score is negative
        """
        if score < 0:
            raise ValidationError("Score cannot be negative")
        self._score = score

    @property
    def rank(self) -> str:
        """Get the rank title for the current score."""
        return get_rank(self._score)

    # Inventory

    @property
    def max_weight(self) -> int:
        """Get the inventory weight capacity."""
        return self.config.max_inventory_weight

    @property
    def inventory(self) -> list[Item]:
        """Get a copy of the inventory."""
        return list(self._inventory)

    @property
    def inventory_weight(self) -> int:
        """Get the total weight carried."""
        return calculate_total_weight(self._inventory)

    def can_carry(self, item: Item) -> bool:
        """Check whether an item fits within the remaining capacity."""
        return self.inventory_weight + item.weight <= self.max_weight

    def add_to_inventory(self, item: Item) -> bool:
        """
        Add an item if it fits.

        Returns:
            True if the item was added, False if it would exceed capacity

        Raises:
            ValidationError: If item is None
        """
        if item is None:
            raise ValidationError("Item cannot be None")
        if any(held is item for held in self._inventory):
            return True
        if not self.can_carry(item):
            return False
        self._inventory.append(item)
        return True

    def remove_from_inventory(self, item: Item | str) -> bool:
        """
        Remove an item by identity, or the first item matching a name.

        Returns:
            True if an item was removed

        Raises:
            ValidationError: If item is None
        """
        if item is None:
            raise ValidationError("Item cannot be None")
        for index, held in enumerate(self._inventory):
            if held is item or (isinstance(item, str) and held.matches_name(item)):
                del self._inventory[index]
                return True
        return False

    def get_item_from_inventory(self, name: str) -> Item | None:
        """
        Find a carried item by name, ignoring case.

        Raises:
            ValidationError: If name is blank
        """
        if name is None or not name.strip():
            raise ValidationError("Item name cannot be empty")
        for held in self._inventory:
            if held.matches_name(name):
                return held
        return None

    def set_inventory(self, items: list[Item]) -> None:
        """
        Replace the whole inventory.

        Raises:
            ValidationError: If items is None or exceeds capacity
        """
        if items is None:
            raise ValidationError("Inventory cannot be None")
        if calculate_total_weight(items) > self.max_weight:
            raise ValidationError(
                f"Inventory weight {calculate_total_weight(items)} exceeds capacity {self.max_weight}"
            )
        self._inventory = list(items)

    # Location

    @property
    def current_room(self) -> Room:
        """Get the room the player is in."""
        return self._current_room

    @current_room.setter
    def current_room(self, room: Room) -> None:
        if room is None:
            raise ValidationError("Room cannot be None")
        self._current_room = room

    def can_move(self, direction: Direction | str) -> bool:
        """Check whether an open exit leads in a direction."""
        return self._current_room.get_exit(direction) is not None

    def move(self, direction: Direction | str) -> bool:
        """
        Walk through an open exit.

        Returns:
            True if the player moved

        Raises:
            ValidationError: If direction is None or unknown
        """
        next_room = self._current_room.get_exit(direction)
        if next_room is None:
            return False
        self._current_room = next_room
        return True

    def __repr__(self) -> str:
        return (
            f"<Player(name='{self.name}', health={self._health}, score={self._score}, "
            f"room='{self._current_room.id}')>"
        )
