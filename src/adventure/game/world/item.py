"""Item and fixture game objects."""

from dataclasses import dataclass, field

from adventure.game.errors import ValidationError


@dataclass(eq=False)
class Item:
    """
    A portable object that can sit in a room or in a player's inventory.

    Items are compared by identity. The catalog creates exactly one instance
    per item name and that instance moves between rooms and inventories, so
    ``uses_remaining`` is shared by every placement of the same name.

    Attributes:
        name: Unique display name (catalog key, case-insensitive)
        weight: Carry weight counted against inventory capacity
        max_uses: Number of uses a fresh item has
        uses_remaining: Uses left, between 0 and max_uses
        value: Point value of the item
        when_used: Text shown when the item is used without effect
        description: Text shown when the item is examined
    """

    name: str
    weight: int = 1
    max_uses: int = 1
    uses_remaining: int = 1
    value: int = 0
    when_used: str = ""
    description: str = ""

    @property
    def has_uses(self) -> bool:
        """Check if the item can still be used."""
        return self.uses_remaining > 0

    def use(self) -> bool:
        """
        Consume one use of the item.

        Returns:
            True if a use was consumed, False if none were left
        """
        if self.uses_remaining > 0:
            self.uses_remaining -= 1
            return True
        return False

    def set_uses_remaining(self, uses: int) -> None:
        """
        Overwrite the remaining uses.

        Args:
            uses: New use count

        Raises:
            ValidationError: If uses is outside 0..max_uses
        """
        if uses < 0 or uses > self.max_uses:
            raise ValidationError(
                f"Uses remaining for '{self.name}' must be between 0 and {self.max_uses}, got {uses}"
            )
        self.uses_remaining = uses

    def matches_name(self, name: str) -> bool:
        """Check whether a name refers to this item, ignoring case and padding."""
        return self.name.strip().casefold() == name.strip().casefold()

    def format_short_description(self) -> str:
        """
        Format a short description for inventory listing.

        Returns:
            Formatted string like "Key (weight: 1, uses: 1)"
        """
        return f"{self.name} (weight: {self.weight}, uses: {self.uses_remaining})"

    def __repr__(self) -> str:
        return f"<Item(name='{self.name}', weight={self.weight}, uses={self.uses_remaining})>"


@dataclass(frozen=True)
class Fixture:
    """
    An immovable, read-only object described in a room.

    Attributes:
        name: Display name
        weight: Nominal weight (fixtures are never carried)
        description: Text shown when examined
        puzzle: Optional name of a puzzle associated with the fixture
        states: Optional free-form state text
        picture: Optional picture path or URL
    """

    name: str
    weight: int = 1000
    description: str = ""
    puzzle: str | None = field(default=None, compare=False)
    states: str | None = field(default=None, compare=False)
    picture: str | None = field(default=None, compare=False)


def calculate_total_weight(items: list[Item]) -> int:
    """
    Calculate total weight of a list of items.

    Args:
        items: List of Item objects

    Returns:
        Sum of item weights
    """
    return sum(item.weight for item in items)
