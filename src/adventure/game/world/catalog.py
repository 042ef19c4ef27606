"""
Entity catalog for the adventure engine.

Builds the name-keyed lookup tables for items, fixtures, puzzles, and
monsters from a world definition. The catalog owns the one canonical
instance of every entity; rooms and the player hold references into it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

import structlog

from .definitions import (
    FixtureDefinition,
    ItemDefinition,
    MonsterDefinition,
    PuzzleDefinition,
    WorldDefinition,
)
from .item import Fixture, Item
from .obstacle import Monster, Puzzle

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def catalog_key(name: str) -> str:
    """Normalize an entity name for case-insensitive lookup."""
    return name.strip().casefold()


@dataclass
class NameIndex(Generic[T]):
    """A case-insensitive name -> entity table."""

    kind: str
    _entries: dict[str, T] = field(default_factory=dict)

    def add(self, name: str, entity: T) -> None:
        key = catalog_key(name)
        if key in self._entries:
            logger.warning("duplicate_catalog_entry", kind=self.kind, name=name)
        self._entries[key] = entity

    def get(self, name: str | None) -> T | None:
        """Look up an entity by name; returns None on a miss."""
        if not name:
            return None
        return self._entries.get(catalog_key(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and catalog_key(name) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def values(self) -> list[T]:
        return list(self._entries.values())


def create_item(definition: ItemDefinition) -> Item:
    """Create an Item, keeping uses_remaining within 0..max_uses."""
    max_uses = max(definition.max_uses, 0)
    uses = min(max(definition.uses_remaining, 0), max_uses)
    return Item(
        name=definition.name,
        weight=definition.weight,
        max_uses=max_uses,
        uses_remaining=uses,
        value=definition.value,
        when_used=definition.when_used,
        description=definition.description,
    )


def create_fixture(definition: FixtureDefinition) -> Fixture:
    return Fixture(
        name=definition.name,
        weight=definition.weight,
        description=definition.description,
        puzzle=definition.puzzle,
        states=definition.states,
        picture=definition.picture,
    )


def create_puzzle(definition: PuzzleDefinition) -> Puzzle:
    return Puzzle(
        name=definition.name,
        active=definition.active,
        affects_target=definition.affects_target,
        affects_player=definition.affects_player,
        solution=definition.solution,
        value=max(definition.value, 0),
        description=definition.description,
        effects=definition.effects,
        target=definition.target,
    )


def create_monster(definition: MonsterDefinition) -> Monster:
    monster = Monster(
        name=definition.name,
        description=definition.description,
        active=definition.active,
        damage=definition.damage,
        can_attack=definition.can_attack,
        attack=definition.attack,
        effects=definition.effects,
        value=max(definition.value, 0),
        solution=definition.solution,
        target=definition.target,
    )
    if not monster.active:
        monster.health = 0
    return monster


class Catalog:
    """
    Read-only store of entity definitions keyed by name.

    Attributes:
        items: Items by name
        fixtures: Fixtures by name
        puzzles: Puzzles by name
        monsters: Monsters by name
    """

    def __init__(
        self,
        items: Iterable[Item] = (),
        fixtures: Iterable[Fixture] = (),
        puzzles: Iterable[Puzzle] = (),
        monsters: Iterable[Monster] = (),
    ) -> None:
        self.items: NameIndex[Item] = NameIndex("item")
        self.fixtures: NameIndex[Fixture] = NameIndex("fixture")
        self.puzzles: NameIndex[Puzzle] = NameIndex("puzzle")
        self.monsters: NameIndex[Monster] = NameIndex("monster")

        for item in items:
            self.items.add(item.name, item)
        for fixture in fixtures:
            self.fixtures.add(fixture.name, fixture)
        for puzzle in puzzles:
            self.puzzles.add(puzzle.name, puzzle)
        for monster in monsters:
            self.monsters.add(monster.name, monster)

    @classmethod
    def from_definition(cls, world: WorldDefinition) -> "Catalog":
        """
        Build the catalog from a parsed world definition.

        Args:
            world: Parsed world document

        Returns:
            Catalog holding one instance per defined entity
        """
        catalog = cls(
            items=[create_item(d) for d in world.items],
            fixtures=[create_fixture(d) for d in world.fixtures],
            puzzles=[create_puzzle(d) for d in world.puzzles],
            monsters=[create_monster(d) for d in world.monsters],
        )
        logger.debug(
            "catalog_built",
            items=len(catalog.items),
            fixtures=len(catalog.fixtures),
            puzzles=len(catalog.puzzles),
            monsters=len(catalog.monsters),
        )
        return catalog

    def get_item(self, name: str | None) -> Item | None:
        """Get an item by name, or None if not found."""
        return self.items.get(name)

    def get_fixture(self, name: str | None) -> Fixture | None:
        """Get a fixture by name, or None if not found."""
        return self.fixtures.get(name)

    def get_puzzle(self, name: str | None) -> Puzzle | None:
        """Get a puzzle by name, or None if not found."""
        return self.puzzles.get(name)

    def get_monster(self, name: str | None) -> Monster | None:
        """Get a monster by name, or None if not found."""
        return self.monsters.get(name)
