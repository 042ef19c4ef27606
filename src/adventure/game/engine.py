"""Main game world for the adventure engine."""

from pathlib import Path
from typing import Any

import structlog

from adventure.config import PlayerConfig, Settings, get_settings
from adventure.game.character.player import Player
from adventure.game.systems import combat, inventory, movement, persistence, resolution
from adventure.game.world.catalog import Catalog
from adventure.game.world.item import Fixture, Item
from adventure.game.world.loader import (
    build_room_graph,
    load_world_file,
    parse_world_definition,
)
from adventure.game.world.room import Direction, Room

logger = structlog.get_logger(__name__)


class GameWorld:
    """
    One loaded world and the player exploring it.

    Owns the catalog, the room graph and the player, and exposes the
    operations a command loop calls: moving, handling items, submitting
    solutions, and saving or restoring the game.
    """

    def __init__(
        self,
        catalog: Catalog,
        rooms: dict[str, Room],
        name: str | None = None,
        version: str | None = None,
        player_config: PlayerConfig | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Assemble a world from a built catalog and room graph.

        The first room in ``rooms`` is the start room.
        """
        self._settings = settings or get_settings()
        self.catalog = catalog
        self.rooms = rooms
        self.name = name
        self.version = version
        self.start_room = next(iter(rooms.values()))
        self.player = Player(
            self.start_room, player_config or PlayerConfig.from_settings(self._settings)
        )

        logger.info(
            "game_world_initialized",
            game_name=name,
            total_rooms=len(rooms),
            start_room=self.start_room.id,
        )

    @classmethod
    def from_definition(
        cls,
        data: dict[str, Any],
        player_config: PlayerConfig | None = None,
        settings: Settings | None = None,
    ) -> "GameWorld":
        """
        Build a world from a raw world document.

        Raises:
            WorldLoadError: If the document is malformed or defines no rooms
        """
        definition = parse_world_definition(data)
        catalog = Catalog.from_definition(definition)
        rooms = build_room_graph(definition.rooms, catalog)
        return cls(
            catalog,
            rooms,
            name=definition.name,
            version=definition.version,
            player_config=player_config,
            settings=settings,
        )

    @classmethod
    def from_file(
        cls,
        path: Path | None = None,
        player_config: PlayerConfig | None = None,
        settings: Settings | None = None,
    ) -> "GameWorld":
        """
        Load a world from a JSON or YAML file.

        Args:
            path: World file; defaults to the configured world path

        Raises:
            WorldLoadError: If the file cannot be loaded
        """
        settings = settings or get_settings()
        path = Path(path) if path is not None else settings.world_path
        logger.info("loading_world", path=str(path))
        try:
            data = load_world_file(path)
            return cls.from_definition(data, player_config=player_config, settings=settings)
        except Exception as e:
            logger.error("world_load_failed", path=str(path), error=str(e))
            raise

    # Lookups

    def get_room(self, room_id: str) -> Room | None:
        """Get a room by its id, or None if not found."""
        return self.rooms.get(str(room_id))

    @property
    def current_room(self) -> Room:
        """Get the room the player is in."""
        return self.player.current_room

    def set_player_name(self, name: str) -> None:
        """Set the player's name."""
        self.player.set_name(name)

    def look(self) -> str:
        """Describe the player's current room."""
        return self.player.current_room.format_description()

    # Obstacles

    def apply_solution(self, solution: str) -> bool:
        """
        Submit an item name or answer to the current room's obstacle.

        Returns:
            True if a puzzle was solved or a monster defeated
        """
        return resolution.apply_solution(self.player, self.rooms, solution)

    # Actions

    def move(self, direction: Direction | str) -> movement.MoveResult:
        """Try to move the player in a direction."""
        return movement.attempt_move(self.player, direction)

    def take_item(self, item_name: str) -> inventory.TakeResult:
        """Pick up an item from the current room."""
        return inventory.take_item(self.player, item_name)

    def drop_item(self, item_name: str) -> Item | None:
        """Drop a carried item into the current room."""
        return inventory.drop_item(self.player, item_name)

    def examine(self, target: str) -> Item | Fixture | None:
        """Find a carried item, room item, or fixture to examine."""
        return inventory.examine(self.player, target)

    def use_item(self, item_name: str) -> inventory.UseResult:
        """Use a carried item in the current room."""
        return inventory.use_item(self.player, self.rooms, item_name)

    def answer(self, text: str) -> inventory.AnswerResult:
        """Answer the current room's puzzle."""
        return inventory.answer(self.player, self.rooms, text)

    def attack(self) -> tuple[bool, combat.AttackReport | None]:
        """Attack the monster in the current room."""
        return combat.attack(self.player)

    def monster_turn(self) -> combat.AttackReport | None:
        """Let the current room's monster attack the player."""
        return combat.monster_turn(self.player)

    # Persistence

    def save(self, path: Path | None = None) -> Path:
        """
        Save the game.

        Args:
            path: Save file; defaults to the configured save path

        Returns:
            Path written

        Raises:
            PersistenceError: If the file cannot be written
        """
        path = Path(path) if path is not None else self._settings.save_file
        persistence.save_game(path, self.player, self.rooms, self.name, self.version)
        return path

    def load(self, path: Path | None = None) -> Path:
        """
        Restore a saved game; on failure nothing in the world changes.

        Args:
            path: Save file; defaults to the configured save path

        Returns:
            Path read

        Raises:
            PersistenceError: If the save cannot be read or applied
        """
        path = Path(path) if path is not None else self._settings.save_file
        persistence.load_game(path, self.player, self.rooms, self.catalog, game_name=self.name)
        return path


def load_world(source: Path | str | dict[str, Any], **kwargs: Any) -> GameWorld:
    """
    Load a world from a file path or a raw world document.

    Raises:
        WorldLoadError: If the world cannot be loaded
    """
    if isinstance(source, dict):
        return GameWorld.from_definition(source, **kwargs)
    return GameWorld.from_file(Path(source), **kwargs)
