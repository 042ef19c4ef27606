"""
World loader module for the adventure engine.

Handles reading world documents (JSON or YAML), validating them, and
building the room graph on top of the entity catalog.
"""

import json
from pathlib import Path
from typing import Any

import pydantic
import structlog
import yaml

from adventure.game.errors import WorldLoadError

from .catalog import Catalog
from .definitions import RoomDefinition, WorldDefinition
from .room import Direction, Room

logger = structlog.get_logger(__name__)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def load_world_file(file_path: Path) -> dict[str, Any]:
    """
    Load a world document from disk.

    Args:
        file_path: Path to a .json, .yaml or .yml file

    Returns:
        The raw document as a dictionary

    Raises:
        WorldLoadError: If the file cannot be read or parsed
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            if file_path.suffix.lower() in JSON_SUFFIXES:
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except FileNotFoundError:
        raise WorldLoadError(f"File not found: {file_path}")
    except json.JSONDecodeError as e:
        raise WorldLoadError(f"JSON parsing error in {file_path}: {e}")
    except yaml.YAMLError as e:
        raise WorldLoadError(f"YAML parsing error in {file_path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise WorldLoadError(f"Error loading {file_path}: {e}")

    if not data:
        raise WorldLoadError(f"Empty world file: {file_path}")

    if not isinstance(data, dict):
        raise WorldLoadError(f"World file must contain a mapping: {file_path}")

    return data


def parse_world_definition(data: dict[str, Any]) -> WorldDefinition:
    """
    Validate a raw world document.

    Args:
        data: Raw document

    Returns:
        Parsed WorldDefinition

    Raises:
        WorldLoadError: If required fields are missing or have the wrong shape
    """
    if not isinstance(data, dict):
        raise WorldLoadError("World definition must be a mapping")
    try:
        world = WorldDefinition.model_validate(data)
    except pydantic.ValidationError as e:
        raise WorldLoadError(f"Invalid world definition: {e}")

    if not world.rooms:
        raise WorldLoadError("No rooms defined in the game file.")

    return world


def create_room_from_definition(definition: RoomDefinition, catalog: Catalog) -> Room:
    """
    Create a Room and attach the catalog entities it references.

    Exits are not wired here. Names the catalog does not know are skipped.

    Args:
        definition: Parsed room entry
        catalog: Entity catalog

    Returns:
        Room instance with items, fixtures, puzzle and monster attached
    """
    room = Room(
        id=definition.room_number,
        name=definition.room_name,
        description=definition.description,
        picture=definition.picture,
    )

    for item_name in definition.items:
        item = catalog.get_item(item_name)
        if item is None:
            logger.warning("unknown_item_reference", room_id=room.id, item=item_name)
            continue
        room.add_item(item)

    for fixture_name in definition.fixtures:
        fixture = catalog.get_fixture(fixture_name)
        if fixture is None:
            logger.warning("unknown_fixture_reference", room_id=room.id, fixture=fixture_name)
            continue
        room.add_fixture(fixture)

    if definition.puzzle:
        room.puzzle = catalog.get_puzzle(definition.puzzle)
        if room.puzzle is None:
            logger.warning("unknown_puzzle_reference", room_id=room.id, puzzle=definition.puzzle)

    if definition.monster:
        room.monster = catalog.get_monster(definition.monster)
        if room.monster is None:
            logger.warning("unknown_monster_reference", room_id=room.id, monster=definition.monster)

    return room


def build_room_graph(definitions: list[RoomDefinition], catalog: Catalog) -> dict[str, Room]:
    """
    Build all rooms and wire their exits.

    Rooms are created in definition order, then a second pass writes every
    exit value and resolves a neighbor for each positive one. A repeated
    room number replaces the earlier room, and an exit to a room that does
    not exist is loaded as a wall; both are logged as warnings.

    Args:
        definitions: Parsed room entries, start room first
        catalog: Entity catalog

    Returns:
        Dictionary mapping room id to Room, in definition order

    Raises:
        WorldLoadError: If no rooms are defined
    """
    if not definitions:
        raise WorldLoadError("No rooms defined in the game file.")

    kept: dict[str, RoomDefinition] = {}
    for definition in definitions:
        if definition.room_number in kept:
            logger.warning("duplicate_room_number", room_id=definition.room_number)
        kept[definition.room_number] = definition

    rooms = {
        room_id: create_room_from_definition(definition, catalog)
        for room_id, definition in kept.items()
    }

    for room_id, definition in kept.items():
        room = rooms[room_id]
        for letter, raw in definition.exit_values.items():
            if raw != 0 and str(abs(raw)) not in rooms:
                logger.warning(
                    "unknown_exit_target", room_id=room_id, direction=letter, target=str(abs(raw))
                )
                raw = 0
            room.set_exit(Direction.parse(letter), raw, rooms)

    for warning in validate_exits(rooms):
        logger.debug("exit_validation_warning", warning=warning)

    return rooms


def validate_exits(rooms: dict[str, Room]) -> list[str]:
    """
    Report exits that have no matching exit back.

    One-way passages are legal, so these are returned as warnings only.

    Args:
        rooms: Dictionary of room id to Room

    Returns:
        List of warning messages
    """
    warnings: list[str] = []

    for room_id, room in rooms.items():
        for direction, raw in room.exit_values.items():
            if raw == 0:
                continue
            target = rooms[str(abs(raw))]
            back = abs(target.get_exit_raw_value(direction.opposite))
            if str(back) != room_id:
                warnings.append(
                    f"Non-bidirectional exit: '{room_id}' -> '{direction.full_name}' -> "
                    f"'{target.id}', but '{target.id}' '{direction.opposite.full_name}' "
                    f"does not lead back"
                )

    return warnings
