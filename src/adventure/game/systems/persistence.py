"""
Save and restore for the adventure engine.

A save document records the player (name, health, score, current room, and
inventory as name/uses-remaining pairs) and, per room, the obstacle flags,
the four raw exit values, and the names of the items lying there. Every
other item field is re-derived from the catalog on load.

Restoring is staged: the whole document is parsed and every reference
resolved into a RestorePlan before anything in the live world changes, so a
bad save never leaves the world half-restored.
"""

import json
import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pydantic
import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from adventure.game.character.player import Player
from adventure.game.errors import PersistenceError, ValidationError
from adventure.game.world.catalog import Catalog
from adventure.game.world.definitions import canonical_room_id
from adventure.game.world.item import Item, calculate_total_weight
from adventure.game.world.room import Direction, Room

logger = structlog.get_logger(__name__)


class InventoryRecord(BaseModel):
    """A carried item in a save document."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    uses_remaining: int = Field(..., ge=0)


class PlayerRecord(BaseModel):
    """Player state in a save document."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    health: int = Field(..., ge=0)
    score: int = Field(..., ge=0)
    current_room: str = Field(..., min_length=1)
    inventory: list[InventoryRecord] = Field(default_factory=list)

    @field_validator("current_room", mode="before")
    @classmethod
    def _room_id_to_text(cls, value: Any) -> Any:
        return canonical_room_id(value)


class RoomRecord(BaseModel):
    """Per-room state in a save document."""

    model_config = ConfigDict(extra="ignore")

    room_number: str = Field(..., min_length=1)
    puzzle_active: bool | None = None
    monster_active: bool | None = None
    exits: dict[Direction, int] | None = None
    items: list[str] | None = None

    @field_validator("room_number", mode="before")
    @classmethod
    def _room_id_to_text(cls, value: Any) -> Any:
        return canonical_room_id(value)

    @field_validator("exits", mode="before")
    @classmethod
    def _normalize_exits(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ValueError("exits must be a mapping")

        exits: dict[Direction, int] = {}
        for key, raw in value.items():
            try:
                direction = Direction.parse(key)
            except ValidationError as e:
                raise ValueError(str(e))
            if isinstance(raw, bool):
                raise ValueError(f"exit {key} must be an integer")
            if isinstance(raw, str):
                try:
                    raw = int(raw.strip())
                except ValueError:
                    raise ValueError(f"exit {key} must be an integer, got {raw!r}")
            if not isinstance(raw, int):
                raise ValueError(f"exit {key} must be an integer, got {raw!r}")
            exits[direction] = raw

        missing = [d.value for d in Direction if d not in exits]
        if missing:
            raise ValueError(f"exits missing directions: {', '.join(missing)}")
        return exits


class SaveDocument(BaseModel):
    """The full save file."""

    model_config = ConfigDict(extra="ignore")

    player: PlayerRecord
    rooms: list[RoomRecord] = Field(default_factory=list)
    game_name: str | None = None
    version: str | None = None


@dataclass
class RoomRestore:
    """Resolved state to write onto one room."""

    room: Room
    puzzle_active: bool | None
    monster_active: bool | None
    exits: dict[Direction, int] | None
    items: list[Item] | None


@dataclass
class RestorePlan:
    """
    Fully resolved restore, ready to apply.

    Applying a plan only assigns values that have already been checked, so
    it cannot fail part-way.
    """

    player_name: str
    health: int
    score: int
    current_room: Room
    inventory: list[tuple[Item, int]]
    rooms: list[RoomRestore]

    def apply(self, player: Player, rooms: Mapping[str, Room]) -> None:
        """Write the staged state onto the live player and rooms."""
        for item, uses in self.inventory:
            item.uses_remaining = uses

        player.set_name(self.player_name)
        player.set_health(self.health)
        player.set_score(self.score)
        player.current_room = self.current_room
        player.set_inventory([item for item, _ in self.inventory])

        for state in self.rooms:
            room = state.room
            if state.puzzle_active is not None and room.puzzle is not None:
                room.puzzle.active = state.puzzle_active
            if state.monster_active is not None and room.monster is not None:
                room.monster.set_active(state.monster_active)
            if state.exits is not None:
                for direction, raw in state.exits.items():
                    room.set_exit(direction, raw, rooms)
            if state.items is not None:
                room.clear_items()
                for item in state.items:
                    room.add_item(item)


def snapshot(
    player: Player,
    rooms: Mapping[str, Room],
    game_name: str | None = None,
    version: str | None = None,
) -> SaveDocument:
    """
    Capture the mutable game state.

    Args:
        player: The player
        rooms: All rooms by id
        game_name: World name echoed into the save
        version: World version echoed into the save

    Returns:
        SaveDocument describing the current state
    """
    player_record = PlayerRecord(
        name=player.name,
        health=player.health,
        score=player.score,
        current_room=player.current_room.id,
        inventory=[
            InventoryRecord(name=item.name, uses_remaining=item.uses_remaining)
            for item in player.inventory
        ],
    )

    room_records = []
    for room in rooms.values():
        room_records.append(
            RoomRecord(
                room_number=room.id,
                puzzle_active=room.puzzle.active if room.puzzle is not None else None,
                monster_active=room.monster.active if room.monster is not None else None,
                exits=dict(room.exit_values),
                items=[item.name for item in room.items],
            )
        )

    return SaveDocument(
        player=player_record, rooms=room_records, game_name=game_name, version=version
    )


def dump_document(document: SaveDocument) -> str:
    """Render a save document as JSON, leaving out absent obstacle flags."""
    data = document.model_dump(mode="json")
    for room in data["rooms"]:
        for key in ("puzzle_active", "monster_active"):
            if room.get(key) is None:
                room.pop(key, None)
    return json.dumps(data, indent=2)


def write_save(document: SaveDocument, path: Path) -> None:
    """
    Write a save document atomically.

    The file is written next to its destination and then moved into place,
    so an interrupted write leaves any earlier save intact.

    Raises:
        PersistenceError: If the file cannot be written
    """
    path = Path(path)
    payload = dump_document(document)
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", delete=False
        ) as f:
            tmp_name = f.name
            f.write(payload)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistenceError(f"Error saving game to {path}: {e}")


def read_save(path: Path) -> SaveDocument:
    """
    Read and validate a save document.

    Raises:
        PersistenceError: If the file is missing, unreadable, or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise PersistenceError(f"Save file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"Error reading save file {path}: {e}")
    return parse_save(text)


def parse_save(text: str) -> SaveDocument:
    """
    Parse save JSON into a SaveDocument.

    Raises:
        PersistenceError: If the JSON is malformed or fields are missing
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PersistenceError(f"Save file is not valid JSON: {e}")
    try:
        return SaveDocument.model_validate(data)
    except pydantic.ValidationError as e:
        raise PersistenceError(f"Invalid save file: {e}")


def stage_restore(
    document: SaveDocument,
    player: Player,
    rooms: Mapping[str, Room],
    catalog: Catalog,
) -> RestorePlan:
    """
    Resolve a save document against the live world without changing it.

    Unknown item names and room numbers are skipped with a warning.

    Args:
        document: Parsed save
        player: The live player (used for capacity checks)
        rooms: All rooms by id
        catalog: Entity catalog for item lookup

    Returns:
        RestorePlan ready to apply

    Raises:
        PersistenceError: If the save references an unknown current room,
            opens an exit to an unknown room, exceeds inventory capacity,
            or gives an item more uses than it can hold
    """
    record = document.player
    if not record.name.strip():
        raise PersistenceError("Saved player name is blank")

    current_room = rooms.get(record.current_room)
    if current_room is None:
        raise PersistenceError(f"Save refers to unknown current room '{record.current_room}'")

    inventory: list[tuple[Item, int]] = []
    for entry in record.inventory:
        item = catalog.get_item(entry.name)
        if item is None:
            logger.warning("unknown_saved_item", item=entry.name)
            continue
        if entry.uses_remaining > item.max_uses:
            raise PersistenceError(
                f"Saved uses for '{item.name}' ({entry.uses_remaining}) exceed max uses "
                f"({item.max_uses})"
            )
        if any(held is item for held, _ in inventory):
            continue
        inventory.append((item, entry.uses_remaining))

    carried = calculate_total_weight([item for item, _ in inventory])
    if carried > player.max_weight:
        raise PersistenceError(
            f"Saved inventory weight {carried} exceeds capacity {player.max_weight}"
        )

    room_states: list[RoomRestore] = []
    for room_record in document.rooms:
        room = rooms.get(room_record.room_number)
        if room is None:
            logger.warning("unknown_saved_room", room_id=room_record.room_number)
            continue

        if room_record.exits is not None:
            for direction, raw in room_record.exits.items():
                if raw != 0 and str(abs(raw)) not in rooms:
                    raise PersistenceError(
                        f"Saved exit {direction.full_name} of room '{room.id}' leads to "
                        f"unknown room '{abs(raw)}'"
                    )

        items: list[Item] | None = None
        if room_record.items is not None:
            items = []
            for item_name in room_record.items:
                item = catalog.get_item(item_name)
                if item is None:
                    logger.warning("unknown_saved_item", room_id=room.id, item=item_name)
                    continue
                items.append(item)

        room_states.append(
            RoomRestore(
                room=room,
                puzzle_active=room_record.puzzle_active,
                monster_active=room_record.monster_active,
                exits=room_record.exits,
                items=items,
            )
        )

    return RestorePlan(
        player_name=record.name,
        health=record.health,
        score=record.score,
        current_room=current_room,
        inventory=inventory,
        rooms=room_states,
    )


def save_game(
    path: Path,
    player: Player,
    rooms: Mapping[str, Room],
    game_name: str | None = None,
    version: str | None = None,
) -> SaveDocument:
    """
    Save the game to a JSON file.

    Returns:
        The document that was written

    Raises:
        PersistenceError: If the file cannot be written
    """
    document = snapshot(player, rooms, game_name=game_name, version=version)
    write_save(document, path)
    logger.info("game_saved", path=str(path), rooms=len(document.rooms), score=player.score)
    return document


def load_game(
    path: Path,
    player: Player,
    rooms: Mapping[str, Room],
    catalog: Catalog,
    game_name: str | None = None,
) -> SaveDocument:
    """
    Restore the game from a JSON file, all or nothing.

    Returns:
        The document that was applied

    Raises:
        PersistenceError: If the file cannot be read, parsed, or resolved;
            the live world is untouched in that case
    """
    document = read_save(path)
    if game_name is not None and document.game_name not in (None, game_name):
        logger.warning("save_game_name_mismatch", expected=game_name, found=document.game_name)

    plan = stage_restore(document, player, rooms, catalog)
    plan.apply(player, rooms)
    logger.info(
        "game_loaded",
        path=str(path),
        room_id=player.current_room.id,
        score=player.score,
    )
    return document
