"""Item handling for the adventure engine: take, drop, examine, use, answer."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

import structlog

from adventure.game.character.player import Player
from adventure.game.world.item import Fixture, Item
from adventure.game.world.obstacle import SolutionType
from adventure.game.world.room import Room

from .resolution import Resolution, resolve_obstacle

logger = structlog.get_logger(__name__)


class TakeOutcome(StrEnum):
    TAKEN = "taken"
    NOT_HERE = "not_here"
    TOO_HEAVY = "too_heavy"


class UseOutcome(StrEnum):
    NOT_CARRIED = "not_carried"
    NO_USES_LEFT = "no_uses_left"
    SOLVED = "solved"
    USED = "used"


class AnswerOutcome(StrEnum):
    NO_PUZZLE = "no_puzzle"
    NEEDS_ITEM = "needs_item"
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass
class TakeResult:
    outcome: TakeOutcome
    item: Item | None = None


@dataclass
class UseResult:
    outcome: UseOutcome
    item: Item | None = None
    resolution: Resolution | None = None


@dataclass
class AnswerResult:
    outcome: AnswerOutcome
    resolution: Resolution | None = None


def take_item(player: Player, item_name: str) -> TakeResult:
    """
    Move an item from the player's room into their inventory.

    Args:
        player: The player picking up the item
        item_name: Name of the item, any case

    Returns:
        TakeResult with the item when taken
    """
    room = player.current_room
    item = room.get_item(item_name)
    if item is None:
        return TakeResult(TakeOutcome.NOT_HERE)

    if not player.add_to_inventory(item):
        logger.debug(
            "item_too_heavy",
            item=item.name,
            carried=player.inventory_weight,
            capacity=player.max_weight,
        )
        return TakeResult(TakeOutcome.TOO_HEAVY, item)

    room.remove_item(item)
    logger.info("item_taken", room_id=room.id, item=item.name)
    return TakeResult(TakeOutcome.TAKEN, item)


def drop_item(player: Player, item_name: str) -> Item | None:
    """
    Move an item from the inventory into the player's room.

    Returns:
        The dropped item, or None if the player was not carrying it
    """
    item = player.get_item_from_inventory(item_name)
    if item is None or not player.remove_from_inventory(item):
        return None

    player.current_room.add_item(item)
    logger.info("item_dropped", room_id=player.current_room.id, item=item.name)
    return item


def examine(player: Player, target: str) -> Item | Fixture | None:
    """
    Find something to examine, looking in the inventory, then room items, then fixtures.

    Returns:
        The matching item or fixture, or None
    """
    found = player.get_item_from_inventory(target)
    if found is not None:
        return found
    room = player.current_room
    return room.get_item(target) or room.get_fixture(target)


def use_item(player: Player, rooms: Mapping[str, Room], item_name: str) -> UseResult:
    """
    Use a carried item, applying its name as a solution in the current room.

    One use is consumed whether or not the item resolved anything.

    Args:
        player: The player using the item
        rooms: All rooms by id
        item_name: Name of the carried item

    Returns:
        UseResult describing the outcome
    """
    item = player.get_item_from_inventory(item_name)
    if item is None:
        return UseResult(UseOutcome.NOT_CARRIED)
    if not item.has_uses:
        return UseResult(UseOutcome.NO_USES_LEFT, item)

    resolution = resolve_obstacle(player, rooms, item.name)
    item.use()
    logger.debug(
        "item_used",
        item=item.name,
        uses_remaining=item.uses_remaining,
        solved=resolution is not None,
    )

    if resolution is not None:
        return UseResult(UseOutcome.SOLVED, item, resolution)
    return UseResult(UseOutcome.USED, item)


def answer(player: Player, rooms: Mapping[str, Room], text: str) -> AnswerResult:
    """
    Give a free-text answer to the puzzle in the current room.

    Args:
        player: The answering player
        rooms: All rooms by id
        text: The answer

    Returns:
        AnswerResult; NEEDS_ITEM when the puzzle is solved with an item instead
    """
    puzzle = player.current_room.active_puzzle
    if puzzle is None:
        return AnswerResult(AnswerOutcome.NO_PUZZLE)
    if puzzle.solution_type != SolutionType.ANSWER:
        return AnswerResult(AnswerOutcome.NEEDS_ITEM)

    resolution = resolve_obstacle(player, rooms, text)
    if resolution is None:
        return AnswerResult(AnswerOutcome.WRONG)
    return AnswerResult(AnswerOutcome.CORRECT, resolution)
