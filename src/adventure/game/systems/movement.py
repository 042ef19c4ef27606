"""Movement between rooms for the adventure engine."""

from dataclasses import dataclass
from enum import StrEnum

import structlog

from adventure.game.character.player import Player
from adventure.game.world.room import Direction, Room

from .combat import AttackReport, monster_turn

logger = structlog.get_logger(__name__)


class MoveBlock(StrEnum):
    """Why a move did not happen."""

    NONE = "none"
    WALL = "wall"
    PUZZLE = "puzzle"
    MONSTER = "monster"
    BLOCKED = "blocked"


@dataclass
class MoveResult:
    """
    Outcome of a movement attempt.

    Attributes:
        moved: Whether the player changed rooms
        direction: Direction attempted
        cause: Reason the move was refused, NONE when it succeeded
        room: The player's room after the attempt
        attack: Monster retaliation, when a monster blocked the way
    """

    moved: bool
    direction: Direction
    cause: MoveBlock
    room: Room
    attack: AttackReport | None = None

    @property
    def blocker_description(self) -> str | None:
        """Get the description of the puzzle or monster in the way."""
        if self.cause == MoveBlock.PUZZLE and self.room.puzzle is not None:
            return self.room.puzzle.description
        if self.cause == MoveBlock.MONSTER and self.room.monster is not None:
            return self.room.monster.description
        return None


def get_block_cause(room: Room, direction: Direction) -> MoveBlock:
    """
    Work out what stands in a direction.

    Args:
        room: Room to check
        direction: Direction to check

    Returns:
        NONE if the exit is open, otherwise the reason it is not
    """
    raw = room.get_exit_raw_value(direction)
    if raw == 0:
        return MoveBlock.WALL
    if raw > 0:
        return MoveBlock.NONE
    if room.active_puzzle is not None:
        return MoveBlock.PUZZLE
    if room.active_monster is not None:
        return MoveBlock.MONSTER
    return MoveBlock.BLOCKED


def attempt_move(player: Player, direction: Direction | str) -> MoveResult:
    """
    Try to move the player one room over.

    A monster blocking the way attacks the player.

    Args:
        player: The moving player
        direction: Direction to move

    Returns:
        MoveResult describing the outcome

    Raises:
        ValidationError: If direction is None or unknown
    """
    direction = Direction.parse(direction)
    origin = player.current_room
    cause = get_block_cause(origin, direction)

    if cause == MoveBlock.NONE and player.move(direction):
        logger.debug(
            "player_moved",
            from_room=origin.id,
            to_room=player.current_room.id,
            direction=direction.full_name,
        )
        return MoveResult(True, direction, cause, player.current_room)

    report = monster_turn(player) if cause == MoveBlock.MONSTER else None
    logger.debug("move_blocked", room_id=origin.id, direction=direction.full_name, cause=cause)
    return MoveResult(False, direction, cause, origin, report)
