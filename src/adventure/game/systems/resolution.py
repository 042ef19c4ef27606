"""Obstacle resolution for the adventure engine.

Matches a submitted solution against the obstacles in the player's room.
When one resolves, the player scores its points and every blocked exit in
the room opens.
"""

from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from adventure.game.character.player import Player
from adventure.game.world.obstacle import Monster, Puzzle
from adventure.game.world.room import Direction, Room

logger = structlog.get_logger(__name__)


@dataclass
class Resolution:
    """Result of a successful solution attempt."""

    obstacle: Puzzle | Monster
    points: int
    opened: list[Direction]

    @property
    def kind(self) -> str:
        """Get "puzzle" or "monster"."""
        return "puzzle" if isinstance(self.obstacle, Puzzle) else "monster"


def unblock_exits(room: Room, rooms: Mapping[str, Room]) -> list[Direction]:
    """
    Open every blocked exit in a room.

    Each negative exit value is flipped positive and its neighbor resolved.

    Args:
        room: Room whose exits to open
        rooms: All rooms by id

    Returns:
        Directions that were opened
    """
    opened = room.blocked_directions()
    for direction in opened:
        room.set_exit(direction, -room.get_exit_raw_value(direction), rooms)
    return opened


def resolve_obstacle(player: Player, rooms: Mapping[str, Room], solution: str) -> Resolution | None:
    """
    Apply a solution to the obstacles in the player's current room.

    The puzzle is tried before the monster and at most one obstacle
    resolves per call. Nothing changes when no active obstacle matches,
    or when a blocked exit leads to a room missing from rooms.

    Args:
        player: The player submitting the solution
        rooms: All rooms by id
        solution: Item name or free-text answer

    Returns:
        Resolution describing what was resolved, or None
    """
    if solution is None:
        return None

    room = player.current_room
    unresolvable = [
        direction
        for direction in room.blocked_directions()
        if str(-room.get_exit_raw_value(direction)) not in rooms
    ]
    if unresolvable:
        logger.warning(
            "unresolvable_blocked_exits",
            room_id=room.id,
            directions=[direction.value for direction in unresolvable],
        )
        return None

    for obstacle in room.obstacles():
        if not obstacle.is_blocking:
            continue
        if not obstacle.try_resolve(solution):
            continue

        player.add_score(obstacle.value)
        opened = unblock_exits(room, rooms)
        resolution = Resolution(obstacle=obstacle, points=obstacle.value, opened=opened)

        logger.info(
            "obstacle_resolved",
            room_id=room.id,
            kind=resolution.kind,
            obstacle=obstacle.name,
            points=obstacle.value,
            opened=[direction.value for direction in opened],
            score=player.score,
        )
        return resolution

    logger.debug("solution_rejected", room_id=room.id, solution=solution)
    return None


def apply_solution(player: Player, rooms: Mapping[str, Room], solution: str) -> bool:
    """
    Apply a solution and report whether anything was resolved.

    Args:
        player: The player submitting the solution
        rooms: All rooms by id
        solution: Item name or free-text answer

    Returns:
        True if a puzzle was solved or a monster defeated
    """
    return resolve_obstacle(player, rooms, solution) is not None
