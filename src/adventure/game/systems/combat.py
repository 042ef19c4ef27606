"""Monster attacks for the adventure engine.

Monsters cannot be fought down; only the right item defeats them. An
active monster that can attack hits the player whenever it is provoked.
"""

from dataclasses import dataclass

import structlog

from adventure.game.character.player import Player

logger = structlog.get_logger(__name__)


@dataclass
class AttackReport:
    """What happened when a monster attacked."""

    monster_name: str
    damage: int
    attack_text: str
    player_health: int

    @property
    def knocked_out(self) -> bool:
        """Check whether the attack left the player asleep."""
        return self.player_health <= 0


def monster_turn(player: Player) -> AttackReport | None:
    """
    Let the monster in the player's room attack.

    Args:
        player: The player in the room

    Returns:
        AttackReport if damage was dealt, None otherwise
    """
    monster = player.current_room.active_monster
    if monster is None:
        return None

    damage = monster.attack_player(player)
    if damage <= 0:
        return None

    logger.info(
        "monster_attacked",
        room_id=player.current_room.id,
        monster=monster.name,
        damage=damage,
        player_health=player.health,
    )
    return AttackReport(
        monster_name=monster.name,
        damage=damage,
        attack_text=monster.attack,
        player_health=player.health,
    )


def attack(player: Player) -> tuple[bool, AttackReport | None]:
    """
    Attack the monster in the player's room.

    The blow has no effect; the monster retaliates if it can.

    Args:
        player: The attacking player

    Returns:
        Tuple of (whether there was an active monster to attack, retaliation report)
    """
    monster = player.current_room.active_monster
    if monster is None:
        return False, None

    logger.debug("player_attacked_monster", room_id=player.current_room.id, monster=monster.name)
    return True, monster_turn(player)
