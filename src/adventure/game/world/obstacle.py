"""
Obstacles that can block room exits: puzzles and monsters.

A puzzle stores its solution as a single string. A solution wrapped in
single quotes is a free-text answer (``'piano'``); anything else names the
item that solves it (``Key``). Monsters are always defeated by an item.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from adventure.game.character.player import Player


class SolutionType(StrEnum):
    """How an obstacle expects to be solved."""

    ITEM = "item"
    ANSWER = "answer"


@dataclass(frozen=True)
class Solution:
    """A typed solution value: an item name or a free-text answer."""

    type: SolutionType
    value: str

    @classmethod
    def parse(cls, stored: str) -> "Solution":
        """
        Classify a stored solution string using the quote convention.

        Args:
            stored: Solution as written in the world definition

        Returns:
            ANSWER solution with quotes stripped, or ITEM solution
        """
        text = stored.strip()
        if len(text) >= 2 and text.startswith("'") and text.endswith("'"):
            return cls(SolutionType.ANSWER, text[1:-1])
        return cls(SolutionType.ITEM, text)

    def matches(self, other: "Solution") -> bool:
        """Check type equality and a trimmed, case-insensitive value match."""
        if self.type != other.type:
            return False
        mine = self.value.strip().casefold()
        theirs = other.value.strip().casefold()
        return bool(mine) and mine == theirs


class Obstacle(Protocol):
    """Anything that can block a room's exits until resolved."""

    name: str
    value: int

    @property
    def is_blocking(self) -> bool: ...

    def try_resolve(self, submission: str) -> bool: ...


@dataclass(eq=False)
class Puzzle:
    """
    A puzzle that blocks exits until solved.

    Attributes:
        name: Unique name (catalog key)
        active: Whether the puzzle is still unsolved
        affects_target: Whether the puzzle changes how its room is described
        affects_player: Whether the puzzle affects the player directly
        solution: Stored solution string (quoted answer or item name)
        value: Points awarded when solved
        description: Text shown when the puzzle blocks movement
        effects: Text shown while active, and again when solved
        target: Free-form reference to the puzzle's target
    """

    name: str
    active: bool = True
    affects_target: bool = False
    affects_player: bool = False
    solution: str = ""
    value: int = 0
    description: str = ""
    effects: str = ""
    target: str = ""

    @property
    def expected_solution(self) -> Solution:
        """Get the parsed solution this puzzle expects."""
        return Solution.parse(self.solution)

    @property
    def solution_type(self) -> SolutionType:
        """Get whether this puzzle wants an item or an answer."""
        return self.expected_solution.type

    @property
    def is_blocking(self) -> bool:
        return self.active

    def matches(self, answer: str) -> bool:
        """Check an answer against the solution without changing state."""
        expected = self.expected_solution
        return Solution(expected.type, answer).matches(expected)

    def solve(self, answer: str) -> bool:
        """
        Attempt to solve the puzzle.

        The submitted text is classified the same way as the stored
        solution, then compared case-insensitively.

        Args:
            answer: Submitted item name or answer

        Returns:
            True if the puzzle was active and the answer matched
        """
        if not self.active:
            return False
        if self.matches(answer):
            self.active = False
            return True
        return False

    def try_resolve(self, submission: str) -> bool:
        return self.solve(submission)


@dataclass(eq=False)
class Monster:
    """
    A monster that blocks exits until defeated with the right item.

    Attributes:
        name: Unique name (catalog key)
        description: Text shown when the monster blocks movement
        active: Whether the monster is still undefeated
        damage: Damage dealt per attack (sign ignored)
        can_attack: Whether the monster attacks at all
        attack: Attack text (e.g. "swipes at you with its claws")
        effects: Text shown while the monster is in the room
        value: Points awarded when defeated
        solution: Name of the item that defeats the monster
        target: Free-form reference to the monster's target
        max_health: Health the monster starts with
        health: Current health, 0 once defeated
    """

    name: str
    description: str = ""
    active: bool = True
    damage: int = 5
    can_attack: bool = False
    attack: str = ""
    effects: str = ""
    value: int = 0
    solution: str = ""
    target: str = ""
    max_health: int = 100
    health: int = 100

    @property
    def is_blocking(self) -> bool:
        return self.active

    def matches(self, item_name: str) -> bool:
        """Check whether an item name defeats this monster."""
        expected = self.solution.strip().casefold()
        return bool(expected) and expected == item_name.strip().casefold()

    def defeat(self) -> None:
        """Defeat the monster. Calling this again has no further effect."""
        self.active = False
        self.health = 0

    def set_active(self, active: bool) -> None:
        """Restore the active flag, refilling health when reactivated."""
        self.active = active
        self.health = self.max_health if active else 0

    def try_resolve(self, submission: str) -> bool:
        if not self.active or not self.matches(submission):
            return False
        self.defeat()
        return True

    def attack_player(self, player: "Player") -> int:
        """
        Attack a player.

        Args:
            player: The player being attacked

        Returns:
            Damage dealt, 0 unless the monster is active and can attack
        """
        if self.active and self.can_attack:
            amount = abs(self.damage)
            player.take_damage(amount)
            return amount
        return 0
