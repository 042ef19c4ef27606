"""Tests for moving between rooms."""

import pytest

from adventure.game.errors import ValidationError
from adventure.game.systems.movement import MoveBlock, attempt_move, get_block_cause
from adventure.game.world import Direction


class TestGetBlockCause:
    """Tests for get_block_cause."""

    def test_open_exit(self, world):
        assert get_block_cause(world.rooms["1"], Direction.NORTH) == MoveBlock.NONE

    def test_wall(self, world):
        assert get_block_cause(world.rooms["1"], Direction.WEST) == MoveBlock.WALL

    def test_puzzle(self, world):
        assert get_block_cause(world.rooms["2"], Direction.NORTH) == MoveBlock.PUZZLE

    def test_monster(self, world):
        assert get_block_cause(world.rooms["3"], Direction.NORTH) == MoveBlock.MONSTER

    def test_blocked_without_active_obstacle(self, world):
        """Test a negative exit stays shut even if its obstacle is gone."""
        world.rooms["2"].puzzle.active = False
        assert get_block_cause(world.rooms["2"], Direction.NORTH) == MoveBlock.BLOCKED


class TestAttemptMove:
    """Tests for attempt_move."""

    def test_move_through_open_exit(self, world):
        result = attempt_move(world.player, "north")

        assert result.moved is True
        assert result.cause == MoveBlock.NONE
        assert result.direction == Direction.NORTH
        assert result.room is world.rooms["2"]
        assert world.player.current_room is world.rooms["2"]

    def test_wall_keeps_player_in_place(self, world):
        result = attempt_move(world.player, "e")

        assert result.moved is False
        assert result.cause == MoveBlock.WALL
        assert world.player.current_room is world.rooms["1"]
        assert result.blocker_description is None

    def test_puzzle_blocks_with_description(self, world):
        world.player.current_room = world.rooms["2"]
        result = attempt_move(world.player, Direction.NORTH)

        assert result.moved is False
        assert result.cause == MoveBlock.PUZZLE
        assert result.blocker_description == "A locked door blocks the way north."
        assert result.attack is None

    def test_monster_blocks_and_attacks(self, world):
        """Test walking into a monster provokes an attack."""
        world.player.current_room = world.rooms["3"]
        result = attempt_move(world.player, "N")

        assert result.moved is False
        assert result.cause == MoveBlock.MONSTER
        assert result.blocker_description == "A giant teddy bear blocks the doorway."
        assert result.attack is not None
        assert result.attack.damage == 5
        assert world.player.health == 95

    def test_opened_exit_can_be_walked(self, world):
        world.player.current_room = world.rooms["2"]
        world.apply_solution("Key")

        result = attempt_move(world.player, "north")

        assert result.moved is True
        assert world.player.current_room is world.rooms["3"]

    def test_invalid_direction(self, world):
        with pytest.raises(ValidationError):
            attempt_move(world.player, "sideways")

    def test_engine_move(self, world):
        """Test GameWorld.move delegates to movement."""
        assert world.move("n").moved is True
        assert world.current_room is world.rooms["2"]
