"""Integration tests playing through the sample world."""

import pytest

from adventure.config import PlayerConfig
from adventure.game.engine import GameWorld, load_world
from adventure.game.errors import WorldLoadError
from adventure.game.systems.inventory import AnswerOutcome, TakeOutcome, UseOutcome
from adventure.game.systems.movement import MoveBlock


class TestLoadWorld:
    """Tests for the world entry points."""

    def test_from_file(self, world_file, settings):
        world = GameWorld.from_file(world_file, player_config=PlayerConfig(), settings=settings)
        assert world.name == "Simple Hallway"
        assert world.start_room is world.rooms["1"]
        assert world.current_room is world.start_room

    def test_from_configured_path(self, world_file, settings):
        """Test the default path comes from settings."""
        settings.world_file = world_file.name
        world = GameWorld.from_file(settings=settings)
        assert len(world.rooms) == 5

    def test_load_world_accepts_dict_and_path(self, world_file, hallway_definition, settings):
        from_path = load_world(world_file, settings=settings)
        from_dict = load_world(hallway_definition, settings=settings)
        assert list(from_path.rooms) == list(from_dict.rooms)

    def test_bad_file_raises(self, tmp_path, settings):
        with pytest.raises(WorldLoadError):
            GameWorld.from_file(tmp_path / "missing.yaml", settings=settings)

    def test_get_room(self, world):
        assert world.get_room("3").name == "Hallway 3"
        assert world.get_room(3) is world.rooms["3"]
        assert world.get_room("404") is None


class TestPlaythrough:
    """A full run from the first hallway to the secret study."""

    def test_complete_game(self, world, settings):
        world.set_player_name("Ada")
        assert "Hallway 1" in world.look()

        assert world.move("north").moved
        assert world.take_item("Key").outcome == TakeOutcome.TAKEN
        assert world.take_item("Hair Clippers").outcome == TakeOutcome.TAKEN

        blocked = world.move("north")
        assert blocked.cause == MoveBlock.PUZZLE
        assert "The door to the north is locked." in world.look()

        assert world.use_item("Key").outcome == UseOutcome.SOLVED
        assert "The hallway narrows." in world.look()
        assert world.move("north").moved

        attacked = world.move("north")
        assert attacked.cause == MoveBlock.MONSTER
        assert world.player.health == 95

        assert world.use_item("Hair Clippers").outcome == UseOutcome.SOLVED
        assert world.move("north").moved
        assert world.current_room.name == "Music Room"

        assert world.answer("piano").outcome == AnswerOutcome.CORRECT
        assert world.move("west").moved
        assert world.current_room.name == "Secret Study"
        assert world.take_item("Ancient Scroll").outcome == TakeOutcome.TAKEN

        assert world.player.score == 525
        assert world.player.rank == "Seasoned Adventurer"

        assert world.save() == settings.save_file
        assert settings.save_file.exists()

    def test_save_and_resume(self, world, hallway_definition, settings):
        """Test a saved run resumes where it stopped in a new session."""
        world.set_player_name("Ada")
        world.move("n")
        world.take_item("Hair Clippers")
        world.player.current_room = world.rooms["3"]
        world.use_item("Hair Clippers")
        world.save()

        resumed = load_world(hallway_definition, player_config=PlayerConfig(), settings=settings)
        resumed.load()

        assert resumed.player.name == "Ada"
        assert resumed.player.score == 300
        assert resumed.current_room is resumed.rooms["3"]
        assert resumed.move("north").moved
        assert resumed.player.get_item_from_inventory("hair clippers").uses_remaining == 1


def assert_exits_consistent(world):
    """Every positive exit resolves to its room; every other exit resolves to nothing."""
    for room in world.rooms.values():
        for direction, raw in room.exit_values.items():
            if raw > 0:
                assert room.get_exit(direction) is world.rooms[str(raw)]
            else:
                assert room.get_exit(direction) is None


class TestExitInvariant:
    """The exit/neighbor invariant holds through play and restore."""

    def test_after_build(self, world):
        assert_exits_consistent(world)

    def test_after_solving_and_restoring(self, world, hallway_definition, settings):
        world.player.current_room = world.rooms["2"]
        world.apply_solution("Key")
        world.player.current_room = world.rooms["4"]
        world.apply_solution("piano")
        assert_exits_consistent(world)

        world.save()
        resumed = load_world(hallway_definition, settings=settings)
        resumed.load()
        assert_exits_consistent(resumed)
        assert resumed.rooms["4"].get_exit_raw_value("W") == 5

        world.load()
        assert_exits_consistent(world)
