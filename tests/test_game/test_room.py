"""Tests for directions, exits and rooms."""

import pytest

from adventure.game.errors import ValidationError
from adventure.game.world import Direction, Exit, ExitKind, Fixture, Item, Monster, Puzzle, Room


@pytest.fixture
def rooms():
    """Three unwired rooms keyed by id."""
    return {
        "1": Room(id="1", name="Hall", description="A hall."),
        "2": Room(id="2", name="Kitchen", description="A kitchen."),
        "3": Room(id="3", name="Cellar", description="A cellar."),
    }


class TestDirection:
    """Tests for Direction."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("n", Direction.NORTH),
            ("N", Direction.NORTH),
            ("north", Direction.NORTH),
            ("SOUTH", Direction.SOUTH),
            (" e ", Direction.EAST),
            ("West", Direction.WEST),
            (Direction.WEST, Direction.WEST),
        ],
    )
    def test_parse(self, text, expected):
        """Test letters, names and enum values all parse."""
        assert Direction.parse(text) == expected

    @pytest.mark.parametrize("value", [None, "", "up", "northeast"])
    def test_parse_rejects_invalid(self, value):
        """Test unknown directions raise ValidationError."""
        with pytest.raises(ValidationError):
            Direction.parse(value)

    def test_opposite(self):
        """Test opposites pair up."""
        assert Direction.NORTH.opposite == Direction.SOUTH
        assert Direction.EAST.opposite == Direction.WEST
        for direction in Direction:
            assert direction.opposite.opposite == direction

    def test_full_name(self):
        """Test the lowercase name."""
        assert Direction.NORTH.full_name == "north"


class TestExit:
    """Tests for the tagged exit view."""

    def test_wall(self):
        exit_ = Exit.from_raw(0)
        assert exit_.kind == ExitKind.WALL
        assert exit_.room_id is None

    def test_open(self):
        exit_ = Exit.from_raw(4)
        assert exit_.kind == ExitKind.OPEN
        assert exit_.room_id == "4"

    def test_blocked(self):
        exit_ = Exit.from_raw(-3)
        assert exit_.kind == ExitKind.BLOCKED
        assert exit_.room_id == "3"

    @pytest.mark.parametrize("raw", [0, 7, -7])
    def test_raw_value_preserved(self, raw):
        """Test the signed encoding survives the tagged view."""
        assert Exit.from_raw(raw).raw == raw


class TestRoomExits:
    """Tests for exit wiring on Room."""

    def test_new_room_is_all_walls(self, rooms):
        """Test every exit defaults to a wall."""
        room = rooms["1"]
        for direction in Direction:
            assert room.get_exit_raw_value(direction) == 0
            assert room.get_exit(direction) is None

    def test_positive_exit_resolves_neighbor(self, rooms):
        """Test a positive exit caches the neighbor."""
        rooms["1"].set_exit(Direction.NORTH, 2, rooms)
        assert rooms["1"].get_exit("n") is rooms["2"]
        assert rooms["1"].get_exit_raw_value("north") == 2
        assert rooms["1"].get_exit_state(Direction.NORTH) == Exit(ExitKind.OPEN, "2")

    def test_negative_exit_has_no_neighbor(self, rooms):
        """Test a blocked exit never resolves."""
        rooms["1"].set_exit(Direction.EAST, -3, rooms)
        assert rooms["1"].get_exit(Direction.EAST) is None
        assert rooms["1"].blocked_directions() == [Direction.EAST]

    def test_rewriting_exit_clears_neighbor(self, rooms):
        """Test rewriting to a non-positive value drops the cached neighbor."""
        room = rooms["1"]
        room.set_exit(Direction.NORTH, 2, rooms)
        room.set_exit(Direction.NORTH, -2, rooms)
        assert room.get_exit(Direction.NORTH) is None
        room.set_exit(Direction.NORTH, 0, rooms)
        assert room.get_exit(Direction.NORTH) is None

    def test_positive_exit_to_unknown_room_rejected(self, rooms):
        """Test the exit is unchanged when its target is missing."""
        with pytest.raises(ValidationError):
            rooms["1"].set_exit(Direction.NORTH, 9, rooms)
        assert rooms["1"].get_exit_raw_value(Direction.NORTH) == 0

    def test_blocked_exit_to_unknown_room_rejected(self, rooms):
        """Test a blocked exit must also name an existing room."""
        with pytest.raises(ValidationError, match="unknown room"):
            rooms["1"].set_exit(Direction.WEST, -99, rooms)
        assert rooms["1"].get_exit_raw_value(Direction.WEST) == 0

    def test_blocked_exit_state_names_obstacle(self, rooms):
        """Test a blocked exit carries the room's active puzzle, then its monster."""
        puzzle = Puzzle(name="Lock", active=True)
        monster = Monster(name="Troll", active=True)
        room = rooms["1"]
        room.puzzle = puzzle
        room.monster = monster
        room.set_exit(Direction.NORTH, -2, rooms)
        room.set_exit(Direction.SOUTH, 3, rooms)

        assert room.get_exit_state(Direction.NORTH).obstacle is puzzle
        assert room.get_exit_state(Direction.SOUTH).obstacle is None
        assert room.get_exit_state(Direction.EAST).obstacle is None

        puzzle.active = False
        assert room.get_exit_state(Direction.NORTH).obstacle is monster

    def test_exit_equality_ignores_obstacle(self):
        exit_ = Exit.from_raw(-2, Puzzle(name="Lock", active=True))
        assert exit_ == Exit(ExitKind.BLOCKED, "2")
        assert exit_.raw == -2

    def test_available_exits(self, rooms):
        """Test only open exits are listed."""
        room = rooms["1"]
        room.set_exit(Direction.NORTH, 2, rooms)
        room.set_exit(Direction.WEST, -3, rooms)
        assert room.get_available_exits() == [Direction.NORTH]

    def test_invalid_direction_rejected(self, rooms):
        """Test lookups with a bad direction raise."""
        with pytest.raises(ValidationError):
            rooms["1"].get_exit(None)
        with pytest.raises(ValidationError):
            rooms["1"].get_exit_raw_value("up")


class TestRoomContents:
    """Tests for items, fixtures and obstacles on Room."""

    def test_add_and_get_item_case_insensitive(self):
        room = Room(id="1", name="Hall")
        key = Item(name="Key")
        room.add_item(key)
        assert room.get_item("KEY") is key
        assert room.items == [key]

    def test_remove_item_by_identity(self):
        """Test an equal-named impostor is not removed."""
        room = Room(id="1", name="Hall")
        key = Item(name="Key")
        room.add_item(key)
        assert room.remove_item(Item(name="Key")) is False
        assert room.remove_item(key) is True
        assert room.get_item("key") is None
        assert room.remove_item(key) is False

    def test_clear_items(self):
        room = Room(id="1", name="Hall")
        room.add_item(Item(name="Key"))
        room.add_item(Item(name="Lamp"))
        room.clear_items()
        assert room.items == []

    def test_fixture_lookup(self):
        room = Room(id="1", name="Hall")
        painting = Fixture(name="Painting")
        room.add_fixture(painting)
        assert room.get_fixture("painting") is painting
        assert room.get_fixture("statue") is None

    def test_obstacles_puzzle_first(self):
        """Test the puzzle is listed before the monster."""
        puzzle = Puzzle(name="Lock")
        monster = Monster(name="Troll")
        room = Room(id="1", name="Gate", puzzle=puzzle, monster=monster)
        assert room.obstacles() == [puzzle, monster]

    def test_active_obstacle_properties(self):
        puzzle = Puzzle(name="Lock", active=False)
        monster = Monster(name="Troll", active=True)
        room = Room(id="1", name="Gate", puzzle=puzzle, monster=monster)
        assert room.active_puzzle is None
        assert room.active_monster is monster


class TestRoomDescription:
    """Tests for look text and formatting."""

    def test_plain_description(self):
        room = Room(id="1", name="Hall", description="A hall.")
        assert room.look_text() == "A hall."

    def test_puzzle_affecting_room_replaces_description(self):
        puzzle = Puzzle(name="Lock", affects_target=True, effects="The door is locked.")
        room = Room(id="1", name="Hall", description="A hall.", puzzle=puzzle)
        assert room.look_text() == "The door is locked."
        puzzle.active = False
        assert room.look_text() == "A hall."

    def test_puzzle_not_affecting_room_keeps_description(self):
        puzzle = Puzzle(name="Riddle", affects_target=False, effects="Hmm.")
        room = Room(id="1", name="Hall", description="A hall.", puzzle=puzzle)
        assert room.look_text() == "A hall."

    def test_monster_replaces_description(self):
        monster = Monster(name="Troll", effects="A troll glares at you.")
        room = Room(id="1", name="Bridge", description="A bridge.", monster=monster)
        assert room.look_text() == "A troll glares at you."

    def test_format_description(self, rooms):
        room = rooms["1"]
        room.set_exit(Direction.NORTH, 2, rooms)
        room.add_item(Item(name="Key"))
        text = room.format_description()
        assert "Hall" in text
        assert "A hall." in text
        assert "[Items: Key]" in text
        assert "[Exits: north]" in text

    def test_format_description_no_exits(self):
        room = Room(id="1", name="Closet")
        assert "[Exits: none]" in room.format_description()
