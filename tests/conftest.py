"""Shared fixtures for all tests."""

import copy
import json

import pytest

from adventure.config import PlayerConfig, Settings, get_settings
from adventure.game.engine import GameWorld

HALLWAY_WORLD = {
    "name": "Simple Hallway",
    "version": "1.0",
    "rooms": [
        {
            "room_name": "Hallway 1",
            "room_number": "1",
            "description": "A long hallway.",
            "N": "2",
            "S": "0",
            "E": "0",
            "W": "0",
            "items": "Notebook",
            "fixtures": "Painting",
        },
        {
            "room_name": "Hallway 2",
            "room_number": "2",
            "description": "The hallway narrows.",
            "N": "-3",
            "S": "1",
            "E": "0",
            "W": "0",
            "puzzle": "Lock",
            "items": "Key, Hair Clippers",
        },
        {
            "room_name": "Hallway 3",
            "room_number": "3",
            "description": "A quiet end of the hallway.",
            "N": "-4",
            "S": "2",
            "E": "0",
            "W": "0",
            "monster": "Teddy Bear",
        },
        {
            "room_name": "Music Room",
            "room_number": "4",
            "description": "A dusty grand piano stands in the corner.",
            "N": "0",
            "S": "3",
            "E": "0",
            "W": "-5",
            "puzzle": "Piano Riddle",
        },
        {
            "room_name": "Secret Study",
            "room_number": "5",
            "description": "A hidden study.",
            "N": "0",
            "S": "0",
            "E": "4",
            "W": "0",
            "items": "Ancient Scroll",
        },
    ],
    "items": [
        {"name": "Notebook", "weight": "1", "max_uses": "1", "uses_remaining": "1",
         "value": "5", "when_used": "You flip through the notebook.",
         "description": "A small spiral notebook."},
        {"name": "Key", "weight": "1", "max_uses": "1", "uses_remaining": "1",
         "value": "10", "when_used": "Nothing happens.", "description": "A brass key."},
        {"name": "Hair Clippers", "weight": "2", "max_uses": "2", "uses_remaining": "2",
         "value": "20", "when_used": "The clippers buzz.", "description": "Hair clippers."},
        {"name": "Ancient Scroll", "weight": "1", "max_uses": "1", "uses_remaining": "1",
         "value": "50", "when_used": "You read the scroll.", "description": "An old scroll."},
        {"name": "Anvil", "weight": "12", "max_uses": "1", "uses_remaining": "1",
         "value": "0", "when_used": "Clang.", "description": "Very heavy."},
    ],
    "fixtures": [
        {"name": "Painting", "weight": "200", "description": "A painting of a teddy bear."},
    ],
    "puzzles": [
        {
            "name": "Lock",
            "active": "true",
            "affects_target": "true",
            "affects_player": "false",
            "solution": "Key",
            "value": "150",
            "description": "A locked door blocks the way north.",
            "effects": "The door to the north is locked.",
            "target": "2:Hallway 2",
        },
        {
            "name": "Piano Riddle",
            "active": "true",
            "affects_target": "false",
            "affects_player": "false",
            "solution": "'piano'",
            "value": "75",
            "description": "The bookshelf will not budge.",
            "effects": "The bookshelf slides aside.",
            "target": "4:Music Room",
        },
    ],
    "monsters": [
        {
            "name": "Teddy Bear",
            "active": "true",
            "solution": "Hair Clippers",
            "value": "300",
            "description": "A giant teddy bear blocks the doorway.",
            "effects": "A shaggy teddy bear stands in the way.",
            "damage": "-5",
            "target": "3:Hallway 3",
            "can_attack": "true",
            "attack": "hugs you uncomfortably tight",
        },
    ],
}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing saves at a temporary directory."""
    return Settings(save_file=tmp_path / "saved_game.json", worlds_dir=tmp_path)


@pytest.fixture
def hallway_definition() -> dict:
    """A fresh copy of the hallway world document."""
    return copy.deepcopy(HALLWAY_WORLD)


@pytest.fixture
def world(hallway_definition, settings) -> GameWorld:
    """A loaded hallway world with the player in room 1."""
    return GameWorld.from_definition(
        hallway_definition, player_config=PlayerConfig(), settings=settings
    )


@pytest.fixture
def world_file(tmp_path, hallway_definition):
    """The hallway world written to a JSON file."""
    path = tmp_path / "simple_hallway.json"
    path.write_text(json.dumps(hallway_definition), encoding="utf-8")
    return path
