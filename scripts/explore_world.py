#!/usr/bin/env python3
"""
Walkthrough script for the adventure engine.

Loads the configured world, walks the sample hallway from start to finish,
and round-trips the game through a save file.
"""

import sys
import tempfile
from pathlib import Path

from adventure.config import get_settings
from adventure.game.engine import GameWorld
from adventure.logging_config import configure_logging_from_settings


def show(world: GameWorld) -> None:
    player = world.player
    print(world.look())
    print(
        f"   Health: {player.health} ({player.health_status})  "
        f"Score: {player.score}  Rank: {player.rank}"
    )


def main() -> int:
    """Main walkthrough function."""
    settings = get_settings()
    configure_logging_from_settings(settings)

    print("=" * 70)
    print("Adventure Engine - World Walkthrough")
    print("=" * 70)

    world = GameWorld.from_file(settings.world_path, settings=settings)
    world.set_player_name("Adventurer")
    print(f"\n🌍 Loaded '{world.name}' with {len(world.rooms)} rooms")
    show(world)

    steps = [
        ("take", "notebook"),
        ("move", "north"),
        ("take", "key"),
        ("take", "hair clippers"),
        ("move", "north"),
        ("use", "key"),
        ("move", "north"),
        ("use", "hair clippers"),
        ("move", "north"),
        ("answer", "piano"),
        ("move", "west"),
        ("take", "ancient scroll"),
    ]

    for action, argument in steps:
        print(f"\n> {action} {argument}")
        if action == "move":
            result = world.move(argument)
            if result.moved:
                show(world)
            else:
                print(f"   Blocked ({result.cause}): {result.blocker_description or 'no way through'}")
                if result.attack is not None:
                    print(f"   {result.attack.monster_name} {result.attack.attack_text} (-{result.attack.damage})")
        elif action == "take":
            print(f"   {world.take_item(argument).outcome}")
        elif action == "use":
            used = world.use_item(argument)
            print(f"   {used.outcome}" + (f" (+{used.resolution.points})" if used.resolution else ""))
        elif action == "answer":
            answered = world.answer(argument)
            print(f"   {answered.outcome}" + (f" (+{answered.resolution.points})" if answered.resolution else ""))

    with tempfile.TemporaryDirectory() as tmp:
        save_path = Path(tmp) / "walkthrough.json"
        world.save(save_path)
        restored = GameWorld.from_file(settings.world_path, settings=settings)
        restored.load(save_path)
        print(
            f"\n💾 Restored save: room '{restored.current_room.name}', score {restored.player.score}, "
            f"carrying {[item.name for item in restored.player.inventory]}"
        )

    print("\n" + "=" * 70)
    print(f"✅ Finished with {world.player.score} points ({world.player.rank})")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
