"""Gameplay systems: obstacle resolution, movement, items, combat, persistence."""
