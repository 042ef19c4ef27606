"""Adventure - a room-graph adventure game engine."""

__version__ = "0.1.0"
