"""Player state and character mechanics."""

from .player import (
    HealthStatus,
    Player,
    get_health_status,
    get_rank,
)

__all__ = [
    "HealthStatus",
    "Player",
    "get_health_status",
    "get_rank",
]
