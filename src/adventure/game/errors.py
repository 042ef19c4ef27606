"""Exception types shared across the game core."""


class AdventureError(Exception):
    """Base class for all game core errors."""

    pass


class WorldLoadError(AdventureError):
    """Raised when a world definition cannot be loaded."""

    pass


class ValidationError(AdventureError, ValueError):
    """Raised when an API call receives an invalid argument."""

    pass


class PersistenceError(AdventureError):
    """Raised when saving or restoring game state fails."""

    pass
