"""Configuration management for the adventure engine using Pydantic Settings."""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ADVENTURE_",
        extra="ignore",
    )

    # Player Settings
    max_inventory_weight: int = Field(
        default=13, ge=0, description="Maximum total weight a player can carry"
    )
    max_health: int = Field(default=100, ge=1, description="Maximum player health")

    # World Settings
    worlds_dir: Path = Field(
        default=Path("./data/worlds"), description="Directory holding world definitions"
    )
    world_file: str = Field(default="simple_hallway.json", description="Default world file")

    # Persistence
    save_file: Path = Field(default=Path("saved_game.json"), description="Save game path")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")

    @property
    def world_path(self) -> Path:
        """Get the path of the default world definition."""
        return self.worlds_dir / self.world_file


@dataclass(frozen=True)
class PlayerConfig:
    """Limits applied to a player at construction time."""

    max_inventory_weight: int = 13
    max_health: int = 100

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlayerConfig":
        """Build a player configuration from application settings."""
        return cls(
            max_inventory_weight=settings.max_inventory_weight,
            max_health=settings.max_health,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
