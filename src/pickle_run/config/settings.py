"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested sections use a double underscore, e.g. PICKLE_DISPLAY__WIDTH=1280.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseModel):
    """Window-related settings."""

    width: int = Field(default=960, gt=0)
    height: int = Field(default=640, gt=0)
    fps: int = Field(default=60, gt=0)
    fullscreen: bool = False
    resizable: bool = True
    title: str = "Pickle Run"


class GameplaySettings(BaseModel):
    """Physics and pacing. Velocities are in pixels per frame."""

    # Player
    gravity: float = 0.7
    jump_strength: float = -16.0
    max_jumps: int = Field(default=2, ge=1)  # ground jump + one mid-air jump
    ground_ratio: float = Field(default=0.7, gt=0.0, le=1.0)
    player_x_ratio: float = Field(default=0.2, ge=0.0, le=1.0)
    player_radius: float = 15.0

    # Collectibles
    collectible_count: int = Field(default=10, ge=1)
    collectible_size: float = 40.0
    spacing_ratio: float = 0.65
    band_min_ratio: float = 0.38
    band_max_ratio: float = 0.68
    bob_step: float = 0.04      # radians per frame
    bob_amplitude: float = 14.0

    # Difficulty
    base_speed: float = 2.6
    speed_step: float = 0.18

    # Celebration
    confetti_count: int = Field(default=35, ge=0)


class AudioSettings(BaseModel):
    """Collect tone synthesis settings."""

    enabled: bool = True
    sample_rate: int = 44100
    tone_min_hz: float = 220.0
    tone_max_hz: float = 520.0
    tone_start_gain: float = Field(default=0.14, gt=0.0, le=1.0)
    tone_end_gain: float = Field(default=0.001, gt=0.0, le=1.0)
    tone_duration: float = Field(default=0.12, gt=0.0)  # seconds


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PICKLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    theme: str = "pickle"

    # Paths
    assets_path: Path = Field(default_factory=lambda: Path(__file__).parent.parent / "assets")
    themes_path: Path = Field(default_factory=lambda: Path(__file__).parent / "themes")
    sprite_name: str = "pickle.png"

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    gameplay: GameplaySettings = Field(default_factory=GameplaySettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)

    @property
    def sprite_path(self) -> Path:
        """Path to the collectible sprite image."""
        return self.assets_path / self.sprite_name


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
