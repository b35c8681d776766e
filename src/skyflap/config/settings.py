"""
Game settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested values use a double underscore, e.g. ``SKYFLAP_BIRD__GRAVITY=0.3``.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FieldSettings(BaseModel):
    """Playfield geometry."""

    width: int = Field(default=320, gt=0)
    height: int = Field(default=480, gt=0)

    # Ground strip at the bottom of the field
    ground_height: int = Field(default=112, ge=0)

    @model_validator(mode="after")
    def _ground_fits(self) -> "FieldSettings":
        if self.ground_height >= self.height:
            raise ValueError("ground_height must be smaller than the field height")
        return self

    @property
    def ground_y(self) -> float:
        """Y coordinate of the ground line."""
        return float(self.height - self.ground_height)


class BirdSettings(BaseModel):
    """Bird physics and animation constants (per-frame units)."""

    x: float = 50.0
    baseline_y: float = 150.0
    radius: float = Field(default=12.0, gt=0)

    gravity: float = Field(default=0.25, gt=0)
    jump: float = Field(default=4.6, gt=0)

    # Rotation, degrees
    rise_tilt_deg: float = -25.0
    dive_tilt_deg: float = 90.0
    tilt_step_deg: float = Field(default=2.0, gt=0)

    # Ready-state hover: y = baseline + cos(frame / bob_period) * bob_amplitude
    bob_period: float = Field(default=15.0, gt=0)
    bob_amplitude: float = 3.0

    # Wing animation advances every N frames
    ready_wing_period: int = Field(default=10, gt=0)
    play_wing_period: int = Field(default=5, gt=0)


class ObstacleSettings(BaseModel):
    """Pipe geometry, scrolling and spawning."""

    width: float = Field(default=52.0, gt=0)
    pillar_height: float = Field(default=400.0, gt=0)
    gap: float = Field(default=100.0, gt=0)
    speed: float = Field(default=2.0, gt=0)
    spawn_interval: int = Field(default=120, gt=0)

    # top edge = base_offset * (u + 1), u in [0, 1)
    base_offset: float = Field(default=-150.0, lt=0)


class DisplaySettings(BaseModel):
    """Simulator window settings."""

    fps: int = Field(default=60, gt=0)
    scale: int = Field(default=2, ge=1, le=6)
    title: str = "SKYFLAP"
    show_debug: bool = False


class Settings(BaseSettings):
    """Main game settings."""

    model_config = SettingsConfigDict(
        env_prefix="SKYFLAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator"] = "simulator"
    debug: bool = False

    # Seed for the obstacle generator; None draws from system entropy
    seed: Optional[int] = None

    # Nested settings
    playfield: FieldSettings = Field(default_factory=FieldSettings)
    bird: BirdSettings = Field(default_factory=BirdSettings)
    obstacles: ObstacleSettings = Field(default_factory=ObstacleSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def is_simulator(self) -> bool:
        """Check if running in the pygame simulator."""
        return self.env == "simulator"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
