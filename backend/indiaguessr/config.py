from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Game Configuration
    ROUNDS_PER_GAME: int = 5
    POINT_RADIUS_KM: float = 70.0
    SAMPLE_SHRINK_FACTOR: float = 0.95  # keeps sampled points off the region edge
    MAX_POINTS: int = 5000
    POINTS_PER_KM: float = 8.0

    # Divisions (JSON array of {name, lat, lng}); bundled Indian states if unset
    DIVISIONS_FILE: Optional[str] = None

    # Map hints for the frontend
    REGION_POLYGON_POINTS: int = 48
    MAP_ZOOM: int = 7

    # Live sessions kept in memory; finished games are evicted first
    MAX_SESSIONS: int = 1000

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
