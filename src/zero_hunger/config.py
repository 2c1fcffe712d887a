"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from zero_hunger.domain.listings import Coordinate

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    list_latency_seconds: float = 0.8
    donate_latency_seconds: float = 1.0
    claim_latency_seconds: float = 1.0
    origin_latitude: float = -1.2921
    origin_longitude: float = 36.8219
    search_radius_km: float = 5.0
    filter_by_radius: bool = False
    default_donor_name: str = "My Restaurant"
    donation_shelf_life_hours: float = 24.0
    map_zoom: float = 13.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def origin(self) -> Coordinate:
        """Default location used for feeds, maps and new donations."""
        return Coordinate(self.origin_latitude, self.origin_longitude)
