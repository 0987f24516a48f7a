"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nearby_places.domain.models.coordinate import Coordinate


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Maps Platform configuration
    google_maps_api_key: str = Field(
        default="",
        description="API key for the Places, Directions and Geocoding APIs (GOOGLE_MAPS_API_KEY)",
    )
    request_timeout_seconds: float = Field(
        default=10.0, description="Upper bound for every outgoing request in seconds"
    )
    language: str | None = Field(
        default=None, description="Preferred result language, e.g. 'en' or 'de'"
    )

    # Search configuration
    search_radius_meters: int = Field(
        default=10000, description="Radius biasing text search results around the user"
    )
    search_qualifier: str = Field(
        default="near me",
        description="Text appended to every query to bias results toward proximity",
    )

    # Location configuration
    location_permission: str = Field(
        default="prompt",
        description="Location permission: 'granted', 'denied' or 'prompt' (ask on first use)",
    )
    latitude: float | None = Field(default=None, description="Latitude of the device location")
    longitude: float | None = Field(default=None, description="Longitude of the device location")

    # TOML config file path (optional)
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [location] and [search] sections",
    )

    @field_validator("location_permission")
    @classmethod
    def validate_location_permission(cls, v: str) -> str:
        """Validate location permission is 'granted', 'denied' or 'prompt'."""
        if v.lower() not in ("granted", "denied", "prompt"):
            raise ValueError("location_permission must be either 'granted', 'denied', or 'prompt'")
        return v.lower()

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float | None) -> float | None:
        """Validate latitude is within [-90, 90]."""
        if v is not None and not -90.0 <= v <= 90.0:
            raise ValueError("latitude must be between -90 and 90")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float | None) -> float | None:
        """Validate longitude is within [-180, 180]."""
        if v is not None and not -180.0 <= v <= 180.0:
            raise ValueError("longitude must be between -180 and 180")
        return v

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate the request timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @model_validator(mode="after")
    def apply_toml_overrides(self) -> "AppConfig":
        """Apply [location] and [search] settings from the TOML file, if configured."""
        if self.config_file:
            self._load_toml_data()
        return self

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, filling location and search settings.

        Values passed explicitly or set through the environment take precedence
        over the file.
        """
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        explicit = self.model_fields_set

        location = toml_data.get("location", {})
        if "permission" in location and "location_permission" not in explicit:
            self.location_permission = self.validate_location_permission(location["permission"])
        if "latitude" in location and "latitude" not in explicit:
            self.latitude = self.validate_latitude(float(location["latitude"]))
        if "longitude" in location and "longitude" not in explicit:
            self.longitude = self.validate_longitude(float(location["longitude"]))

        search = toml_data.get("search", {})
        if "radius_meters" in search and "search_radius_meters" not in explicit:
            self.search_radius_meters = int(search["radius_meters"])
        if "qualifier" in search and "search_qualifier" not in explicit:
            self.search_qualifier = str(search["qualifier"])
        if "language" in search and "language" not in explicit:
            self.language = str(search["language"])

        return toml_data

    def device_coordinate(self) -> Coordinate | None:
        """Configured device coordinate, or None if either axis is missing."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(latitude=self.latitude, longitude=self.longitude)
