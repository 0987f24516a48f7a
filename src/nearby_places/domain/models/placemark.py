"""Reverse geocoding result model."""

from dataclasses import dataclass

CURRENT_LOCATION_TEXT = "Current location"


@dataclass(frozen=True)
class Placemark:
    """Human-readable parts of a resolved coordinate."""

    locality: str = ""
    region: str = ""
    country: str = ""

    def display_name(self) -> str:
        """Join the non-empty parts with ', ', or fall back to 'Current location'."""
        parts = [part for part in (self.locality, self.region, self.country) if part]
        return ", ".join(parts) or CURRENT_LOCATION_TEXT
