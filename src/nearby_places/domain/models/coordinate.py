"""Coordinate domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """Check that both axes are within their ranges."""
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    def as_query_value(self) -> str:
        """Format as "lat,lng" for HTTP query parameters."""
        return f"{self.latitude},{self.longitude}"
