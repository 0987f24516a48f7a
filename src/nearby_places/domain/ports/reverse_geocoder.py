"""Reverse geocoder port."""

from typing import Protocol

from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.placemark import Placemark


class ReverseGeocoder(Protocol):
    """Port for resolving a coordinate to a human-readable place."""

    async def reverse_geocode(self, coordinate: Coordinate) -> Placemark | None:
        """Resolve a coordinate, or None when nothing matches it."""
        ...
