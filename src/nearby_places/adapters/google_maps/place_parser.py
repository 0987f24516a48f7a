"""Parser for Places Text Search results."""

import logging
from typing import Any

from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.place import NO_ADDRESS, Place

logger = logging.getLogger(__name__)


class PlaceParser:
    """Parses Text Search result entries into Place objects."""

    @staticmethod
    def parse_places(results: Any) -> list[Place]:
        """Parse result entries, skipping the malformed ones.

        Args:
            results: The 'results' array of a Text Search response.

        Returns:
            List of Place objects, in response order.
        """
        if not isinstance(results, list):
            return []

        places = []
        for item in results:
            place = PlaceParser._parse_place(item)
            if place:
                places.append(place)
            else:
                logger.debug(f"Skipping malformed place entry: {item!r:.200}")

        return places

    @staticmethod
    def _parse_place(item: Any) -> Place | None:
        """Parse a single entry; None if it lacks a name or a coordinate."""
        if not isinstance(item, dict):
            return None

        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            return None

        coordinate = PlaceParser._extract_coordinate(item)
        if coordinate is None:
            return None

        provider_place_id = item.get("place_id")
        return Place(
            name=name,
            address=PlaceParser.resolve_address(item),
            coordinate=coordinate,
            provider_place_id=provider_place_id if isinstance(provider_place_id, str) else None,
        )

    @staticmethod
    def _extract_coordinate(item: dict[str, Any]) -> Coordinate | None:
        """Extract geometry.location.lat/lng."""
        geometry = item.get("geometry")
        if not isinstance(geometry, dict):
            return None
        location = geometry.get("location")
        if not isinstance(location, dict):
            return None

        lat = location.get("lat")
        lng = location.get("lng")
        if not PlaceParser._is_number(lat) or not PlaceParser._is_number(lng):
            return None

        coordinate = Coordinate(latitude=float(lat), longitude=float(lng))
        return coordinate if coordinate.is_valid() else None

    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, int | float) and not isinstance(value, bool)

    @staticmethod
    def resolve_address(item: dict[str, Any]) -> str:
        """First available of formatted_address and vicinity, else 'No address'."""
        for key in ("formatted_address", "vicinity"):
            value = item.get(key)
            if isinstance(value, str) and value:
                return value
        return NO_ADDRESS
