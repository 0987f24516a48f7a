"""Place search repository port."""

from typing import Protocol

from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.place import Place


class PlaceSearchRepository(Protocol):
    """Port for free-text search of places around a coordinate."""

    async def search_places(self, query: str, coordinate: Coordinate) -> list[Place]:
        """Search for places matching the query near the coordinate.

        Args:
            query: Free text as typed by the user.
            coordinate: Center of the search.

        Returns:
            Matching places; empty when the provider reports no usable results.

        Raises:
            UpstreamError: On network failure or a malformed response.
        """
        ...
