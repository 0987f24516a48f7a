"""Place search use case."""

import asyncio
import logging
from typing import TYPE_CHECKING

from nearby_places.domain.exceptions import UpstreamError
from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.error_details import ErrorKind
from nearby_places.domain.models.lookup_result import LookupResult
from nearby_places.domain.models.place import Place

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearby_places.domain.ports import PlaceSearchRepository

# Trimmed queries must be longer than this to reach the network
MIN_QUERY_LENGTH = 1


class PlaceSearchService:
    """Searches places around a coordinate and always resolves to a result."""

    def __init__(
        self, repository: "PlaceSearchRepository", timeout_seconds: float = 10.0
    ) -> None:
        """Initialize with a search repository and a bound per search."""
        self._repository = repository
        self._timeout_seconds = timeout_seconds

    @staticmethod
    def should_search(query: str, coordinate: Coordinate | None) -> bool:
        """True when the query is long enough and a coordinate is known."""
        return coordinate is not None and len(query.strip()) > MIN_QUERY_LENGTH

    async def search(self, query: str, coordinate: Coordinate | None) -> LookupResult[list[Place]]:
        """Search places matching the query near the coordinate.

        Short queries and a missing coordinate yield an empty list without a
        request. Network failures, malformed responses and timeouts yield a
        failure result whose value is None.
        """
        if coordinate is None or not self.should_search(query, coordinate):
            return LookupResult.success([])

        try:
            places = await asyncio.wait_for(
                self._repository.search_places(query, coordinate), timeout=self._timeout_seconds
            )
        except UpstreamError as e:
            logger.warning(f"Search for '{query}' failed: {e.reason}")
            return LookupResult(error=e.to_details())
        except asyncio.TimeoutError:
            logger.warning(f"Search for '{query}' timed out after {self._timeout_seconds}s")
            return LookupResult.failure(ErrorKind.TIMEOUT, "Search timed out")

        return LookupResult.success(places)
