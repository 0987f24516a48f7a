"""Google Places Text Search repository adapter."""

import logging
from urllib.parse import quote

from nearby_places.adapters.google_maps.constants import PLACES_TEXT_SEARCH_URL, STATUS_OK
from nearby_places.adapters.google_maps.http_client import GoogleMapsHttpClient
from nearby_places.adapters.google_maps.place_parser import PlaceParser
from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.place import Place
from nearby_places.domain.ports.place_search_repository import PlaceSearchRepository

logger = logging.getLogger(__name__)

DEFAULT_QUALIFIER = "near me"
DEFAULT_RADIUS_METERS = 10000


class GooglePlacesSearchRepository(PlaceSearchRepository):
    """Adapter for free-text place search using the Places Text Search API."""

    def __init__(
        self,
        http_client: GoogleMapsHttpClient,
        radius_meters: int = DEFAULT_RADIUS_METERS,
        qualifier: str = DEFAULT_QUALIFIER,
    ) -> None:
        """Initialize with an HTTP client and search tuning.

        Args:
            http_client: Client for Google Maps web services.
            radius_meters: Radius biasing results around the coordinate.
            qualifier: Text appended to every query.
        """
        self._http_client = http_client
        self._radius_meters = radius_meters
        self._qualifier = qualifier

    def qualify_query(self, query: str) -> str:
        """Append the proximity qualifier to the raw query text."""
        if not self._qualifier:
            return query
        return f"{query} {self._qualifier}"

    @staticmethod
    def encode_query(text: str) -> str:
        """Percent-encode text for a URL query value.

        Falls back to the unencoded text if it cannot be encoded.
        """
        try:
            return quote(text, safe="")
        except UnicodeEncodeError as e:
            logger.warning(f"Could not percent-encode query, sending it unencoded: {e}")
            return text

    def build_query_string(self, query: str, coordinate: Coordinate) -> str:
        """Build the encoded query string for a search request (without the API key)."""
        encoded_query = self.encode_query(self.qualify_query(query))
        return (
            f"query={encoded_query}"
            f"&location={coordinate.as_query_value()}"
            f"&radius={self._radius_meters}"
        )

    async def search_places(self, query: str, coordinate: Coordinate) -> list[Place]:
        """Search for places matching the query near the coordinate.

        Args:
            query: Free text as typed by the user.
            coordinate: Center of the search.

        Returns:
            Parsed places; empty when the response status is not OK.

        Raises:
            UpstreamError: On network failure or a malformed response.
        """
        data = await self._http_client.get_json_encoded(
            PLACES_TEXT_SEARCH_URL, self.build_query_string(query, coordinate)
        )

        status = data.get("status")
        logger.debug(f"Places API status: {status}")
        if status != STATUS_OK:
            error_message = data.get("error_message", "")
            logger.warning(f"Places search for '{query}' returned status {status} {error_message}")
            return []

        places = PlaceParser.parse_places(data.get("results", []))
        logger.info(f"Places search for '{query}' returned {len(places)} place(s)")
        return places
