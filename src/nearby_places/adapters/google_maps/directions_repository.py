"""Google Directions repository adapter."""

import logging
from typing import Any

from nearby_places.adapters.google_maps.constants import (
    DIRECTIONS_URL,
    MODE_DRIVING,
    STATUS_NOT_FOUND,
    STATUS_OK,
    STATUS_ZERO_RESULTS,
)
from nearby_places.adapters.google_maps.http_client import GoogleMapsHttpClient
from nearby_places.domain.exceptions import UpstreamError
from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.error_details import ErrorKind
from nearby_places.domain.models.route_summary import RouteSummary
from nearby_places.domain.ports.route_repository import RouteRepository

logger = logging.getLogger(__name__)


class GoogleDirectionsRepository(RouteRepository):
    """Adapter for driving routes using the Directions API."""

    def __init__(self, http_client: GoogleMapsHttpClient) -> None:
        """Initialize with an HTTP client."""
        self._http_client = http_client

    async def find_route(self, origin: Coordinate, destination: Coordinate) -> RouteSummary | None:
        """Summary of the first driving route between two coordinates.

        Returns:
            RouteSummary, or None if the provider found no route.

        Raises:
            UpstreamError: On network failure, a rejected request or a malformed response.
        """
        params: dict[str, str | int] = {
            "origin": origin.as_query_value(),
            "destination": destination.as_query_value(),
            "mode": MODE_DRIVING,
        }
        data = await self._http_client.get_json(DIRECTIONS_URL, params)

        status = data.get("status")
        if status in (STATUS_ZERO_RESULTS, STATUS_NOT_FOUND):
            logger.info(f"No route from {params['origin']} to {params['destination']}: {status}")
            return None
        if status != STATUS_OK:
            error_message = data.get("error_message", "")
            logger.error(f"Directions request rejected with status {status}: {error_message}")
            raise UpstreamError(
                ErrorKind.UPSTREAM_REJECTED,
                f"Directions API status {status} {error_message}".strip(),
            )

        routes = data.get("routes")
        if not isinstance(routes, list) or not routes:
            return None

        return self._summarize_route(routes[0])

    @staticmethod
    def _summarize_route(route: Any) -> RouteSummary:
        """Sum distance and duration over the legs of a route."""
        legs = route.get("legs") if isinstance(route, dict) else None
        if not isinstance(legs, list) or not legs:
            raise UpstreamError(ErrorKind.MALFORMED_RESPONSE, "Route has no legs")

        distance_meters = 0.0
        duration_seconds = 0.0
        for leg in legs:
            distance_meters += GoogleDirectionsRepository._leg_value(leg, "distance")
            duration_seconds += GoogleDirectionsRepository._leg_value(leg, "duration")

        return RouteSummary.from_meters_and_seconds(distance_meters, duration_seconds)

    @staticmethod
    def _leg_value(leg: Any, field: str) -> float:
        """Read leg[field]['value'] as a number."""
        container = leg.get(field) if isinstance(leg, dict) else None
        value = container.get("value") if isinstance(container, dict) else None
        if not isinstance(value, int | float) or isinstance(value, bool):
            raise UpstreamError(ErrorKind.MALFORMED_RESPONSE, f"Route leg is missing {field}")
        return float(value)
