"""Route lookup and navigation handoff use cases."""

import asyncio
import logging
from typing import TYPE_CHECKING

from nearby_places.domain.exceptions import UpstreamError
from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.error_details import ErrorKind
from nearby_places.domain.models.lookup_result import LookupResult
from nearby_places.domain.models.navigation_handoff import NavigationHandoff, Waypoint
from nearby_places.domain.models.route_summary import RouteSummary

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearby_places.domain.ports import NavigationLauncher, RouteRepository


class RouteService:
    """Computes driving route summaries and hands navigation off.

    Every call issues its own request; summaries are not shared or cached.
    """

    def __init__(
        self,
        repository: "RouteRepository",
        launcher: "NavigationLauncher",
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with a route repository, a navigation launcher and a bound per lookup."""
        self._repository = repository
        self._launcher = launcher
        self._timeout_seconds = timeout_seconds

    async def compute_route(
        self, origin: Coordinate, destination: Coordinate
    ) -> LookupResult[RouteSummary]:
        """Summary of the first driving route, or an explicit failure."""
        try:
            summary = await asyncio.wait_for(
                self._repository.find_route(origin, destination), timeout=self._timeout_seconds
            )
        except UpstreamError as e:
            logger.warning(f"Route lookup failed: {e.reason}")
            return LookupResult(error=e.to_details())
        except asyncio.TimeoutError:
            logger.warning(f"Route lookup timed out after {self._timeout_seconds}s")
            return LookupResult.failure(ErrorKind.TIMEOUT, "Route lookup timed out")

        if summary is None:
            return LookupResult.failure(ErrorKind.NO_ROUTE_FOUND, "No route found")
        return LookupResult.success(summary)

    def open_external_navigation(
        self,
        origin: Coordinate,
        destination: Coordinate,
        label: str,
        place_id: str | None = None,
    ) -> None:
        """Hand driving directions off to the external maps application."""
        handoff = NavigationHandoff(
            origin=Waypoint(coordinate=origin),
            destination=Waypoint(coordinate=destination, label=label, place_id=place_id),
        )
        self._launcher.open_navigation(handoff)
