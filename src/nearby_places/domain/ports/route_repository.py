"""Route repository port."""

from typing import Protocol

from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.route_summary import RouteSummary


class RouteRepository(Protocol):
    """Port for driving directions between two coordinates."""

    async def find_route(self, origin: Coordinate, destination: Coordinate) -> RouteSummary | None:
        """Summary of the first driving route, or None when there is no route."""
        ...
