"""Domain layer - core models and ports."""

from nearby_places.domain.models import (
    Coordinate,
    LookupResult,
    Place,
    RouteSummary,
    Viewport,
)
from nearby_places.domain.ports import (
    LocationSource,
    NavigationLauncher,
    PlaceSearchRepository,
    ReverseGeocoder,
    RouteRepository,
)

__all__ = [
    "Coordinate",
    "LocationSource",
    "LookupResult",
    "NavigationLauncher",
    "Place",
    "PlaceSearchRepository",
    "ReverseGeocoder",
    "RouteRepository",
    "RouteSummary",
    "Viewport",
]
