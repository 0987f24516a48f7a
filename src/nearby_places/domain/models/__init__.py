"""Domain models for nearby places."""

from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.error_details import ErrorDetails, ErrorKind
from nearby_places.domain.models.location_state import (
    AuthorizationStatus,
    LocationEvent,
    LocationPhase,
    LocationState,
)
from nearby_places.domain.models.lookup_result import LookupResult
from nearby_places.domain.models.navigation_handoff import NavigationHandoff, Waypoint
from nearby_places.domain.models.place import Place
from nearby_places.domain.models.placemark import Placemark
from nearby_places.domain.models.route_summary import RouteSummary
from nearby_places.domain.models.viewport import Viewport

__all__ = [
    "AuthorizationStatus",
    "Coordinate",
    "ErrorDetails",
    "ErrorKind",
    "LocationEvent",
    "LocationPhase",
    "LocationState",
    "LookupResult",
    "NavigationHandoff",
    "Place",
    "Placemark",
    "RouteSummary",
    "Viewport",
    "Waypoint",
]
