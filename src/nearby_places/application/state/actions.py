"""Actions dispatched to the state store."""

from dataclasses import dataclass

from nearby_places.domain.models.location_state import LocationState
from nearby_places.domain.models.lookup_result import LookupResult
from nearby_places.domain.models.place import Place
from nearby_places.domain.models.route_summary import RouteSummary
from nearby_places.domain.models.viewport import Viewport


@dataclass(frozen=True)
class LocationChanged:
    """The location state machine moved or its display name changed."""

    location: LocationState


@dataclass(frozen=True)
class SearchStarted:
    """A search request was sent for the query."""

    query: str


@dataclass(frozen=True)
class SearchCompleted:
    """A search finished, successfully or not."""

    query: str
    result: LookupResult[list[Place]]


@dataclass(frozen=True)
class SearchCleared:
    """The query is too short to search; results are emptied."""

    query: str = ""


@dataclass(frozen=True)
class RouteEstimateStarted:
    """An inline distance/time estimate was requested for a place."""

    place_id: str


@dataclass(frozen=True)
class RouteEstimateCompleted:
    """An inline estimate finished."""

    place_id: str
    result: LookupResult[RouteSummary]


@dataclass(frozen=True)
class PreviewOpened:
    """A route preview was opened for a place."""

    place: Place
    viewport: Viewport


@dataclass(frozen=True)
class PreviewRouteCompleted:
    """The route computation for an open preview finished."""

    place_id: str
    result: LookupResult[RouteSummary]


@dataclass(frozen=True)
class PreviewClosed:
    """The route preview was dismissed."""


Action = (
    LocationChanged
    | SearchStarted
    | SearchCompleted
    | SearchCleared
    | RouteEstimateStarted
    | RouteEstimateCompleted
    | PreviewOpened
    | PreviewRouteCompleted
    | PreviewClosed
)
