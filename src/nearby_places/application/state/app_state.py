"""Application state dataclasses."""

from dataclasses import dataclass, field

from nearby_places.domain.models.error_details import ErrorDetails
from nearby_places.domain.models.location_state import LocationState
from nearby_places.domain.models.place import Place
from nearby_places.domain.models.route_summary import PLACEHOLDER_TEXT, RouteSummary
from nearby_places.domain.models.viewport import Viewport


@dataclass(frozen=True)
class SearchState:
    """Latest search query and the places shown for it."""

    query: str = ""
    places: tuple[Place, ...] = ()
    is_loading: bool = False
    error: ErrorDetails | None = None


@dataclass(frozen=True)
class RouteEstimate:
    """Distance and travel time shown for one place."""

    summary: RouteSummary | None = None
    is_loading: bool = False
    error: ErrorDetails | None = None

    @property
    def distance_text(self) -> str:
        """Formatted distance, or the placeholder until a summary arrives."""
        return self.summary.distance_text if self.summary else PLACEHOLDER_TEXT

    @property
    def eta_text(self) -> str:
        """Formatted travel time, or the placeholder until a summary arrives."""
        return self.summary.eta_text if self.summary else PLACEHOLDER_TEXT


@dataclass(frozen=True)
class PreviewState:
    """Route preview for one selected place."""

    place: Place
    viewport: Viewport
    route: RouteEstimate = field(default_factory=RouteEstimate)


@dataclass(frozen=True)
class AppState:
    """Whole application state, replaced on every dispatched action."""

    location: LocationState = field(default_factory=LocationState)
    search: SearchState = field(default_factory=SearchState)
    route_estimates: dict[str, RouteEstimate] = field(default_factory=dict)
    preview: PreviewState | None = None
