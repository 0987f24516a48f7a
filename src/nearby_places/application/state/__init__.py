"""Application state container (unidirectional data flow)."""

from nearby_places.application.state.actions import (
    Action,
    LocationChanged,
    PreviewClosed,
    PreviewOpened,
    PreviewRouteCompleted,
    RouteEstimateCompleted,
    RouteEstimateStarted,
    SearchCleared,
    SearchCompleted,
    SearchStarted,
)
from nearby_places.application.state.app_state import (
    AppState,
    PreviewState,
    RouteEstimate,
    SearchState,
)
from nearby_places.application.state.reducer import reduce
from nearby_places.application.state.store import Store

__all__ = [
    "Action",
    "AppState",
    "LocationChanged",
    "PreviewClosed",
    "PreviewOpened",
    "PreviewRouteCompleted",
    "PreviewState",
    "RouteEstimate",
    "RouteEstimateCompleted",
    "RouteEstimateStarted",
    "SearchCleared",
    "SearchCompleted",
    "SearchStarted",
    "SearchState",
    "Store",
    "reduce",
]
