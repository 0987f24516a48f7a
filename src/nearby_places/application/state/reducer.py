"""Pure state transitions for dispatched actions."""

import logging
from dataclasses import replace

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
from nearby_places.domain.models.lookup_result import LookupResult
from nearby_places.domain.models.route_summary import RouteSummary

logger = logging.getLogger(__name__)


def _estimate_from_result(result: LookupResult[RouteSummary]) -> RouteEstimate:
    return RouteEstimate(summary=result.value, is_loading=False, error=result.error)


def reduce(state: AppState, action: Action) -> AppState:  # noqa: PLR0911
    """Return the state that follows from applying the action."""
    if isinstance(action, LocationChanged):
        return replace(state, location=action.location)

    if isinstance(action, SearchStarted):
        return replace(state, search=replace(state.search, query=action.query, is_loading=True))

    if isinstance(action, SearchCompleted):
        # Responses are applied in arrival order; the last one to arrive is shown.
        places = tuple(action.result.value or ()) if action.result.ok else ()
        return replace(
            state,
            search=SearchState(
                query=action.query, places=places, is_loading=False, error=action.result.error
            ),
            route_estimates={},
        )

    if isinstance(action, SearchCleared):
        return replace(state, search=SearchState(query=action.query), route_estimates={})

    if isinstance(action, RouteEstimateStarted):
        estimates = dict(state.route_estimates)
        estimates[action.place_id] = RouteEstimate(is_loading=True)
        return replace(state, route_estimates=estimates)

    if isinstance(action, RouteEstimateCompleted):
        estimates = dict(state.route_estimates)
        estimates[action.place_id] = _estimate_from_result(action.result)
        return replace(state, route_estimates=estimates)

    if isinstance(action, PreviewOpened):
        preview = PreviewState(
            place=action.place, viewport=action.viewport, route=RouteEstimate(is_loading=True)
        )
        return replace(state, preview=preview)

    if isinstance(action, PreviewRouteCompleted):
        if state.preview is None or state.preview.place.id != action.place_id:
            logger.debug(f"Dropping route for preview {action.place_id} that is no longer open")
            return state
        preview = replace(state.preview, route=_estimate_from_result(action.result))
        return replace(state, preview=preview)

    if isinstance(action, PreviewClosed):
        return replace(state, preview=None)

    raise TypeError(f"Unsupported action: {type(action).__name__}")
