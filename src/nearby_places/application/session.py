"""Search, estimate, preview and navigate workflow around the state store."""

import asyncio
import logging
from collections.abc import Callable

from nearby_places.application.services.location_service import LocationService
from nearby_places.application.services.place_search_service import PlaceSearchService
from nearby_places.application.services.route_service import RouteService
from nearby_places.application.state import (
    AppState,
    LocationChanged,
    PreviewClosed,
    PreviewOpened,
    PreviewRouteCompleted,
    PreviewState,
    RouteEstimate,
    RouteEstimateCompleted,
    RouteEstimateStarted,
    SearchCleared,
    SearchCompleted,
    SearchStarted,
    SearchState,
    Store,
)
from nearby_places.domain.models.error_details import ErrorKind
from nearby_places.domain.models.location_state import LocationState
from nearby_places.domain.models.lookup_result import LookupResult
from nearby_places.domain.models.place import Place
from nearby_places.domain.models.route_summary import RouteSummary
from nearby_places.domain.models.viewport import Viewport

logger = logging.getLogger(__name__)

_NO_LOCATION_REASON = "Current location is not known"


class NearbyPlacesSession:
    """Drives the services and records every outcome in the store.

    Presentation code reads store.state (or subscribes to it) and calls the
    methods below; it never mutates state itself.
    """

    def __init__(
        self,
        store: Store,
        location_service: LocationService,
        search_service: PlaceSearchService,
        route_service: RouteService,
    ) -> None:
        """Initialize the session.

        The location service should publish into this store; use
        create_location_listener() when constructing it.
        """
        self._store = store
        self._location_service = location_service
        self._search_service = search_service
        self._route_service = route_service

    @staticmethod
    def create_location_listener(store: Store) -> Callable[[LocationState], None]:
        """Listener that forwards location changes to the store."""

        def on_change(location: LocationState) -> None:
            store.dispatch(LocationChanged(location))

        return on_change

    @property
    def state(self) -> AppState:
        """Current application state."""
        return self._store.state

    async def start(self) -> AppState:
        """Resolve the current location."""
        await self._location_service.start()
        return self.state

    async def refresh_location(self) -> AppState:
        """Request a fresh location fix."""
        await self._location_service.refresh()
        return self.state

    async def search(self, text: str) -> SearchState:
        """Search places for the text around the current location.

        Text that is too short (or an unknown location) clears the results
        without a request.
        """
        coordinate = self.state.location.coordinate
        if not self._search_service.should_search(text, coordinate):
            self._store.dispatch(SearchCleared(text))
            return self.state.search

        self._store.dispatch(SearchStarted(text))
        result = await self._search_service.search(text, coordinate)
        self._store.dispatch(SearchCompleted(text, result))
        return self.state.search

    async def estimate_route(self, place: Place) -> RouteEstimate:
        """Compute the inline distance/time estimate for one result."""
        self._store.dispatch(RouteEstimateStarted(place.id))
        result = await self._compute_route_to(place)
        self._store.dispatch(RouteEstimateCompleted(place.id, result))
        return self.state.route_estimates.get(place.id, RouteEstimate())

    async def estimate_routes(self, places: list[Place] | tuple[Place, ...]) -> None:
        """Compute inline estimates for the given results concurrently."""
        await asyncio.gather(*(self.estimate_route(place) for place in places))

    async def open_preview(self, place: Place) -> PreviewState | None:
        """Open the route preview for a place and compute its route.

        The preview computes its own route even when an inline estimate for
        the same place already exists.
        """
        origin = self.state.location.coordinate
        if origin is None:
            logger.warning(f"Cannot preview {place.name}: {_NO_LOCATION_REASON}")
            return None

        self._store.dispatch(PreviewOpened(place, Viewport.enclosing(origin, place.coordinate)))
        result = await self._route_service.compute_route(origin, place.coordinate)
        self._store.dispatch(PreviewRouteCompleted(place.id, result))
        return self.state.preview

    def close_preview(self) -> None:
        """Dismiss the route preview."""
        self._store.dispatch(PreviewClosed())

    def navigate(self, place: Place) -> bool:
        """Hand navigation to the place off to the external maps application.

        Returns:
            False if the current location is not known, True once handed off.
        """
        origin = self.state.location.coordinate
        if origin is None:
            logger.warning(f"Cannot navigate to {place.name}: {_NO_LOCATION_REASON}")
            return False

        self._route_service.open_external_navigation(
            origin, place.coordinate, place.name, place_id=place.provider_place_id
        )
        return True

    async def _compute_route_to(self, place: Place) -> LookupResult[RouteSummary]:
        origin = self.state.location.coordinate
        if origin is None:
            return LookupResult.failure(ErrorKind.LOCATION_UNAVAILABLE, _NO_LOCATION_REASON)
        return await self._route_service.compute_route(origin, place.coordinate)
