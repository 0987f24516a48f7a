"""Tests for the reducer and the store."""

from unittest.mock import MagicMock

import pytest

from nearby_places.application.state import (
    AppState,
    LocationChanged,
    PreviewClosed,
    PreviewOpened,
    PreviewRouteCompleted,
    RouteEstimate,
    RouteEstimateCompleted,
    RouteEstimateStarted,
    SearchCleared,
    SearchCompleted,
    SearchStarted,
    Store,
    reduce,
)
from nearby_places.domain.models import (
    Coordinate,
    ErrorKind,
    LocationPhase,
    LocationState,
    LookupResult,
    RouteSummary,
    Viewport,
)
from tests.fakes import make_place

HERE = Coordinate(37.7749, -122.4194)


def _with_results(*names: str) -> AppState:
    places = [make_place(name) for name in names]
    return reduce(AppState(), SearchCompleted("coffee", LookupResult.success(places)))


class TestSearchReduction:
    """Tests for search actions."""

    def test_search_started_marks_loading(self) -> None:
        """Given idle state, when a search starts, then it is loading with the query."""
        state = reduce(AppState(), SearchStarted("coffee"))

        assert state.search.is_loading
        assert state.search.query == "coffee"

    def test_search_completed_stores_places(self) -> None:
        """Given a successful result, when completed, then places are stored in order."""
        state = _with_results("First", "Second")

        assert [place.name for place in state.search.places] == ["First", "Second"]
        assert not state.search.is_loading
        assert state.search.error is None

    def test_search_failure_shows_no_results_and_error(self) -> None:
        """Given a failure, when completed, then places are empty and the error is kept."""
        previous = _with_results("Old")
        failure = LookupResult.failure(ErrorKind.MALFORMED_RESPONSE, "Invalid JSON in response")

        state = reduce(previous, SearchCompleted("coffee", failure))

        assert state.search.places == ()
        assert state.search.error is not None
        assert state.search.error.kind == ErrorKind.MALFORMED_RESPONSE

    def test_last_completed_search_wins(self) -> None:
        """Given two overlapping searches, when both complete, then the later arrival is shown."""
        state = reduce(AppState(), SearchStarted("co"))
        state = reduce(state, SearchStarted("coffee"))
        state = reduce(
            state, SearchCompleted("coffee", LookupResult.success([make_place("Coffee")]))
        )
        state = reduce(state, SearchCompleted("co", LookupResult.success([make_place("Co-op")])))

        assert state.search.query == "co"
        assert [place.name for place in state.search.places] == ["Co-op"]

    def test_new_results_drop_old_estimates(self) -> None:
        """Given estimates for old results, when a search completes, then they are dropped."""
        state = _with_results("Old")
        place_id = state.search.places[0].id
        state = reduce(state, RouteEstimateStarted(place_id))

        state = reduce(state, SearchCompleted("tea", LookupResult.success([])))

        assert state.route_estimates == {}

    def test_search_cleared(self) -> None:
        """Given results, when cleared, then places and estimates are empty."""
        state = reduce(_with_results("Old"), SearchCleared("a"))

        assert state.search.places == ()
        assert state.search.query == "a"
        assert not state.search.is_loading


class TestRouteEstimateReduction:
    """Tests for inline estimate actions."""

    def test_started_shows_placeholders(self) -> None:
        """Given a started estimate, when reading it, then placeholders are shown."""
        state = reduce(AppState(), RouteEstimateStarted("p1"))

        estimate = state.route_estimates["p1"]
        assert estimate.is_loading
        assert estimate.distance_text == "--"
        assert estimate.eta_text == "--"

    def test_completed_formats_summary(self) -> None:
        """Given a summary, when completed, then formatted values are shown."""
        summary = RouteSummary.from_meters_and_seconds(12345, 905)

        state = reduce(AppState(), RouteEstimateCompleted("p1", LookupResult.success(summary)))

        estimate = state.route_estimates["p1"]
        assert not estimate.is_loading
        assert estimate.distance_text == "12.3 km"
        assert estimate.eta_text == "15 min"

    def test_failed_keeps_placeholders(self) -> None:
        """Given a failure, when completed, then placeholders stay and the error is kept."""
        failure = LookupResult.failure(ErrorKind.NO_ROUTE_FOUND, "No route found")

        state = reduce(AppState(), RouteEstimateCompleted("p1", failure))

        estimate = state.route_estimates["p1"]
        assert estimate.distance_text == "--"
        assert estimate.error is not None

    def test_does_not_mutate_previous_state(self) -> None:
        """Given a state, when reducing, then the previous estimates dict is untouched."""
        before = AppState()

        reduce(before, RouteEstimateStarted("p1"))

        assert before.route_estimates == {}


class TestPreviewReduction:
    """Tests for preview actions."""

    def _opened(self) -> AppState:
        place = make_place()
        viewport = Viewport.enclosing(HERE, place.coordinate)
        return reduce(AppState(), PreviewOpened(place, viewport))

    def test_opened_preview_is_loading(self) -> None:
        """Given an opened preview, when reading it, then the route is loading."""
        state = self._opened()

        assert state.preview is not None
        assert state.preview.route.is_loading
        assert state.preview.route.distance_text == "--"

    def test_route_completed_for_open_preview(self) -> None:
        """Given an open preview, when its route completes, then values are shown."""
        state = self._opened()
        assert state.preview is not None
        summary = RouteSummary.from_meters_and_seconds(1500, 300)

        state = reduce(
            state, PreviewRouteCompleted(state.preview.place.id, LookupResult.success(summary))
        )

        assert state.preview is not None
        assert state.preview.route.distance_text == "1.5 km"
        assert state.preview.route.eta_text == "5 min"

    def test_route_for_other_place_is_dropped(self) -> None:
        """Given a route for a different place, when completed, then the preview is unchanged."""
        state = self._opened()
        summary = RouteSummary.from_meters_and_seconds(1500, 300)

        after = reduce(state, PreviewRouteCompleted("other", LookupResult.success(summary)))

        assert after is state

    def test_closed(self) -> None:
        """Given an open preview, when closed, then no preview remains."""
        state = reduce(self._opened(), PreviewClosed())

        assert state.preview is None


def test_location_changed() -> None:
    """Given a new location state, when dispatched, then it replaces the old one."""
    location = LocationState(phase=LocationPhase.RESOLVED, coordinate=HERE, display_name="SF")

    state = reduce(AppState(), LocationChanged(location))

    assert state.location == location


def test_unknown_action_raises() -> None:
    """Given an unsupported action, when reducing, then TypeError is raised."""
    with pytest.raises(TypeError, match="Unsupported action"):
        reduce(AppState(), "not an action")  # type: ignore[arg-type]


class TestStore:
    """Tests for Store dispatch and subscriptions."""

    def test_dispatch_updates_state(self) -> None:
        """Given a store, when dispatching, then the new state is returned and kept."""
        store = Store()

        state = store.dispatch(SearchStarted("coffee"))

        assert store.state is state
        assert state.search.is_loading

    def test_listeners_are_notified(self) -> None:
        """Given a subscriber, when dispatching, then it receives state and action."""
        store = Store()
        listener = MagicMock()
        store.subscribe(listener)
        action = SearchStarted("coffee")

        store.dispatch(action)

        listener.assert_called_once_with(store.state, action)

    def test_unsubscribe(self) -> None:
        """Given an unsubscribed listener, when dispatching, then it is not called."""
        store = Store()
        listener = MagicMock()
        unsubscribe = store.subscribe(listener)

        unsubscribe()
        unsubscribe()
        store.dispatch(SearchStarted("coffee"))

        listener.assert_not_called()

    def test_initial_state(self) -> None:
        """Given an initial state, when creating the store, then it is used."""
        initial = AppState(route_estimates={"p1": RouteEstimate()})

        assert Store(initial).state is initial
