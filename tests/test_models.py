"""Tests for domain models."""

import pytest

from nearby_places.domain.exceptions import UpstreamError
from nearby_places.domain.models import (
    Coordinate,
    ErrorKind,
    LocationPhase,
    LocationState,
    LookupResult,
    Place,
    Placemark,
    RouteSummary,
    Viewport,
)
from nearby_places.domain.models.viewport import MIN_SPAN_DEGREES


def test_coordinate_creation() -> None:
    """Given coordinate data, when creating Coordinate, then all fields are set."""
    coordinate = Coordinate(latitude=48.137, longitude=11.575)

    assert coordinate.latitude == 48.137
    assert coordinate.longitude == 11.575
    assert coordinate.is_valid()
    assert coordinate.as_query_value() == "48.137,11.575"


@pytest.mark.parametrize(
    ("latitude", "longitude"),
    [(90.1, 0.0), (-90.1, 0.0), (0.0, 180.1), (0.0, -180.1)],
)
def test_coordinate_out_of_range_is_invalid(latitude: float, longitude: float) -> None:
    """Given an out-of-range axis, when validating, then the coordinate is invalid."""
    assert not Coordinate(latitude=latitude, longitude=longitude).is_valid()


def test_place_ids_are_generated_per_instance() -> None:
    """Given two identical places, when created, then each gets its own id."""
    coordinate = Coordinate(latitude=1.0, longitude=2.0)

    first = Place(name="Cafe", address="Main St", coordinate=coordinate)
    second = Place(name="Cafe", address="Main St", coordinate=coordinate)

    assert first.id
    assert first.id != second.id


def test_place_is_frozen() -> None:
    """Given a Place, when trying to modify, then raises AttributeError."""
    place = Place(name="Cafe", address="Main St", coordinate=Coordinate(1.0, 2.0))

    with pytest.raises(AttributeError):
        place.name = "Bar"  # type: ignore[misc]


class TestRouteSummary:
    """Tests for route summary conversion and formatting."""

    def test_converts_meters_and_seconds(self) -> None:
        """Given meters and seconds, when building a summary, then km and minutes are stored."""
        summary = RouteSummary.from_meters_and_seconds(12345, 905)

        assert summary.distance_km == pytest.approx(12.345)
        assert summary.eta_minutes == pytest.approx(15.0833, rel=1e-3)

    def test_formats_distance_with_one_decimal(self) -> None:
        """Given 12345 m, when formatting, then '12.3 km' is shown."""
        assert RouteSummary.from_meters_and_seconds(12345, 905).distance_text == "12.3 km"

    def test_formats_eta_rounded_to_minutes(self) -> None:
        """Given 905 s, when formatting, then '15 min' is shown."""
        assert RouteSummary.from_meters_and_seconds(12345, 905).eta_text == "15 min"

    def test_formats_short_routes(self) -> None:
        """Given a very short route, when formatting, then zeros are rendered."""
        summary = RouteSummary.from_meters_and_seconds(40, 20)

        assert summary.distance_text == "0.0 km"
        assert summary.eta_text == "0 min"


class TestViewport:
    """Tests for the route preview viewport."""

    def test_same_origin_and_destination_uses_minimum_span(self) -> None:
        """Given origin == destination == (0,0), when enclosing, then span is (0.02, 0.02)."""
        viewport = Viewport.enclosing(Coordinate(0.0, 0.0), Coordinate(0.0, 0.0))

        assert viewport.center == Coordinate(0.0, 0.0)
        assert viewport.latitude_span == 0.02
        assert viewport.longitude_span == 0.02

    def test_center_is_midpoint_and_span_is_twice_delta(self) -> None:
        """Given distant points, when enclosing, then span is twice the delta per axis."""
        viewport = Viewport.enclosing(Coordinate(48.0, 11.0), Coordinate(48.5, 12.0))

        assert viewport.center.latitude == pytest.approx(48.25)
        assert viewport.center.longitude == pytest.approx(11.5)
        assert viewport.latitude_span == pytest.approx(1.0)
        assert viewport.longitude_span == pytest.approx(2.0)

    def test_minimum_applies_per_axis(self) -> None:
        """Given a small delta on one axis only, when enclosing, then only that axis is floored."""
        viewport = Viewport.enclosing(Coordinate(10.0, 20.0), Coordinate(10.001, 21.0))

        assert viewport.latitude_span == MIN_SPAN_DEGREES
        assert viewport.longitude_span == pytest.approx(2.0)

    @pytest.mark.parametrize(
        ("origin", "destination"),
        [
            (Coordinate(0.0, 0.0), Coordinate(0.0, 0.0)),
            (Coordinate(-33.8688, 151.2093), Coordinate(-33.8689, 151.2092)),
            (Coordinate(51.5, -0.12), Coordinate(51.5, -0.12)),
            (Coordinate(40.0, -74.0), Coordinate(41.0, -73.0)),
        ],
    )
    def test_span_never_below_minimum(self, origin: Coordinate, destination: Coordinate) -> None:
        """Given any pair, when enclosing, then neither span is below the minimum."""
        viewport = Viewport.enclosing(origin, destination)

        assert viewport.latitude_span >= MIN_SPAN_DEGREES
        assert viewport.longitude_span >= MIN_SPAN_DEGREES


class TestPlacemark:
    """Tests for reverse geocoded display names."""

    def test_joins_non_empty_parts(self) -> None:
        """Given locality, region and country, when formatting, then they are comma joined."""
        placemark = Placemark(locality="Cupertino", region="CA", country="United States")

        assert placemark.display_name() == "Cupertino, CA, United States"

    def test_skips_empty_parts(self) -> None:
        """Given a missing region, when formatting, then it is skipped."""
        placemark = Placemark(locality="Munich", region="", country="Germany")

        assert placemark.display_name() == "Munich, Germany"

    def test_falls_back_to_current_location(self) -> None:
        """Given all parts empty, when formatting, then 'Current location' is shown."""
        assert Placemark().display_name() == "Current location"


class TestLookupResult:
    """Tests for the value-or-error result type."""

    def test_success_carries_value(self) -> None:
        """Given a value, when wrapping as success, then ok is True."""
        result = LookupResult.success([1, 2])

        assert result.ok
        assert result.value == [1, 2]
        assert result.error is None

    def test_failure_carries_error_details(self) -> None:
        """Given an error, when wrapping as failure, then details are kept."""
        result: LookupResult[list[int]] = LookupResult.failure(
            ErrorKind.NETWORK_FAILURE, "HTTP 503", status_code=503
        )

        assert not result.ok
        assert result.value is None
        assert result.error is not None
        assert result.error.kind == ErrorKind.NETWORK_FAILURE
        assert result.error.status_code == 503


def test_location_state_defaults() -> None:
    """Given a new location state, when inspecting, then it is unrequested and loading."""
    state = LocationState()

    assert state.phase == LocationPhase.UNREQUESTED
    assert state.coordinate is None
    assert state.display_name == "Fetching location..."
    assert state.is_loading


def test_upstream_error_to_details() -> None:
    """Given an UpstreamError, when converting, then kind, reason and status are carried over."""
    error = UpstreamError(ErrorKind.NETWORK_FAILURE, "HTTP 503 from Google Maps API", 503)

    details = error.to_details()

    assert details.kind == ErrorKind.NETWORK_FAILURE
    assert details.reason == "HTTP 503 from Google Maps API"
    assert details.status_code == 503
