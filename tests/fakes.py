"""Test doubles shared by adapter and workflow tests."""

import json
from typing import Any

from nearby_places.domain.exceptions import UpstreamError
from nearby_places.domain.models import (
    AuthorizationStatus,
    Coordinate,
    ErrorKind,
    NavigationHandoff,
    Place,
    Placemark,
    RouteSummary,
)


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(self, body: str, status: int = 200) -> None:
        self.status = status
        self._body = body

    async def text(self) -> str:
        return self._body


class _RequestContext:
    def __init__(self, outcome: FakeResponse | BaseException) -> None:
        self._outcome = outcome

    async def __aenter__(self) -> FakeResponse:
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        return self._outcome

    async def __aexit__(self, *_exc: object) -> None:
        return None


class FakeClientSession:
    """Records GET requests and replays canned responses or exceptions in order."""

    def __init__(self, *outcomes: FakeResponse | BaseException) -> None:
        self._outcomes = list(outcomes)
        self.requests: list[dict[str, Any]] = []

    def get(self, url: Any, **kwargs: Any) -> _RequestContext:
        self.requests.append({"url": str(url), **kwargs})
        return _RequestContext(self._outcomes.pop(0))


def json_response(data: Any, status: int = 200) -> FakeResponse:
    """Response whose body is the JSON encoding of data."""
    return FakeResponse(json.dumps(data), status=status)


def make_place(name: str = "Blue Bottle Coffee", lat: float = 37.78, lng: float = -122.41) -> Place:
    """Place with a plausible address."""
    return Place(name=name, address="1 Market St", coordinate=Coordinate(lat, lng))


class FakeLocationSource:
    """Location source with scripted authorization and fixes."""

    def __init__(
        self,
        status: AuthorizationStatus = AuthorizationStatus.AUTHORIZED,
        fixes: list[Coordinate | BaseException] | None = None,
        answer: AuthorizationStatus | None = None,
    ) -> None:
        self.status = status
        self.fixes = list(fixes) if fixes is not None else [Coordinate(37.7749, -122.4194)]
        self.answer = answer
        self.authorization_requests = 0
        self.fix_requests = 0
        self.updating = False

    def authorization_status(self) -> AuthorizationStatus:
        return self.status

    async def request_authorization(self) -> None:
        self.authorization_requests += 1
        if self.answer is not None:
            self.status = self.answer

    async def request_fix(self) -> Coordinate:
        self.fix_requests += 1
        self.updating = True
        outcome = self.fixes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def stop_updates(self) -> None:
        self.updating = False


class FakeReverseGeocoder:
    """Reverse geocoder returning a scripted placemark or raising."""

    def __init__(self, outcome: Placemark | None | BaseException = None) -> None:
        self.outcome = outcome
        self.calls: list[Coordinate] = []

    async def reverse_geocode(self, coordinate: Coordinate) -> Placemark | None:
        self.calls.append(coordinate)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


class FakePlaceSearchRepository:
    """Search repository returning scripted places and recording calls."""

    def __init__(self, outcome: list[Place] | BaseException | None = None) -> None:
        self.outcome = outcome if outcome is not None else []
        self.calls: list[tuple[str, Coordinate]] = []

    async def search_places(self, query: str, coordinate: Coordinate) -> list[Place]:
        self.calls.append((query, coordinate))
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return list(self.outcome)


class FakeRouteRepository:
    """Route repository returning a scripted summary and recording calls."""

    def __init__(
        self, outcome: RouteSummary | None | BaseException = RouteSummary(12.345, 15.0833)
    ) -> None:
        self.outcome = outcome
        self.calls: list[tuple[Coordinate, Coordinate]] = []

    async def find_route(self, origin: Coordinate, destination: Coordinate) -> RouteSummary | None:
        self.calls.append((origin, destination))
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


class FakeNavigationLauncher:
    """Navigation launcher recording handoffs."""

    def __init__(self) -> None:
        self.handoffs: list[NavigationHandoff] = []

    def open_navigation(self, handoff: NavigationHandoff) -> None:
        self.handoffs.append(handoff)


def network_error(reason: str = "Connection refused") -> UpstreamError:
    """UpstreamError for a failed connection."""
    return UpstreamError(ErrorKind.NETWORK_FAILURE, reason)


class UndecodableResponse(FakeResponse):
    """Response whose body is not valid UTF-8."""

    async def text(self) -> str:
        raw = b'{"status": "OK", "results": [{"name": "\xff"}]}'
        return raw.decode("utf-8")
