"""Location lookup as an explicit state machine.

authorization -> fix -> reverse geocoding, with a single current
LocationState. Failures only change the phase and the display name; nothing
is raised to dependents.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING

from nearby_places.domain.exceptions import LocationTransitionError, UpstreamError
from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.location_state import (
    ACCESS_DENIED_TEXT,
    FIX_FAILED_TEXT,
    GEOCODING_FAILED_TEXT,
    UNKNOWN_LOCATION_TEXT,
    UPDATING_TEXT,
    AuthorizationStatus,
    LocationEvent,
    LocationPhase,
    LocationState,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearby_places.domain.ports import LocationSource, ReverseGeocoder

LocationListener = Callable[[LocationState], None]

TRANSITIONS: dict[tuple[LocationPhase, LocationEvent], LocationPhase] = {
    (LocationPhase.UNREQUESTED, LocationEvent.PERMISSION_REQUESTED): (
        LocationPhase.AWAITING_PERMISSION
    ),
    (LocationPhase.UNREQUESTED, LocationEvent.PERMISSION_DENIED): LocationPhase.DENIED,
    (LocationPhase.AWAITING_PERMISSION, LocationEvent.PERMISSION_DENIED): LocationPhase.DENIED,
    (LocationPhase.UNREQUESTED, LocationEvent.PERMISSION_GRANTED): LocationPhase.FETCHING,
    (LocationPhase.AWAITING_PERMISSION, LocationEvent.PERMISSION_GRANTED): LocationPhase.FETCHING,
    (LocationPhase.FETCHING, LocationEvent.FIX_RECEIVED): LocationPhase.RESOLVED,
    (LocationPhase.FETCHING, LocationEvent.FIX_FAILED): LocationPhase.FAILED,
    (LocationPhase.RESOLVED, LocationEvent.REFRESH_REQUESTED): LocationPhase.FETCHING,
    (LocationPhase.FAILED, LocationEvent.REFRESH_REQUESTED): LocationPhase.FETCHING,
    (LocationPhase.DENIED, LocationEvent.REFRESH_REQUESTED): LocationPhase.UNREQUESTED,
}

_DENIED_STATUSES = (AuthorizationStatus.DENIED, AuthorizationStatus.RESTRICTED)


class LocationService:
    """Obtains the device coordinate and a human-readable name for it.

    Only one fix is taken per request: updates stop as soon as a coordinate
    arrives and resume only through refresh().
    """

    def __init__(
        self,
        source: "LocationSource",
        geocoder: "ReverseGeocoder",
        on_change: LocationListener | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize the service.

        Args:
            source: Platform location source.
            geocoder: Reverse geocoder for display names.
            on_change: Called with every new LocationState.
            timeout_seconds: Bound for each fix and each geocoding request.
        """
        self._source = source
        self._geocoder = geocoder
        self._on_change = on_change
        self._timeout_seconds = timeout_seconds
        self._state = LocationState()

    @property
    def state(self) -> LocationState:
        """Current location state."""
        return self._state

    def transition(
        self,
        event: LocationEvent,
        coordinate: Coordinate | None = None,
        display_name: str | None = None,
    ) -> LocationState:
        """Apply an event using the transition table.

        Raises:
            LocationTransitionError: If the current phase does not accept the event.
        """
        next_phase = TRANSITIONS.get((self._state.phase, event))
        if next_phase is None:
            raise LocationTransitionError(
                f"Event {event.value} is not valid in phase {self._state.phase.value}"
            )

        logger.debug(f"Location {self._state.phase.value} --{event.value}--> {next_phase.value}")
        self._publish(
            replace(
                self._state,
                phase=next_phase,
                coordinate=coordinate if coordinate is not None else self._state.coordinate,
                display_name=display_name if display_name is not None else self._state.display_name,
            )
        )
        return self._state

    async def start(self) -> LocationState:
        """Check authorization and, once authorized, take a single fix."""
        if self._state.phase != LocationPhase.UNREQUESTED:
            logger.debug(f"Location lookup already started ({self._state.phase.value})")
            return self._state

        if self._source.authorization_status() == AuthorizationStatus.NOT_DETERMINED:
            self.transition(LocationEvent.PERMISSION_REQUESTED)
            await self._source.request_authorization()

        await self._on_authorization_changed()
        return self._state

    async def refresh(self) -> LocationState:
        """Show the updating placeholder and request a new fix."""
        phase = self._state.phase
        if phase in (LocationPhase.RESOLVED, LocationPhase.FAILED):
            self.transition(LocationEvent.REFRESH_REQUESTED, display_name=UPDATING_TEXT)
            await self._fetch_fix()
        elif phase == LocationPhase.DENIED:
            self.transition(LocationEvent.REFRESH_REQUESTED, display_name=UPDATING_TEXT)
            await self.start()
        elif phase == LocationPhase.UNREQUESTED:
            await self.start()
        else:
            logger.debug(f"Refresh ignored, lookup in progress ({phase.value})")
        return self._state

    async def _on_authorization_changed(self) -> None:
        """React to the current authorization status."""
        status = self._source.authorization_status()

        if status in _DENIED_STATUSES:
            logger.info(f"Location access {status.value}")
            self.transition(LocationEvent.PERMISSION_DENIED, display_name=ACCESS_DENIED_TEXT)
        elif status == AuthorizationStatus.AUTHORIZED:
            self.transition(LocationEvent.PERMISSION_GRANTED)
            await self._fetch_fix()
        else:
            logger.warning("Location permission is still undetermined")

    async def _fetch_fix(self) -> None:
        """Take a single fix, then resolve its display name."""
        try:
            coordinate = await asyncio.wait_for(
                self._source.request_fix(), timeout=self._timeout_seconds
            )
        except UpstreamError as e:
            logger.warning(f"Location error: {e.reason}")
            self._source.stop_updates()
            self.transition(LocationEvent.FIX_FAILED, display_name=FIX_FAILED_TEXT)
            return
        except asyncio.TimeoutError:
            logger.warning(f"No location fix within {self._timeout_seconds}s")
            self._source.stop_updates()
            self.transition(LocationEvent.FIX_FAILED, display_name=FIX_FAILED_TEXT)
            return

        self._source.stop_updates()
        self.transition(LocationEvent.FIX_RECEIVED, coordinate=coordinate)
        await self._reverse_geocode(coordinate)

    async def _reverse_geocode(self, coordinate: Coordinate) -> None:
        """Resolve the display name; failures only change the status text."""
        try:
            placemark = await asyncio.wait_for(
                self._geocoder.reverse_geocode(coordinate), timeout=self._timeout_seconds
            )
        except UpstreamError as e:
            logger.warning(f"Geocoding error: {e.reason}")
            self._set_display_name(GEOCODING_FAILED_TEXT)
            return
        except asyncio.TimeoutError:
            logger.warning(f"Geocoding timed out after {self._timeout_seconds}s")
            self._set_display_name(GEOCODING_FAILED_TEXT)
            return

        if placemark is None:
            self._set_display_name(UNKNOWN_LOCATION_TEXT)
        else:
            self._set_display_name(placemark.display_name())

    def _set_display_name(self, display_name: str) -> None:
        self._publish(replace(self._state, display_name=display_name))

    def _publish(self, state: LocationState) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(state)
