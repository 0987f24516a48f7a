"""Location source backed by a configured device coordinate."""

import logging
from collections.abc import Awaitable, Callable

from nearby_places.domain.exceptions import UpstreamError
from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.error_details import ErrorKind
from nearby_places.domain.models.location_state import AuthorizationStatus
from nearby_places.domain.ports.location_source import LocationSource

logger = logging.getLogger(__name__)

PermissionPrompt = Callable[[], Awaitable[bool]]

_PERMISSION_STATUS = {
    "granted": AuthorizationStatus.AUTHORIZED,
    "denied": AuthorizationStatus.DENIED,
    "prompt": AuthorizationStatus.NOT_DETERMINED,
}


class ConfiguredLocationSource(LocationSource):
    """Serves the coordinate from configuration as the device's position.

    Permission follows the configured policy; with 'prompt' the user is asked
    once through the injected prompt. Without a prompt the source is treated
    as restricted.
    """

    def __init__(
        self,
        coordinate: Coordinate | None,
        permission: str = "prompt",
        prompt: PermissionPrompt | None = None,
    ) -> None:
        """Initialize the source.

        Args:
            coordinate: Device coordinate, or None if unknown.
            permission: 'granted', 'denied' or 'prompt'.
            prompt: Coroutine function asking the user for permission.
        """
        if permission not in _PERMISSION_STATUS:
            raise ValueError(f"Unknown location permission: {permission}")
        self._coordinate = coordinate
        self._status = _PERMISSION_STATUS[permission]
        self._prompt = prompt
        self._updating = False

    @property
    def is_updating(self) -> bool:
        """True between a fix request and stop_updates()."""
        return self._updating

    def authorization_status(self) -> AuthorizationStatus:
        """Current authorization to use the source."""
        return self._status

    async def request_authorization(self) -> None:
        """Ask the user once; the answer is reflected by authorization_status()."""
        if self._status != AuthorizationStatus.NOT_DETERMINED:
            return
        if self._prompt is None:
            logger.info("No permission prompt available, location access is restricted")
            self._status = AuthorizationStatus.RESTRICTED
            return

        granted = await self._prompt()
        self._status = AuthorizationStatus.AUTHORIZED if granted else AuthorizationStatus.DENIED
        logger.info(f"Location permission answered: {self._status.value}")

    async def request_fix(self) -> Coordinate:
        """Deliver the configured coordinate as a single fix."""
        if self._status != AuthorizationStatus.AUTHORIZED:
            raise UpstreamError(ErrorKind.PERMISSION_DENIED, "Location access is not authorized")
        self._updating = True
        if self._coordinate is None or not self._coordinate.is_valid():
            raise UpstreamError(ErrorKind.LOCATION_UNAVAILABLE, "No device coordinate configured")
        return self._coordinate

    def stop_updates(self) -> None:
        """Stop delivering fixes."""
        self._updating = False
