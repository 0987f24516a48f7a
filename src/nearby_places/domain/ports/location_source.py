"""Location source port."""

from typing import Protocol

from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.location_state import AuthorizationStatus


class LocationSource(Protocol):
    """Port for the platform service that knows where the device is."""

    def authorization_status(self) -> AuthorizationStatus:
        """Current authorization to use the source."""
        ...

    async def request_authorization(self) -> None:
        """Ask for permission.

        The answer is not returned; callers read authorization_status() once
        this completes.
        """
        ...

    async def request_fix(self) -> Coordinate:
        """Produce a single coordinate fix.

        Raises:
            UpstreamError: If no fix could be obtained.
        """
        ...

    def stop_updates(self) -> None:
        """Stop delivering fixes until the next request_fix()."""
        ...
