"""Exceptions raised by adapters when an upstream lookup fails."""

from nearby_places.domain.models.error_details import ErrorDetails, ErrorKind


class UpstreamError(Exception):
    """A request to an external service failed or returned unusable data."""

    def __init__(self, kind: ErrorKind, reason: str, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.kind = kind
        self.reason = reason
        self.status_code = status_code

    def to_details(self) -> ErrorDetails:
        """Convert to the error details carried by lookup results."""
        return ErrorDetails(kind=self.kind, reason=self.reason, status_code=self.status_code)


class LocationTransitionError(Exception):
    """The location state machine received an event its current phase does not accept."""
