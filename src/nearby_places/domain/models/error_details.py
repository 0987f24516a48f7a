"""Error details domain model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Categories of failure a lookup can end with."""

    PERMISSION_DENIED = "permission_denied"
    LOCATION_UNAVAILABLE = "location_unavailable"
    GEOCODING_FAILURE = "geocoding_failure"
    NETWORK_FAILURE = "network_failure"
    MALFORMED_RESPONSE = "malformed_response"
    NO_ROUTE_FOUND = "no_route_found"
    UPSTREAM_REJECTED = "upstream_rejected"
    TIMEOUT = "timeout"


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    reason: str
    status_code: int | None = None
