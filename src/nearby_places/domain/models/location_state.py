"""Location state domain models."""

from dataclasses import dataclass
from enum import Enum

from nearby_places.domain.models.coordinate import Coordinate

FETCHING_TEXT = "Fetching location..."
UPDATING_TEXT = "Updating location..."
ACCESS_DENIED_TEXT = "Location access denied"
FIX_FAILED_TEXT = "Unable to get location"
GEOCODING_FAILED_TEXT = "Location unavailable"
UNKNOWN_LOCATION_TEXT = "Unknown location"


class AuthorizationStatus(str, Enum):
    """Whether the location source may be used."""

    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED = "authorized"


class LocationPhase(str, Enum):
    """Phases of the location lookup state machine."""

    UNREQUESTED = "unrequested"
    AWAITING_PERMISSION = "awaiting_permission"
    DENIED = "denied"
    FETCHING = "fetching"
    RESOLVED = "resolved"
    FAILED = "failed"


class LocationEvent(str, Enum):
    """Inputs that move the location state machine."""

    PERMISSION_REQUESTED = "permission_requested"
    PERMISSION_DENIED = "permission_denied"
    PERMISSION_GRANTED = "permission_granted"
    FIX_RECEIVED = "fix_received"
    FIX_FAILED = "fix_failed"
    REFRESH_REQUESTED = "refresh_requested"


@dataclass(frozen=True)
class LocationState:
    """Current phase, coordinate (once fixed) and display name."""

    phase: LocationPhase = LocationPhase.UNREQUESTED
    coordinate: Coordinate | None = None
    display_name: str = FETCHING_TEXT

    @property
    def is_loading(self) -> bool:
        """True while a permission answer or a fix is outstanding."""
        return self.phase in (
            LocationPhase.UNREQUESTED,
            LocationPhase.AWAITING_PERMISSION,
            LocationPhase.FETCHING,
        )
