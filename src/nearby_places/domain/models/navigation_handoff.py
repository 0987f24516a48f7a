"""Navigation handoff domain models."""

from dataclasses import dataclass

from nearby_places.domain.models.coordinate import Coordinate

DRIVING_MODE = "driving"


@dataclass(frozen=True)
class Waypoint:
    """An endpoint handed to an external maps application."""

    coordinate: Coordinate
    label: str | None = None
    place_id: str | None = None


@dataclass(frozen=True)
class NavigationHandoff:
    """Origin and destination for turn-by-turn navigation elsewhere."""

    origin: Waypoint
    destination: Waypoint
    travel_mode: str = DRIVING_MODE
