"""Route summary domain model."""

from dataclasses import dataclass

PLACEHOLDER_TEXT = "--"


@dataclass(frozen=True)
class RouteSummary:
    """Distance and expected travel time between two coordinates."""

    distance_km: float
    eta_minutes: float

    @classmethod
    def from_meters_and_seconds(
        cls, distance_meters: float, duration_seconds: float
    ) -> "RouteSummary":
        """Build a summary from raw provider units."""
        return cls(distance_km=distance_meters / 1000, eta_minutes=duration_seconds / 60)

    @property
    def distance_text(self) -> str:
        """Distance with one decimal place, e.g. '12.3 km'."""
        return f"{self.distance_km:.1f} km"

    @property
    def eta_text(self) -> str:
        """Travel time rounded to whole minutes, e.g. '15 min'."""
        return f"{self.eta_minutes:.0f} min"
