"""Map viewport domain model."""

from dataclasses import dataclass

from nearby_places.domain.models.coordinate import Coordinate

# Two nearby points still get a sensibly zoomed-out region
MIN_SPAN_DEGREES = 0.02


@dataclass(frozen=True)
class Viewport:
    """A map region given by its center and per-axis span in degrees."""

    center: Coordinate
    latitude_span: float
    longitude_span: float

    @classmethod
    def enclosing(cls, origin: Coordinate, destination: Coordinate) -> "Viewport":
        """Region centered between both points with room for each of them.

        Each span is twice the absolute delta on that axis, never less than
        MIN_SPAN_DEGREES.
        """
        center = Coordinate(
            latitude=(origin.latitude + destination.latitude) / 2,
            longitude=(origin.longitude + destination.longitude) / 2,
        )
        latitude_delta = abs(origin.latitude - destination.latitude) * 2
        longitude_delta = abs(origin.longitude - destination.longitude) * 2
        return cls(
            center=center,
            latitude_span=max(latitude_delta, MIN_SPAN_DEGREES),
            longitude_span=max(longitude_delta, MIN_SPAN_DEGREES),
        )
