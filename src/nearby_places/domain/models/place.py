"""Place domain model."""

import uuid
from dataclasses import dataclass, field

from nearby_places.domain.models.coordinate import Coordinate

NO_ADDRESS = "No address"


def _new_place_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Place:
    """A single search result.

    The id is generated locally for every result and is not stable across
    searches. provider_place_id is the search provider's own identifier, if any.
    """

    name: str
    address: str
    coordinate: Coordinate
    provider_place_id: str | None = None
    id: str = field(default_factory=_new_place_id)
