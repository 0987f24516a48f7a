"""Google reverse geocoding adapter."""

import logging
from typing import Any

from nearby_places.adapters.google_maps.constants import (
    COUNTRY_TYPE,
    GEOCODE_URL,
    LOCALITY_TYPES,
    REGION_TYPE,
    STATUS_OK,
    STATUS_ZERO_RESULTS,
)
from nearby_places.adapters.google_maps.http_client import GoogleMapsHttpClient
from nearby_places.domain.exceptions import UpstreamError
from nearby_places.domain.models.coordinate import Coordinate
from nearby_places.domain.models.error_details import ErrorKind
from nearby_places.domain.models.placemark import Placemark
from nearby_places.domain.ports.reverse_geocoder import ReverseGeocoder

logger = logging.getLogger(__name__)


class GoogleReverseGeocoder(ReverseGeocoder):
    """Adapter resolving coordinates to locality, region and country."""

    def __init__(self, http_client: GoogleMapsHttpClient) -> None:
        """Initialize with an HTTP client."""
        self._http_client = http_client

    async def reverse_geocode(self, coordinate: Coordinate) -> Placemark | None:
        """Resolve a coordinate to a placemark.

        Returns:
            Placemark from the first result, or None when nothing matches.

        Raises:
            UpstreamError: On network failure or a rejected request.
        """
        data = await self._http_client.get_json(
            GEOCODE_URL, {"latlng": coordinate.as_query_value()}
        )

        status = data.get("status")
        if status == STATUS_ZERO_RESULTS:
            return None
        if status != STATUS_OK:
            raise UpstreamError(
                ErrorKind.GEOCODING_FAILURE, f"Geocoding API status {status}"
            )

        results = data.get("results")
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            return None

        return self._build_placemark(results[0].get("address_components", []))

    @staticmethod
    def _build_placemark(components: Any) -> Placemark:
        """Pick locality, region and country out of address components."""
        if not isinstance(components, list):
            components = []

        locality = ""
        for locality_type in LOCALITY_TYPES:
            locality = GoogleReverseGeocoder._component(components, locality_type, "long_name")
            if locality:
                break

        return Placemark(
            locality=locality,
            region=GoogleReverseGeocoder._component(components, REGION_TYPE, "short_name"),
            country=GoogleReverseGeocoder._component(components, COUNTRY_TYPE, "long_name"),
        )

    @staticmethod
    def _component(components: list[Any], component_type: str, name_field: str) -> str:
        """Name of the first component with the given type, or ''."""
        for component in components:
            if not isinstance(component, dict):
                continue
            types = component.get("types", [])
            if isinstance(types, list) and component_type in types:
                name = component.get(name_field) or component.get("long_name", "")
                return name if isinstance(name, str) else ""
        return ""
