"""Google Maps Platform adapters."""

from nearby_places.adapters.google_maps.directions_repository import GoogleDirectionsRepository
from nearby_places.adapters.google_maps.geocoding_repository import GoogleReverseGeocoder
from nearby_places.adapters.google_maps.http_client import GoogleMapsHttpClient
from nearby_places.adapters.google_maps.places_search_repository import (
    GooglePlacesSearchRepository,
)

__all__ = [
    "GoogleDirectionsRepository",
    "GoogleMapsHttpClient",
    "GooglePlacesSearchRepository",
    "GoogleReverseGeocoder",
]
