"""Adapters layer - external system integrations."""

from nearby_places.adapters.config import AppConfig
from nearby_places.adapters.google_maps import (
    GoogleDirectionsRepository,
    GoogleMapsHttpClient,
    GooglePlacesSearchRepository,
    GoogleReverseGeocoder,
)
from nearby_places.adapters.location import ConfiguredLocationSource
from nearby_places.adapters.navigation import BrowserNavigationLauncher

__all__ = [
    "AppConfig",
    "BrowserNavigationLauncher",
    "ConfiguredLocationSource",
    "GoogleDirectionsRepository",
    "GoogleMapsHttpClient",
    "GooglePlacesSearchRepository",
    "GoogleReverseGeocoder",
]
