"""Ports (interfaces) for the ports-and-adapters architecture."""

from nearby_places.domain.ports.location_source import LocationSource
from nearby_places.domain.ports.navigation_launcher import NavigationLauncher
from nearby_places.domain.ports.place_search_repository import PlaceSearchRepository
from nearby_places.domain.ports.reverse_geocoder import ReverseGeocoder
from nearby_places.domain.ports.route_repository import RouteRepository

__all__ = [
    "LocationSource",
    "NavigationLauncher",
    "PlaceSearchRepository",
    "ReverseGeocoder",
    "RouteRepository",
]
