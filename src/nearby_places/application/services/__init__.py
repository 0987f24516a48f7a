"""Application services (use cases)."""

from nearby_places.application.services.location_service import LocationService
from nearby_places.application.services.place_search_service import PlaceSearchService
from nearby_places.application.services.route_service import RouteService

__all__ = ["LocationService", "PlaceSearchService", "RouteService"]
