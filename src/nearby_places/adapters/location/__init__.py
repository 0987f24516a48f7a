"""Location source adapters."""

from nearby_places.adapters.location.configured_location_source import ConfiguredLocationSource

__all__ = ["ConfiguredLocationSource"]
