"""Navigation handoff through the system browser / maps application."""

import logging
import webbrowser
from collections.abc import Callable
from urllib.parse import urlencode

from nearby_places.adapters.google_maps.constants import MAPS_DIRECTIONS_HANDOFF_URL
from nearby_places.domain.models.navigation_handoff import NavigationHandoff
from nearby_places.domain.ports.navigation_launcher import NavigationLauncher

logger = logging.getLogger(__name__)


def build_handoff_url(handoff: NavigationHandoff) -> str:
    """Build a Google Maps directions URL with the travel mode preselected.

    A labelled destination with a provider place id is sent by name and place
    id, so the maps app shows the label. Otherwise the coordinate is sent.
    """
    destination = handoff.destination
    params = {
        "api": "1",
        "origin": handoff.origin.coordinate.as_query_value(),
        "destination": destination.coordinate.as_query_value(),
        "travelmode": handoff.travel_mode,
        "dir_action": "navigate",
    }
    if destination.label and destination.place_id:
        params["destination"] = destination.label
        params["destination_place_id"] = destination.place_id
    return f"{MAPS_DIRECTIONS_HANDOFF_URL}?{urlencode(params)}"


class BrowserNavigationLauncher(NavigationLauncher):
    """Opens Google Maps directions in the default browser or maps handler."""

    def __init__(self, opener: Callable[[str], bool] = webbrowser.open) -> None:
        """Initialize with the function that opens URLs."""
        self._opener = opener

    def open_navigation(self, handoff: NavigationHandoff) -> None:
        """Open directions to the handoff destination. Fire and forget."""
        url = build_handoff_url(handoff)
        label = handoff.destination.label or "destination"
        logger.info(f"Handing off navigation to {label}: {url}")
        if not self._opener(url):
            logger.warning(f"No application accepted the navigation URL for {label}")
