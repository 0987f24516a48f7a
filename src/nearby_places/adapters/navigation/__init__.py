"""Navigation handoff adapters."""

from nearby_places.adapters.navigation.browser_navigation_launcher import (
    BrowserNavigationLauncher,
    build_handoff_url,
)

__all__ = ["BrowserNavigationLauncher", "build_handoff_url"]
