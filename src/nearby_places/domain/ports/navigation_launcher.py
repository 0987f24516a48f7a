"""Navigation launcher port."""

from typing import Protocol

from nearby_places.domain.models.navigation_handoff import NavigationHandoff


class NavigationLauncher(Protocol):
    """Port for handing navigation off to an external maps application."""

    def open_navigation(self, handoff: NavigationHandoff) -> None:
        """Open the external application. Fire and forget."""
        ...
