"""State container with dispatch and change subscriptions."""

import logging
from collections.abc import Callable

from nearby_places.application.state.actions import Action
from nearby_places.application.state.app_state import AppState
from nearby_places.application.state.reducer import reduce

logger = logging.getLogger(__name__)

StateListener = Callable[[AppState, Action], None]


class Store:
    """Owns the application state.

    State only changes through dispatch(), which runs on the event loop thread,
    so listeners always observe a consistent snapshot.
    """

    def __init__(self, initial_state: AppState | None = None) -> None:
        """Initialize with an optional starting state."""
        self._state = initial_state or AppState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> AppState:
        """Current state snapshot."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> AppState:
        """Apply an action and notify listeners of the new state."""
        self._state = reduce(self._state, action)
        logger.debug(f"Dispatched {type(action).__name__}")
        for listener in list(self._listeners):
            listener(self._state, action)
        return self._state
