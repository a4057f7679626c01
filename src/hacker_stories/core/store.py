"""
Single-writer store holding the current ``StoriesState``.

Every state change goes through ``dispatch``, which runs the reducer and
notifies subscribers with the new state.
"""

from typing import Callable, List, Optional

from loguru import logger

from ..models import StoriesState
from .reducer import stories_reducer

Listener = Callable[[StoriesState], None]


class StoriesStore:
    """
    Owns the stories state and applies actions to it.

    Usage:
        store = StoriesStore()
        unsubscribe = store.subscribe(render)
        store.dispatch(FetchInit())
    """

    def __init__(self, initial_state: Optional[StoriesState] = None):
        self._state = initial_state if initial_state is not None else StoriesState.initial()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> StoriesState:
        return self._state

    def dispatch(self, action) -> StoriesState:
        """
        Apply ``action`` and notify listeners.

        Exceptions raised by a listener are logged and do not stop the
        remaining listeners.

        Args:
            action: Stories action to reduce

        Returns:
            StoriesState: The state after the action

        Raises:
            UnknownActionError: If the reducer does not handle ``action``
        """
        previous = self._state
        self._state = stories_reducer(previous, action)

        logger.debug(
            f"{action.type.value}: {previous.status.value} -> {self._state.status.value} "
            f"({len(self._state.items)} stories)"
        )

        if self._state is not previous:
            for listener in list(self._listeners):
                try:
                    listener(self._state)
                except Exception:
                    # A failing listener does not stop the others
                    logger.exception(f"Listener {listener!r} failed on {action.type.value}")
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register ``listener`` for state changes.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
