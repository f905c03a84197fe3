"""Observable state container shared by the catalog engine and the ledger"""

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")

Listener = Callable[[S], None]


class Store(Generic[S, A]):
    """
    Owns one state snapshot and replaces it through a pure reducer.

    Listeners are called with the new snapshot after every dispatch that
    changed the state. A reducer signals "no change" by returning the same
    object it was given.
    """

    def __init__(self, initial_state: S, reducer: Callable[[S, A], S]):
        self._state = initial_state
        self._reducer = reducer
        self._listeners: list[Listener] = []

    @property
    def state(self) -> S:
        return self._state

    def dispatch(self, action: A) -> S:
        """Apply an action and notify listeners if the state changed"""
        new_state = self._reducer(self._state, action)
        if new_state is self._state:
            logger.debug(f"{type(action).__name__} left state unchanged")
            return self._state

        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
