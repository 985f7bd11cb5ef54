"""
Search State Machine.

Tracks the lifecycle of the current search: idle -> fetching ->
(succeeded | failed) -> idle. A new search may start while another is
fetching (fetching -> fetching); the older one is superseded. A cancelled
search returns straight to idle.
"""
from enum import Enum
from typing import Callable, List

from loguru import logger

from photofeed.core.exceptions import SearchStateError


class SearchState(Enum):
    """Search lifecycle states."""
    IDLE = "idle"
    FETCHING = "fetching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SearchStateMachine:
    """
    Validates search state transitions and notifies listeners.

    Usage:
        machine = SearchStateMachine()
        machine.add_listener(lambda old, new: print(old, new))
        machine.transition_to(SearchState.FETCHING)
    """

    VALID_TRANSITIONS = {
        SearchState.IDLE: [SearchState.FETCHING],
        SearchState.FETCHING: [
            SearchState.FETCHING,
            SearchState.SUCCEEDED,
            SearchState.FAILED,
            SearchState.IDLE,
        ],
        SearchState.SUCCEEDED: [SearchState.IDLE],
        SearchState.FAILED: [SearchState.IDLE],
    }

    def __init__(self):
        self._state = SearchState.IDLE
        self._listeners: List[Callable[[SearchState, SearchState], None]] = []

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def is_fetching(self) -> bool:
        return self._state is SearchState.FETCHING

    def can_transition(self, target: SearchState) -> bool:
        return target in self.VALID_TRANSITIONS.get(self._state, [])

    def transition_to(self, target: SearchState) -> None:
        """
        Move to target state.

        Raises:
            SearchStateError: If the transition is not allowed.
        """
        if not self.can_transition(target):
            raise SearchStateError(
                f"Invalid transition: {self._state.value} -> {target.value}"
            )

        old_state = self._state
        self._state = target
        logger.debug(f"Search state: {old_state.value} -> {target.value}")

        for listener in list(self._listeners):
            listener(old_state, target)

    def add_listener(self, listener: Callable[[SearchState, SearchState], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[SearchState, SearchState], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
