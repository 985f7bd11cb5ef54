"""
SearchViewModel - Reactive state for the photo search window.

The search box writes `search_term`; after the debounce interval the
settled term is trimmed, filtered and handed to the FeedClient. Results,
the busy flag and the last error are exposed as bindable properties.
"""
import asyncio
from typing import List, Optional

from PySide6.QtCore import Signal
from loguru import logger

from photofeed.core.config import SearchSettings
from photofeed.core.exceptions import FeedError
from photofeed.feed.client import FeedClient
from photofeed.feed.models import PhotoResult
from photofeed.ui.mvvm.bindable import BindableProperty
from photofeed.ui.mvvm.debounce import Debouncer
from photofeed.ui.mvvm.viewmodel import BaseViewModel
from photofeed.ui.viewmodels.search_state import SearchState, SearchStateMachine

_UNSET = object()


class SearchTermGate:
    """
    Decides whether a settled term should start a search.

    Terms are trimmed; empty terms and a term equal to the previous settled
    term are rejected. Only the immediately preceding term is remembered,
    and empty terms count as "previous" too.
    """

    def __init__(self):
        self._previous = _UNSET

    def accept(self, raw: Optional[str]) -> Optional[str]:
        """Return the trimmed term if it should be searched, else None."""
        term = (raw or "").strip()
        if term == self._previous:
            return None
        self._previous = term
        return term or None

    def reset(self) -> None:
        self._previous = _UNSET


class SearchViewModel(BaseViewModel):
    """
    ViewModel for the search window.

    State flow per search: idle -> fetching -> (succeeded | failed) -> idle.
    Each search gets a sequence number; only the latest one may publish
    results, so a slow superseded request never overwrites a newer one.
    """

    # --- Bindable properties ---
    search_term = BindableProperty(default="", coerce=lambda v: v or "")
    results = BindableProperty(default=None)
    busy = BindableProperty(default=False)
    error_message = BindableProperty(default="")
    state = BindableProperty(default=SearchState.IDLE)

    # --- Explicit Signals (Required for BindableProperty in PySide6) ---
    search_termChanged = Signal(str)
    resultsChanged = Signal(object)
    busyChanged = Signal(bool)
    error_messageChanged = Signal(str)
    stateChanged = Signal(object)

    # --- Search lifecycle notifications ---
    search_accepted = Signal(str)          # term
    search_completed = Signal(str, int)    # term, result count
    search_failed = Signal(str, str)       # term, message

    def __init__(self, client: FeedClient, settings: SearchSettings = None):
        super().__init__()
        self._client = client
        self._settings = settings or SearchSettings()

        self._gate = SearchTermGate()
        self._machine = SearchStateMachine()
        self._machine.add_listener(self._on_state_changed)

        self._sequence = 0
        self._last_term: Optional[str] = None
        self._current_task: Optional[asyncio.Task] = None

        self.results = []

        self._debouncer = Debouncer(self._settings.debounce_ms, self)
        self._debouncer.triggered.connect(self.submit_term)
        self.search_termChanged.connect(self._debouncer.push)

        logger.info(f"SearchViewModel initialized (debounce={self._settings.debounce_ms}ms)")

    # --- Read-only state ---

    @property
    def last_term(self) -> Optional[str]:
        """The most recently accepted term."""
        return self._last_term

    @property
    def current_task(self) -> Optional[asyncio.Task]:
        return self._current_task

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    def apply_settings(self, settings: SearchSettings) -> None:
        """Adopt new search settings (e.g. after a config change)."""
        self._settings = settings
        self._debouncer.interval = settings.debounce_ms

    # --- Commands ---

    def submit_term(self, raw: Optional[str]) -> Optional[str]:
        """
        Handle a settled term from the debouncer.

        Returns:
            The accepted (trimmed) term, or None if it was filtered out.
        """
        term = self._gate.accept(raw)
        if term is None:
            logger.debug(f"Settled term {raw!r} ignored")
            return None
        self._start_search(term)
        return term

    def refresh(self) -> bool:
        """Re-run the last accepted term. Returns False if there is none."""
        if not self._last_term:
            return False
        self._start_search(self._last_term)
        return True

    async def execute_search(self, term: str) -> Optional[List[PhotoResult]]:
        """
        Run one search for an already-filtered term and publish its outcome.

        Returns:
            The published results, or None if the search failed or was
            superseded.
        """
        ticket = self._begin(term)
        return await self._search(term, ticket)

    async def wait_until_idle(self) -> None:
        """Wait for the current search (and any that replace it) to settle."""
        task = self._current_task
        while task is not None and not task.done():
            await asyncio.wait({task})
            task = self._current_task

    def shutdown(self) -> None:
        """Stop the debounce timer and cancel outstanding searches."""
        self._debouncer.cancel()
        self.cancel_tasks()
        # Invalidate every outstanding ticket
        self._sequence += 1
        if self._machine.is_fetching:
            self._machine.transition_to(SearchState.IDLE)

    # --- Internals ---

    def _start_search(self, term: str) -> None:
        superseded = self._current_task
        if superseded is not None and not superseded.done() and self._settings.cancel_superseded:
            logger.debug(f"Cancelling superseded search for '{self._last_term}'")
            superseded.cancel()

        ticket = self._begin(term)
        self._current_task = self.run_async(self._search(term, ticket))

    def _begin(self, term: str) -> int:
        self._sequence += 1
        self._last_term = term
        self.error_message = ""
        self._machine.transition_to(SearchState.FETCHING)
        self.search_accepted.emit(term)
        return self._sequence

    def _is_current(self, ticket: int) -> bool:
        return ticket == self._sequence

    async def _search(self, term: str, ticket: int) -> Optional[List[PhotoResult]]:
        try:
            results = await self._client.fetch(term)
        except asyncio.CancelledError:
            if self._is_current(ticket) and self._machine.is_fetching:
                self._machine.transition_to(SearchState.IDLE)
            raise
        except Exception as e:
            if not self._is_current(ticket):
                logger.debug(f"Ignoring failure of superseded search '{term}': {e}")
                return None
            if isinstance(e, FeedError):
                logger.warning(f"Search '{term}' failed: {e}")
            else:
                logger.exception(f"Search '{term}' failed unexpectedly")
            self._fail(term, str(e) or type(e).__name__)
            return None

        if not self._is_current(ticket):
            logger.debug(f"Discarding {len(results or [])} results of superseded search '{term}'")
            return None

        self.results = list(results or [])
        self._machine.transition_to(SearchState.SUCCEEDED)
        self._machine.transition_to(SearchState.IDLE)
        self.search_completed.emit(term, len(self.results))
        return self.results

    def _fail(self, term: str, message: str) -> None:
        self.error_message = message
        self._machine.transition_to(SearchState.FAILED)
        self._machine.transition_to(SearchState.IDLE)
        self.search_failed.emit(term, message)

    def _on_state_changed(self, old: SearchState, new: SearchState) -> None:
        self.state = new
        self.busy = new is SearchState.FETCHING
