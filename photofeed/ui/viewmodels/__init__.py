from photofeed.ui.viewmodels.search_state import SearchState, SearchStateMachine
from photofeed.ui.viewmodels.search_viewmodel import SearchTermGate, SearchViewModel

__all__ = [
    "SearchState",
    "SearchStateMachine",
    "SearchTermGate",
    "SearchViewModel",
]
