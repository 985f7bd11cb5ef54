"""
ResultsView - scrollable list of PhotoCards.
"""
import asyncio
from typing import List, Optional, Set

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QScrollArea, QVBoxLayout, QWidget
from loguru import logger

from photofeed.core.config import FeedSettings
from photofeed.feed.models import PhotoResult
from photofeed.ui.widgets.photo_card import PhotoCard


class ResultsView(QScrollArea):
    """
    Shows the current result list.

    Assigning `results` replaces every card and starts thumbnail downloads
    on the running event loop; downloads for replaced cards are cancelled.
    """

    def __init__(
        self,
        thumbnail_size: int = 100,
        feed_settings: Optional[FeedSettings] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._thumbnail_size = thumbnail_size
        # Thumbnail downloads share the feed request timeout and User-Agent
        self.feed_settings = feed_settings or FeedSettings()
        self._results: List[PhotoResult] = []
        self._cards: List[PhotoCard] = []
        self._loads: Set[asyncio.Task] = set()

        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFrameShape(QFrame.Shape.NoFrame)

        self.container = QWidget()
        self._layout = QVBoxLayout(self.container)
        self._layout.setContentsMargins(4, 4, 4, 4)
        self._layout.setSpacing(6)
        self._layout.addStretch()
        self.setWidget(self.container)

    @property
    def results(self) -> List[PhotoResult]:
        return list(self._results)

    @results.setter
    def results(self, value: Optional[List[PhotoResult]]) -> None:
        self.set_results(value or [])

    @property
    def cards(self) -> List[PhotoCard]:
        return list(self._cards)

    def set_results(self, results: List[PhotoResult]) -> None:
        self.clear()
        self._results = list(results)

        for photo in self._results:
            card = PhotoCard(photo, self._thumbnail_size, self.container)
            # Keep the trailing stretch last
            self._layout.insertWidget(self._layout.count() - 1, card)
            self._cards.append(card)
            if photo.url:
                self._schedule_load(card)

        logger.debug(f"ResultsView showing {len(self._cards)} photos")

    def clear(self) -> None:
        for task in list(self._loads):
            task.cancel()
        self._loads.clear()
        for card in self._cards:
            self._layout.removeWidget(card)
            card.deleteLater()
        self._cards.clear()
        self._results = []

    def _schedule_load(self, card: PhotoCard) -> None:
        settings = self.feed_settings
        task = asyncio.ensure_future(
            card.load_thumbnail(timeout=settings.timeout_seconds, user_agent=settings.user_agent)
        )
        self._loads.add(task)
        task.add_done_callback(self._loads.discard)
