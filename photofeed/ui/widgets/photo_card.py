from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout

from photofeed.feed.models import PhotoResult
from photofeed.ui.widgets.thumbnail import ThumbnailWidget


class PhotoCard(QFrame):
    """One search result: thumbnail on the left, title and description on the right."""

    def __init__(self, photo: PhotoResult, thumbnail_size: int = 100, parent=None):
        super().__init__(parent)
        self._photo = photo
        self.setFrameShape(QFrame.Shape.StyledPanel)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(10)

        self.thumbnail = ThumbnailWidget(thumbnail_size)
        layout.addWidget(self.thumbnail, 0, Qt.AlignmentFlag.AlignTop)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(4)

        self.title_label = QLabel(photo.title)
        self.title_label.setStyleSheet("font-weight: bold;")
        self.title_label.setWordWrap(True)
        text_layout.addWidget(self.title_label)

        self.description_label = QLabel(photo.description)
        self.description_label.setWordWrap(True)
        # Descriptions are already tag-stripped; never interpret them as rich text
        self.description_label.setTextFormat(Qt.TextFormat.PlainText)
        text_layout.addWidget(self.description_label)
        text_layout.addStretch()

        layout.addLayout(text_layout, 1)

    @property
    def photo(self) -> PhotoResult:
        return self._photo

    async def load_thumbnail(self, timeout: float = 10, user_agent: Optional[str] = None) -> bool:
        return await self.thumbnail.load_from_url(self._photo.url, timeout=timeout, user_agent=user_agent)
