"""
Thumbnail widget for loading photo previews from URLs.
"""
import asyncio
from typing import Optional

import aiohttp
from PySide6.QtCore import Qt, Signal, QByteArray
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QLabel
from loguru import logger


class ThumbnailWidget(QLabel):
    """
    Label that downloads and displays an image asynchronously.

    Failures are reported through `load_failed` and an inline error text;
    they never propagate to the caller.
    """
    image_loaded = Signal()
    load_failed = Signal(str)  # error message

    def __init__(self, size: int = 100, parent=None):
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFixedSize(size, size)
        self._size = size
        self._loading = False
        self._url: Optional[str] = None

    @property
    def url(self) -> Optional[str]:
        return self._url

    @property
    def is_loading(self) -> bool:
        return self._loading

    def set_placeholder(self, text: str = "Loading..."):
        """Show placeholder text while loading."""
        self.setText(text)
        self.setStyleSheet("color: gray; font-style: italic;")

    def set_error(self, message: str = "No image"):
        """Show error message."""
        self.setText(message)
        self.setStyleSheet("color: red; font-style: italic;")

    def set_image_data(self, data: bytes) -> bool:
        """Decode image bytes and display them scaled to the widget size."""
        image = QImage()
        if not image.loadFromData(QByteArray(data)):
            return False
        pixmap = QPixmap.fromImage(image).scaled(
            self._size, self._size,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.setPixmap(pixmap)
        self.setStyleSheet("")
        return True

    async def load_from_url(self, url: str, timeout: float = 10, user_agent: Optional[str] = None) -> bool:
        """
        Load image from URL asynchronously.

        Args:
            url: Image URL
            timeout: Timeout in seconds
            user_agent: Optional User-Agent header for the request

        Returns:
            True if successful, False otherwise
        """
        if self._loading:
            logger.warning(f"Already loading an image, ignoring {url}")
            return False

        self._loading = True
        self._url = url
        self.set_placeholder()

        headers = {"User-Agent": user_agent} if user_agent else None
        try:
            async with aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=timeout), headers=headers
            ) as session:
                async with session.get(url) as response:
                    response.raise_for_status()
                    data = await response.read()

            if not self.set_image_data(data):
                raise ValueError("Invalid image data")

            self.image_loaded.emit()
            logger.debug(f"Loaded thumbnail from {url}")
            return True

        except asyncio.TimeoutError:
            logger.warning(f"Timeout loading thumbnail: {url}")
            self.set_error("Timeout")
            self.load_failed.emit("Timeout")
            return False
        except (aiohttp.ClientError, ValueError) as e:
            logger.error(f"Failed to load thumbnail from {url}: {e}")
            self.set_error()
            self.load_failed.emit(str(e))
            return False
        finally:
            self._loading = False
