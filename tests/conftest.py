import os
import asyncio
from typing import Dict, List, Optional, Sequence
from xml.sax.saxutils import escape, quoteattr

# Widgets must render without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from photofeed.feed.models import PhotoResult
from photofeed.feed.parser import MEDIA_NS


@pytest.fixture(scope="session")
def qapp():
    """Ensure a QApplication exists for tests that use QObjects or widgets."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


def make_feed(
    titles: Sequence[str],
    descriptions: Sequence[str],
    thumbnails: Sequence[Optional[str]],
) -> bytes:
    """
    Build an RSS 2.0 / Media RSS document.

    Items are emitted for the longest list; missing entries are simply left
    out of that item, which mimics a partial feed. A thumbnail of None is
    written without a url attribute.
    """
    items = []
    for i in range(max(len(titles), len(descriptions), len(thumbnails))):
        parts = [f"<title>Item {i}</title>"]
        if i < len(titles):
            parts.append(f"<media:title>{escape(titles[i])}</media:title>")
        if i < len(descriptions):
            parts.append(f'<media:description type="html">{escape(descriptions[i])}</media:description>')
        if i < len(thumbnails):
            url = thumbnails[i]
            attr = f" url={quoteattr(url)}" if url is not None else ""
            parts.append(f'<media:thumbnail{attr} height="75" width="75" />')
        items.append("<item>" + "".join(parts) + "</item>")

    doc = (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<rss version="2.0" xmlns:media="{MEDIA_NS}">'
        "<channel><title>Recent Uploads</title>"
        + "".join(items)
        + "</channel></rss>"
    )
    return doc.encode("utf-8")


@pytest.fixture
def feed_factory():
    return make_feed


@pytest.fixture
def sample_feed() -> bytes:
    return make_feed(
        ["Cat on a mat", "Sleepy cat", "Cat and dog"],
        ["<p>A cat.</p>", "<p>Zzz &amp; more</p>", "<p>Friends</p>"],
        [
            "https://live.staticflickr.com/1/a_s.jpg",
            "https://live.staticflickr.com/2/b_s.jpg",
            "https://live.staticflickr.com/3/c_s.jpg",
        ],
    )


class FakeFeedClient:
    """
    Feed client whose searches stay pending until the test settles them.

    resolve()/fail() may be called before or after the search starts.
    """

    def __init__(self):
        self.calls: List[str] = []
        self._pending: Dict[str, asyncio.Future] = {}

    def _future(self, term: str) -> asyncio.Future:
        if term not in self._pending:
            self._pending[term] = asyncio.get_running_loop().create_future()
        return self._pending[term]

    async def fetch(self, term: str) -> List[PhotoResult]:
        self.calls.append(term)
        future = self._future(term)
        try:
            return await future
        finally:
            if self._pending.get(term) is future:
                del self._pending[term]

    def resolve(self, term: str, results: List[PhotoResult]) -> None:
        self._future(term).set_result(results)

    def fail(self, term: str, exc: Exception) -> None:
        self._future(term).set_exception(exc)


@pytest.fixture
def fake_client():
    return FakeFeedClient()


def photos(*titles: str) -> List[PhotoResult]:
    return [
        PhotoResult(title=t, description=f"{t} description", url=f"https://example.test/{i}.jpg")
        for i, t in enumerate(titles)
    ]


@pytest.fixture
def make_photos():
    return photos
