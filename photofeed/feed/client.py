"""
Feed Client - single-attempt feed search over HTTP.
"""
import asyncio
from typing import List
from urllib.parse import quote_plus

import aiohttp
from loguru import logger

from photofeed.core.config import FeedSettings
from photofeed.core.exceptions import FeedRequestError, FeedTimeoutError
from photofeed.feed.models import PhotoResult
from photofeed.feed.parser import parse_feed


class FeedClient:
    """
    Queries the public photo feed by tag.

    One GET per search, no retry. Every failure surfaces as a FeedError
    subclass so callers handle a single exception type.

    Example:
        client = FeedClient(config.data.feed)
        photos = await client.fetch("cats")
    """

    def __init__(self, settings: FeedSettings = None):
        self.settings = settings or FeedSettings()

    def build_url(self, term: str) -> str:
        """Build the feed URL for a search term."""
        s = self.settings
        return f"{s.base_url.rstrip('/')}{s.path}?tags={quote_plus(term)}&format={s.format}"

    async def fetch(self, term: str) -> List[PhotoResult]:
        """
        Search the feed for a term.

        Args:
            term: Search tags, already trimmed by the caller.

        Returns:
            Results in feed order (possibly empty).

        Raises:
            FeedError: On network, status, timeout or parse failure.
        """
        url = self.build_url(term)
        logger.debug(f"Fetching feed: {url}")
        body = await self._download(url)
        results = parse_feed(body)
        logger.info(f"Feed search '{term}' returned {len(results)} results")
        return results

    async def _download(self, url: str) -> bytes:
        timeout = aiohttp.ClientTimeout(total=self.settings.timeout_seconds)
        headers = {"User-Agent": self.settings.user_agent}
        try:
            async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        raise FeedRequestError(f"HTTP {response.status}", status=response.status)
                    return await response.read()
        except asyncio.TimeoutError as e:
            raise FeedTimeoutError(f"Timed out after {self.settings.timeout_seconds}s: {url}") from e
        except aiohttp.ClientError as e:
            raise FeedRequestError(f"Request failed: {e}") from e
