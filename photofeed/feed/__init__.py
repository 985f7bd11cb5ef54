"""
Photo feed access: result model, HTTP client and feed parser.
"""
from photofeed.feed.models import PhotoResult
from photofeed.feed.parser import MEDIA_NS, clean_description, parse_feed
from photofeed.feed.client import FeedClient

__all__ = [
    "PhotoResult",
    "FeedClient",
    "MEDIA_NS",
    "clean_description",
    "parse_feed",
]
