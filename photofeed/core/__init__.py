"""
Core infrastructure: configuration, logging, events and errors.
"""
from photofeed.core.config import AppConfig, ConfigManager
from photofeed.core.events import ObserverEvent
from photofeed.core.exceptions import (
    PhotoFeedError,
    FeedError,
    FeedRequestError,
    FeedTimeoutError,
    FeedParseError,
    SearchStateError,
)
from photofeed.core.logging import setup_logging

__all__ = [
    "AppConfig",
    "ConfigManager",
    "ObserverEvent",
    "PhotoFeedError",
    "FeedError",
    "FeedRequestError",
    "FeedTimeoutError",
    "FeedParseError",
    "SearchStateError",
    "setup_logging",
]
