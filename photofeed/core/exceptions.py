"""
Exception hierarchy for the photo feed browser.
"""
from typing import Optional


class PhotoFeedError(Exception):
    """Base class for all application errors."""
    pass


class FeedError(PhotoFeedError):
    """A feed search could not be completed."""
    pass


class FeedRequestError(FeedError):
    """The feed endpoint could not be reached or answered with an error status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class FeedTimeoutError(FeedError):
    """The feed endpoint did not answer in time."""
    pass


class FeedParseError(FeedError):
    """The feed body is not a usable XML document."""
    pass


class SearchStateError(PhotoFeedError):
    """Exception raised for invalid search state transitions."""
    pass
