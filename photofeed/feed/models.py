from dataclasses import dataclass


@dataclass(frozen=True)
class PhotoResult:
    """One photo from a feed search."""
    title: str
    description: str
    url: str
