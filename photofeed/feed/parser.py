"""
Feed Parser - turns a Media RSS document into PhotoResult records.

Titles, descriptions and thumbnails are collected as three independent
lists in document order and zipped positionally, so a partial feed yields
as many results as its shortest list.
"""
import html
import re
from typing import List

from lxml import etree
from loguru import logger

from photofeed.core.exceptions import FeedParseError
from photofeed.feed.models import PhotoResult

MEDIA_NS = "http://search.yahoo.com/mrss/"

_TITLE = f"{{{MEDIA_NS}}}title"
_DESCRIPTION = f"{{{MEDIA_NS}}}description"
_THUMBNAIL = f"{{{MEDIA_NS}}}thumbnail"

# Not an HTML parser: malformed markup may leak through or over-strip
_TAG_PATTERN = re.compile(r"<[^>]+>", re.IGNORECASE)

# Prolog constructs that may precede the root element
_PROLOG_PATTERN = re.compile(rb"<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^>]*>", re.DOTALL)


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True)


def clean_description(value: str) -> str:
    """HTML-decode a description, then strip tag-like substrings."""
    return _TAG_PATTERN.sub("", html.unescape(value or ""))


def _is_prolog_only(body: bytes) -> bool:
    return not _PROLOG_PATTERN.sub(b"", body).strip()


def _text(element) -> str:
    return "".join(element.itertext())


def parse_feed(body: bytes) -> List[PhotoResult]:
    """
    Parse a feed document.

    Args:
        body: Raw response body.

    Returns:
        One PhotoResult per matched item; empty for a root-less document.

    Raises:
        FeedParseError: If the body is not well-formed XML or a thumbnail
            has no url attribute.
    """
    if not body or not body.strip():
        logger.debug("Feed document is empty")
        return []

    try:
        root = etree.fromstring(body, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        if _is_prolog_only(body):
            logger.debug("Feed document has no root element")
            return []
        raise FeedParseError(f"Malformed feed document: {e}") from e

    titles = [_text(el) for el in root.iter(_TITLE)]
    descriptions = [clean_description(_text(el)) for el in root.iter(_DESCRIPTION)]

    urls = []
    for el in root.iter(_THUMBNAIL):
        url = el.get("url")
        if url is None:
            raise FeedParseError("Thumbnail element without url attribute")
        urls.append(url)

    if not (len(titles) == len(descriptions) == len(urls)):
        logger.warning(
            f"Feed lists differ in length (titles={len(titles)}, "
            f"descriptions={len(descriptions)}, thumbnails={len(urls)}); truncating"
        )

    return [
        PhotoResult(title=title, description=description, url=url)
        for title, description, url in zip(titles, descriptions, urls)
    ]
