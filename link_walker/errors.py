# File: link_walker/errors.py
"""link_walker.errors: exceptions raised while crawling.

Every :class:`CrawlError` is fatal for the whole crawl. The error carries the
URL it happened on and, once it has travelled up the recursion, the ``trail``
of parent pages through which that URL was reached (nearest parent first).
"""
from __future__ import annotations

from typing import List, Optional, Tuple

__all__ = (
    "CrawlError",
    "TransportError",
    "BadStatusError",
    "ParseError",
    "LinkParseError",
    "CallbackError",
    "ContentCheckError",
)


class CrawlError(Exception):
    """Base class for all crawl failures."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.trail: List[str] = []

    def add_parent(self, url: str) -> None:
        """Record a page through which the failing URL was reached."""
        self.trail.append(url)

    def __str__(self) -> str:
        text = self.message
        if self.url:
            text = f"{text} for url {self.url}"
        if self.trail:
            text = f"{text} (reached via {' <- '.join(self.trail)})"
        return text


class TransportError(CrawlError):
    """Network failure or timeout while requesting a page."""


class BadStatusError(CrawlError):
    """Response status outside of the accepted range."""

    def __init__(self, status: int, accepted: Tuple[int, int], url: Optional[str] = None) -> None:
        super().__init__(
            f"bad status code: {status}, supported status code range: {accepted[0]} - {accepted[1]}",
            url,
        )
        self.status = status
        self.accepted = accepted


class ParseError(CrawlError):
    """Page body could not be parsed as HTML."""


class LinkParseError(ParseError):
    """A single ``href`` is not a valid URL reference."""

    def __init__(self, message: str, href: str, url: Optional[str] = None) -> None:
        super().__init__(f"{message}: {href!r}", url)
        self.href = href


class CallbackError(CrawlError):
    """The content callback raised."""


class ContentCheckError(Exception):
    """Raised by content checks when a page contains forbidden content."""
