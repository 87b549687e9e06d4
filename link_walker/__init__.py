# link_walker/__init__.py
"""
LinkWalker package initializer.
Defines package version and exposes the crawl entry points.
"""
__version__ = "0.1.0"

from link_walker.crawler.models import CheckPageContentFunc, CrawlParameters
from link_walker.crawler.registry import VisitedRegistry
from link_walker.engine import run, start_crawl
from link_walker.errors import (
    BadStatusError,
    CallbackError,
    CrawlError,
    LinkParseError,
    ParseError,
    TransportError,
)

__all__ = [
    "__version__",
    "BadStatusError",
    "CallbackError",
    "CheckPageContentFunc",
    "CrawlError",
    "CrawlParameters",
    "LinkParseError",
    "ParseError",
    "TransportError",
    "VisitedRegistry",
    "run",
    "start_crawl",
]
