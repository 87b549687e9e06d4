"""link_walker.crawler: traversal engine and its collaborators."""
from __future__ import annotations

from link_walker.crawler.crawler import Crawler
from link_walker.crawler.domain import main_domain, same_main_domain
from link_walker.crawler.fetcher import Fetcher
from link_walker.crawler.link_extractor import extract_links, iter_links, parse_document
from link_walker.crawler.models import CheckPageContentFunc, CrawlParameters, PageData
from link_walker.crawler.registry import VisitedRegistry

__all__ = [
    "CheckPageContentFunc",
    "Crawler",
    "CrawlParameters",
    "Fetcher",
    "PageData",
    "VisitedRegistry",
    "extract_links",
    "iter_links",
    "main_domain",
    "parse_document",
    "same_main_domain",
]
