# File: link_walker/engine.py
"""link_walker.engine: public entry points that wire the crawler together."""

from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientSession

from link_walker.crawler.crawler import Crawler
from link_walker.crawler.fetcher import Fetcher
from link_walker.crawler.models import CheckPageContentFunc, CrawlParameters
from link_walker.crawler.registry import VisitedRegistry
from link_walker.logger import logger

__all__ = ["start_crawl", "run", "DEFAULT_USER_AGENT"]

DEFAULT_USER_AGENT = "LinkWalker/0.1"


async def start_crawl(
    seed_url: str,
    params: CrawlParameters,
    *,
    registry: Optional[VisitedRegistry] = None,
    session: Optional[ClientSession] = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> VisitedRegistry:
    """
    Crawl from *seed_url* and return the registry of visited URLs.

    A fresh registry is created unless one is passed in. An injected
    *session* is left open; otherwise one is opened for this crawl only.
    Any CrawlError aborts the crawl and is re-raised.
    """
    registry = registry if registry is not None else VisitedRegistry()
    logger.info("Starting crawl: %s (links_limit=%d)", seed_url, params.links_limit)

    if session is None:
        async with ClientSession(headers={"User-Agent": user_agent}) as own_session:
            await _crawl(seed_url, params, registry, own_session)
    else:
        await _crawl(seed_url, params, registry, session)

    logger.info("Crawl finished: %d pages visited", registry.size())
    return registry


async def _crawl(
    seed_url: str, params: CrawlParameters, registry: VisitedRegistry, session: ClientSession
) -> None:
    fetcher = Fetcher(session, params.timeout, params.status_code_min, params.status_code_max)
    try:
        await Crawler(params, fetcher, registry).crawl(seed_url)
    except Exception as exc:
        logger.error("Crawl failed: %s", exc)
        raise


def run(
    seed_url: str,
    timeout: float,
    check_content: CheckPageContentFunc,
    status_code_min: int = 200,
    status_code_max: int = 299,
    only_same_host: bool = False,
    links_limit: int = 0,
) -> VisitedRegistry:
    """Synchronous entry point; raises CrawlError on the first failure."""
    params = CrawlParameters(
        check_content=check_content,
        timeout=timeout,
        status_code_min=status_code_min,
        status_code_max=status_code_max,
        only_same_host=only_same_host,
        links_limit=links_limit,
    )
    return asyncio.run(start_crawl(seed_url, params))
