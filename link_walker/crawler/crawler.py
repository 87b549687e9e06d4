from __future__ import annotations

import inspect
import logging
import time
from typing import Iterator, List, Tuple

from link_walker.crawler.fetcher import Fetcher
from link_walker.crawler.link_extractor import iter_links, parse_document
from link_walker.crawler.models import CrawlParameters
from link_walker.crawler.registry import VisitedRegistry
from link_walker.errors import CallbackError, CrawlError

__all__ = ("Crawler",)

logger = logging.getLogger("LinkWalker.crawler")


class Crawler:
    """
    Depth-first crawler.

    Each link's whole subtree is crawled before its next sibling. The first
    error anywhere aborts the crawl and propagates to the caller of
    :meth:`crawl`; reaching the link limit ends the crawl without an error.
    Pages waiting for their remaining links live on an explicit stack, so
    chains of any depth are followed.
    """

    def __init__(self, params: CrawlParameters, fetcher: Fetcher, registry: VisitedRegistry) -> None:
        self.params = params
        self.fetcher = fetcher
        self.registry = registry

    async def crawl(self, url: str) -> None:
        # (page url, its links not crawled yet), innermost page last
        stack: List[Tuple[str, Iterator[str]]] = [(url, iter(await self._visit(url)))]
        while stack:
            parent, links = stack[-1]
            link = next(links, None)
            if link is None:
                stack.pop()
                continue
            if self._enough():
                logger.info(
                    "this is enough links (parent_url=%s links_limit=%d visited=%d)",
                    parent, self.params.links_limit, self.registry.size(),
                )
                return
            try:
                children = await self._visit(link)
            except CrawlError as exc:
                for page_url, _ in reversed(stack):
                    exc.add_parent(page_url)
                raise
            if children:
                stack.append((link, iter(children)))

    def _enough(self) -> bool:
        limit = self.params.links_limit
        return limit > 0 and self.registry.size() > limit

    async def _visit(self, url: str) -> list[str]:
        """Fetch, check and register one page; return its outbound links."""
        if self.registry.is_visited(url):
            logger.debug("%s: already requested, skip it (visited=%d)", url, self.registry.size())
            return []

        logger.info("%s: requesting...", url)
        started = time.monotonic()
        try:
            page = await self.fetcher.fetch(url)
            await self._check_content(url, page.text)
            document = parse_document(page.body)
            self.registry.mark_visited(url)
            links = list(iter_links(url, document, self.params.only_same_host))
        except CrawlError as exc:
            if exc.url is None:
                exc.url = url
            raise
        finally:
            logger.info("%s: requested in %.3fs", url, time.monotonic() - started)
        logger.debug("%s: %d links found", url, len(links))
        return links

    async def _check_content(self, url: str, body: str) -> None:
        try:
            result = self.params.check_content(body)
            if inspect.isawaitable(result):
                await result
        except Exception as exc:
            raise CallbackError(f"content check failed: {exc}", url=url) from exc
