# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Dict, List, Tuple

import pytest
import pytest_asyncio
from aiohttp import web

from link_walker.crawler.models import CrawlParameters

#: path -> (status, html)
Pages = Dict[str, Tuple[int, str]]
StartServer = Callable[..., Awaitable[str]]


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


@pytest.fixture()
def hits() -> Counter:
    """Request counter per path, filled by the test server."""
    return Counter()


@pytest.fixture()
def seen_bodies() -> List[str]:
    return []


@pytest.fixture()
def params(seen_bodies) -> CrawlParameters:
    """Parameters recording every body passed to the content callback."""
    return CrawlParameters(check_content=seen_bodies.append, timeout=2.0)


@pytest_asyncio.fixture
async def serve_pages(unused_tcp_port_factory, hits) -> AsyncIterator[StartServer]:
    """Start an aiohttp app serving *pages*; yield its base URL, clean up afterwards."""
    runners: List[web.AppRunner] = []

    async def _start(pages: Pages) -> str:
        app = web.Application()

        def make_handler(path: str, status: int, html: str):
            async def handler(_):
                hits[path] += 1
                return web.Response(status=status, text=html, content_type="text/html")
            return handler

        for path, (status, html) in pages.items():
            app.router.add_get(path, make_handler(path, status, html))

        runner = web.AppRunner(app)
        await runner.setup()
        port = unused_tcp_port_factory()
        site = web.TCPSite(runner, "localhost", port)
        await site.start()
        runners.append(runner)
        return f"http://localhost:{port}"

    try:
        yield _start
    finally:
        for runner in runners:
            await runner.cleanup()
