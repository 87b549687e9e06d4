# File: tests/test_fetcher.py
from __future__ import annotations

import asyncio

import pytest
from aiohttp import ClientSession, web

from link_walker.crawler.fetcher import Fetcher
from link_walker.crawler.models import PageData
from link_walker.errors import BadStatusError, TransportError


async def _slow_app(unused_port: int, delay: float) -> web.AppRunner:
    app = web.Application()

    async def slow(_):
        await asyncio.sleep(delay)
        return web.Response(text="<h1>late</h1>", content_type="text/html")

    app.router.add_get("/slow", slow)
    runner = web.AppRunner(app)
    await runner.setup()
    await web.TCPSite(runner, "localhost", unused_port).start()
    return runner


@pytest.mark.asyncio()
async def test_fetch_returns_body(serve_pages):
    base = await serve_pages({"/": (200, "<p>héllo</p>")})
    async with ClientSession() as session:
        page = await Fetcher(session, timeout=2.0).fetch(f"{base}/")
    assert page.status == 200
    assert page.body == "<p>héllo</p>".encode("utf-8")
    assert page.text == "<p>héllo</p>"


@pytest.mark.asyncio()
async def test_status_outside_range(serve_pages):
    base = await serve_pages({"/gone": (404, "not here")})
    async with ClientSession() as session:
        with pytest.raises(BadStatusError) as exc_info:
            await Fetcher(session, 2.0, 200, 299).fetch(f"{base}/gone")
    err = exc_info.value
    assert err.status == 404
    assert err.accepted == (200, 299)
    assert err.url == f"{base}/gone"
    assert "bad status code: 404, supported status code range: 200 - 299" in str(err)


@pytest.mark.asyncio()
async def test_custom_range_accepts_404(serve_pages):
    base = await serve_pages({"/gone": (404, "not here")})
    async with ClientSession() as session:
        page = await Fetcher(session, 2.0, 200, 404).fetch(f"{base}/gone")
    assert page.status == 404


@pytest.mark.asyncio()
async def test_timeout_is_transport_error(unused_tcp_port):
    runner = await _slow_app(unused_tcp_port, delay=1.0)
    try:
        async with ClientSession() as session:
            with pytest.raises(TransportError) as exc_info:
                await Fetcher(session, timeout=0.2).fetch(f"http://localhost:{unused_tcp_port}/slow")
    finally:
        await runner.cleanup()
    assert "timed out" in str(exc_info.value)


@pytest.mark.asyncio()
async def test_connection_refused_is_transport_error(unused_tcp_port):
    async with ClientSession() as session:
        with pytest.raises(TransportError) as exc_info:
            await Fetcher(session, timeout=2.0).fetch(f"http://localhost:{unused_tcp_port}/")
    assert exc_info.value.__cause__ is not None


def test_page_text_falls_back_on_unknown_charset():
    page = PageData(url="http://e.com/", status=200, body=b"caf\xc3\xa9", encoding="x-unknown")
    assert page.text == "café"
