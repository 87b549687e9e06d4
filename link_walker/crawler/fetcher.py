"""
Fetcher module: performs the GET for one page and validates its status code.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Tuple

from aiohttp import ClientError, ClientSession, ClientTimeout

from link_walker.crawler.models import PageData
from link_walker.errors import BadStatusError, TransportError

logger = logging.getLogger("LinkWalker.fetcher")


class Fetcher:
    """Fetches pages through an aiohttp session; never retries."""

    def __init__(
        self,
        session: ClientSession,
        timeout: float,
        status_code_min: int = 200,
        status_code_max: int = 299,
    ) -> None:
        self.session = session
        self.timeout = ClientTimeout(total=timeout)
        self.accepted: Tuple[int, int] = (status_code_min, status_code_max)

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its full body.

        Raises TransportError on network failure or timeout and
        BadStatusError when the status is outside of the accepted range.
        """
        try:
            async with self.session.get(url, timeout=self.timeout) as resp:
                low, high = self.accepted
                if not low <= resp.status <= high:
                    raise BadStatusError(resp.status, self.accepted, url=url)
                body = await resp.read()
                logger.debug("Fetched %s: %s (%d bytes)", url, resp.status, len(body))
                return PageData(url=url, status=resp.status, body=body, encoding=resp.charset)
        except asyncio.TimeoutError as exc:
            raise TransportError(f"request timed out after {self.timeout.total}s", url=url) from exc
        except ClientError as exc:
            raise TransportError(f"request failed: {exc}", url=url) from exc
        except ValueError as exc:
            # aiohttp rejects some unusable URLs with a plain ValueError
            raise TransportError(f"cannot request url: {exc}", url=url) from exc
