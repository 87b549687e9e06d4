"""
Data models for the link_walker crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Union

if TYPE_CHECKING:
    from link_walker.config import CrawlConfig

#: Receives the decoded body of every newly fetched page; raising aborts the crawl.
CheckPageContentFunc = Callable[[str], Union[None, Awaitable[Any], Any]]


@dataclass(slots=True)
class PageData:
    """Holds URL, status and raw body of a fetched page."""

    url: str
    status: int
    body: bytes
    encoding: Optional[str] = None

    @property
    def text(self) -> str:
        try:
            return self.body.decode(self.encoding or "utf-8", errors="replace")
        except LookupError:
            # unknown charset announced by the server
            return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class CrawlParameters:
    """Per-run settings shared unchanged by every recursive call."""

    check_content: CheckPageContentFunc
    timeout: float = 10.0
    status_code_min: int = 200
    status_code_max: int = 299
    only_same_host: bool = False
    links_limit: int = 0

    @classmethod
    def from_config(cls, config: CrawlConfig, check_content: CheckPageContentFunc) -> CrawlParameters:
        return cls(
            check_content=check_content,
            timeout=config.timeout,
            status_code_min=config.status_code_min,
            status_code_max=config.status_code_max,
            only_same_host=config.only_same_host,
            links_limit=config.links_limit,
        )

    @property
    def accepted_statuses(self) -> tuple[int, int]:
        return self.status_code_min, self.status_code_max
