"""
Registry of URLs already fetched during one crawl.
"""
from __future__ import annotations

import threading
from typing import Dict, Iterator, List


class VisitedRegistry:
    """
    Thread-safe set of visited URLs, kept in insertion order.

    ``is_visited`` followed by ``mark_visited`` is not an atomic check-and-set:
    two concurrent crawls of the same URL over one registry may both fetch it
    before either marks it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._urls: Dict[str, None] = {}

    def is_visited(self, url: str) -> bool:
        with self._lock:
            return url in self._urls

    def mark_visited(self, url: str) -> None:
        """Add *url*; marking it again is a no-op."""
        with self._lock:
            self._urls.setdefault(url, None)

    def size(self) -> int:
        with self._lock:
            return len(self._urls)

    def snapshot(self) -> List[str]:
        """Visited URLs in the order they were marked."""
        with self._lock:
            return list(self._urls)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and self.is_visited(url)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"<VisitedRegistry size={self.size()}>"
