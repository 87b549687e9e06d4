"""
Link extraction for link_walker.

Links keep the document order of their ``<a>`` elements. A relative reference
only inherits the host and scheme of its page (``c`` on
``http://example.com/x/y`` becomes ``http://example.com/c``); paths are not
resolved against the page's directory. Paths are percent-encoded, so
``/a b`` and ``/a%20b`` name the same page.
"""
from __future__ import annotations

import re
from typing import Iterator, List, Union
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from link_walker.crawler.domain import same_main_domain
from link_walker.errors import LinkParseError, ParseError

__all__ = ("parse_document", "iter_links", "extract_links", "parse_reference")

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PATH_SAFE = "/%:@!$&'()*+,;="


def parse_document(body: Union[bytes, str]) -> BeautifulSoup:
    """Parse a page body into a queryable document."""
    try:
        return BeautifulSoup(body, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"malformed html: {exc}") from exc


def parse_reference(href: str) -> SplitResult:
    """
    Split a URL reference, rejecting the forms a strict URL parser refuses:
    control characters, broken ``%`` escapes, bad brackets or ports and
    whitespace inside the host.
    """
    if _CONTROL_RE.search(href):
        raise LinkParseError("invalid control character in url", href)
    try:
        parts = urlsplit(href)
        parts.port  # raises on a non-numeric or out-of-range port
    except ValueError as exc:
        raise LinkParseError(str(exc), href) from exc
    # the query is kept as written
    if any(_BAD_ESCAPE_RE.search(p) for p in (parts.netloc, parts.path, parts.fragment)):
        raise LinkParseError("invalid url escape", href)
    if " " in _host(parts):
        raise LinkParseError("invalid character in host name", href)
    return parts


def _host(parts: SplitResult) -> str:
    """Authority without user info: host plus optional port."""
    return parts.netloc.rpartition("@")[2]


def _is_opaque(parts: SplitResult) -> bool:
    return bool(parts.scheme) and not parts.netloc and not parts.path.startswith("/")


def iter_links(page_url: str, document: BeautifulSoup, only_same_host: bool) -> Iterator[str]:
    """
    Yield the absolute URL of every ``<a href>`` in *document*.

    Raises LinkParseError on the first malformed ``href``; links yielded
    before it must be discarded by the caller.
    """
    page = parse_reference(page_url)
    page_host = _host(page)
    for tag in document.find_all("a"):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if href is None:
            continue
        if isinstance(href, list):
            href = " ".join(href)
        href = href.strip()
        if not href:
            continue

        link = parse_reference(href)
        host = _host(link)
        if only_same_host and host and not same_main_domain(page_host, host):
            continue
        if _is_opaque(link):
            # mailto:, javascript: and similar stay as written
            yield urlunsplit(link)
            continue
        if not host:
            link = link._replace(netloc=page_host)
        if not link.scheme:
            link = link._replace(scheme=page.scheme)
        link = link._replace(path=quote(link.path, safe=_PATH_SAFE))
        yield urlunsplit(link)


def extract_links(page_url: str, body: Union[bytes, str], only_same_host: bool) -> List[str]:
    """Parse *body* and return all its links, failing on the first bad one."""
    return list(iter_links(page_url, parse_document(body), only_same_host))
