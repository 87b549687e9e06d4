"""
Same-site checks based on the "main domain" of a host.
"""
from __future__ import annotations

_SEP = "."
_MAIN_DOMAIN_PARTS = 2


def main_domain(host: str) -> str:
    """
    Reduce a host to its last two labels.

    ``sub.domain.com`` and ``a.sub.domain.com`` both become ``domain.com``.
    Multi-label public suffixes (``example.co.uk`` -> ``co.uk``) are not
    handled.
    """
    parts = host.split(_SEP)
    if len(parts) <= _MAIN_DOMAIN_PARTS:
        return host
    return _SEP.join(parts[-_MAIN_DOMAIN_PARTS:])


def same_main_domain(host_a: str, host_b: str) -> bool:
    return main_domain(host_a) == main_domain(host_b)
