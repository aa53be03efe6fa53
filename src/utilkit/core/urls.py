"""URL component extraction.

Every helper returns None for absent or malformed input and never raises.
A URL is malformed when it has no scheme, when a scheme that needs a host
(``http``, ``https``, ``ws``, ``wss``, ``ftp``) has none, or when its port
is not a valid number.

Domain helpers split the hostname on dots.  There is no public-suffix
list, so ``sub.example.co.uk`` has top-level domain ``uk`` and
second-level domain ``co``.
"""

from __future__ import annotations

import logging
from urllib.parse import SplitResult, parse_qs, urlsplit

from utilkit.core.types import Maybe

logger = logging.getLogger(__name__)

DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

SPECIAL_SCHEMES = frozenset({*DEFAULT_PORTS, "file"})


def _parse(url: Maybe[str]) -> SplitResult | None:
    if not url or not isinstance(url, str):
        return None
    try:
        parts = urlsplit(url.strip())
        parts.port  # noqa: B018 - validates the port
    except ValueError:
        logger.debug("Malformed URL: %r", url)
        return None
    if not parts.scheme:
        return None
    if parts.scheme in DEFAULT_PORTS and not parts.hostname:
        return None
    return parts


def _hostname(parts: SplitResult) -> str:
    hostname = parts.hostname or ""
    if ":" in hostname:
        return f"[{hostname}]"
    return hostname


def _host(parts: SplitResult) -> str:
    port = parts.port
    if port is None or DEFAULT_PORTS.get(parts.scheme) == port:
        return _hostname(parts)
    return f"{_hostname(parts)}:{port}"


def _labels(url: Maybe[str]) -> list[str] | None:
    parts = _parse(url)
    if parts is None:
        return None
    return _hostname(parts).split(".")


def get_host(url: Maybe[str]) -> str | None:
    """Return the hostname plus any non-default port.

    Examples:
        >>> get_host("https://example.com:8080/path?query=123")
        'example.com:8080'
        >>> get_host("https://example.com:443/")
        'example.com'
        >>> get_host("invalid-url") is None
        True
    """
    parts = _parse(url)
    return _host(parts) if parts is not None else None


def get_origin(url: Maybe[str]) -> str | None:
    """Return ``scheme://host`` for web schemes, ``"null"`` for others."""
    parts = _parse(url)
    if parts is None:
        return None
    if parts.scheme not in DEFAULT_PORTS:
        return "null"
    return f"{parts.scheme}://{_host(parts)}"


def get_pathname(url: Maybe[str]) -> str | None:
    parts = _parse(url)
    if parts is None:
        return None
    if not parts.path and parts.scheme in SPECIAL_SCHEMES:
        return "/"
    return parts.path


def get_hostname(url: Maybe[str]) -> str | None:
    parts = _parse(url)
    return _hostname(parts) if parts is not None else None


def get_search_params(url: Maybe[str]) -> dict[str, list[str]] | None:
    """Return the query string as a multi-map; blank values are kept.

    Examples:
        >>> get_search_params("https://example.com/?tag=a&tag=b&empty=")
        {'tag': ['a', 'b'], 'empty': ['']}
    """
    parts = _parse(url)
    if parts is None:
        return None
    return parse_qs(parts.query, keep_blank_values=True)


def get_top_level_domain(url: Maybe[str]) -> str | None:
    labels = _labels(url)
    return labels[-1] if labels is not None else None


def get_second_level_domain(url: Maybe[str]) -> str | None:
    labels = _labels(url)
    if labels is None or len(labels) < 2:
        return None
    return labels[-2]


def get_subdomain_segments(url: Maybe[str]) -> list[str] | None:
    """Return the labels left of the second-level domain, in order.

    Only the last two labels are dropped, so the second-level label itself
    is never returned as a subdomain; ``www.example.com`` gives ``['www']``
    rather than ``['www', 'example']``.  Multi-part public suffixes such as
    ``co.uk`` are not recognised.

    Examples:
        >>> get_subdomain_segments("https://sub.example.co.uk/")
        ['sub', 'example']
        >>> get_subdomain_segments("https://example.com/")
        []
    """
    labels = _labels(url)
    return labels[:-2] if labels is not None else None


__all__ = [
    "get_host",
    "get_hostname",
    "get_origin",
    "get_pathname",
    "get_search_params",
    "get_second_level_domain",
    "get_subdomain_segments",
    "get_top_level_domain",
]
