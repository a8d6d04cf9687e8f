"""Decompose raw URL strings into :class:`ParsedUrl` values."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from url_normalizer.errors import ParseError
from url_normalizer.models import ParsedUrl
from url_normalizer.utils.logging import get_logger
from url_normalizer.utils.query_utils import split_query

logger = get_logger(__name__)

# RFC 3986 scheme followed by an authority marker.
_HIERARCHICAL_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

# Schemes whose URLs are meaningless without a host.
_HOST_REQUIRED_SCHEMES: frozenset[str] = frozenset({"http", "https", "ws", "wss", "ftp"})


def _port_text(netloc: str) -> str | None:
    """Return the port exactly as written in *netloc*, or ``None``."""
    hostinfo = netloc.rpartition("@")[2]
    _, bracket, bracketed = hostinfo.partition("[")
    if bracket:
        port = bracketed.partition("]")[2].partition(":")[2]
    else:
        port = hostinfo.partition(":")[2]
    return port or None


def parse_url(raw_url: str) -> ParsedUrl:
    """Parse *raw_url* into an immutable :class:`ParsedUrl`.

    Args:
        raw_url: URL string; surrounding whitespace is ignored.

    Returns:
        The decomposed URL. Query keys and values are kept verbatim.

    Raises:
        ParseError: If *raw_url* has no valid scheme, no authority, or an
            authority that cannot be decomposed.
    """
    if not isinstance(raw_url, str):
        raise ParseError(raw_url, "expected a string")
    text = raw_url.strip()
    if not text:
        raise ParseError(raw_url, "empty input")
    if not _HIERARCHICAL_PREFIX.match(text):
        raise ParseError(raw_url, "missing scheme or authority")

    try:
        parts = urlsplit(text)
        host = (parts.hostname or "").lower()
        port = parts.port
    except ValueError as exc:
        raise ParseError(raw_url, str(exc)) from exc

    scheme = parts.scheme.lower()
    if not host and scheme in _HOST_REQUIRED_SCHEMES:
        raise ParseError(raw_url, f"{scheme} URL requires a host")

    parsed = ParsedUrl(
        scheme=scheme,
        host=host,
        port=_port_text(parts.netloc) if port is not None else None,
        path=parts.path,
        query=tuple(split_query(parts.query)),
        fragment=parts.fragment or None,
    )
    logger.debug("parser.parsed", scheme=parsed.scheme, host=parsed.host, params=len(parsed.query))
    return parsed
