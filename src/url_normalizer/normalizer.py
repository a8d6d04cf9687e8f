"""Canonical URL construction.

Example::

    >>> UrlNormalizer("https://example.com:8080/./main.php?c=1&b=2&a=5&utm_source=x").normalize(["utm_.*"])
    'https://example.com:8080/main.php?a=5&b=2&c=1'
"""

from __future__ import annotations

from typing import Optional, Sequence

from url_normalizer.errors import NormalizeError
from url_normalizer.models import ParsedUrl
from url_normalizer.parser import parse_url
from url_normalizer.presets import get_preset
from url_normalizer.utils.logging import get_logger
from url_normalizer.utils.path_utils import remove_dot_segments
from url_normalizer.utils.query_utils import (
    compile_patterns,
    filter_pairs,
    serialize_pairs,
    sort_pairs,
)

logger = get_logger(__name__)


class UrlNormalizer:
    """Holds a parsed URL and renders its canonical form.

    Construction parses the URL once; :meth:`normalize` may then be called
    any number of times with different exclusion patterns.

    Args:
        raw_url: URL string to normalise.

    Raises:
        ParseError: If *raw_url* is not a parseable URL.
    """

    def __init__(self, raw_url: str) -> None:
        self._url = parse_url(raw_url)

    def __repr__(self) -> str:
        return f"UrlNormalizer(scheme={self._url.scheme!r}, host={self._url.host!r})"

    @property
    def url(self) -> ParsedUrl:
        """The parsed components."""
        return self._url

    def normalize(self, exclude_patterns: Optional[Sequence[str]] = None) -> str:
        """Return the canonical form of the held URL.

        Args:
            exclude_patterns: Regular expressions tested against query keys;
                a pair is dropped when any of them matches. ``None`` or an
                empty sequence keeps every pair.

        Returns:
            ``scheme://host[:port]path[?sorted-query][#fragment]``.

        Raises:
            NormalizeError: If a pattern does not compile. Nothing is
                filtered in that case.
        """
        try:
            patterns = compile_patterns(exclude_patterns)
        except NormalizeError as exc:
            logger.warning("normalizer.invalid_pattern", pattern=exc.pattern, error=str(exc))
            raise

        url = self._url
        path = remove_dot_segments(url.path)
        kept = filter_pairs(url.query, patterns)
        query = serialize_pairs(sort_pairs(kept))

        canonical = f"{url.scheme}://{url.netloc}{path}"
        if query:
            canonical += f"?{query}"
        if url.fragment is not None:
            canonical += f"#{url.fragment}"

        logger.debug(
            "normalizer.normalized",
            kept=len(kept),
            removed=len(url.query) - len(kept),
        )
        return canonical


def normalize_url(
    raw_url: str,
    exclude_patterns: Optional[Sequence[str]] = None,
    *,
    preset: str | None = None,
) -> str:
    """Parse and normalise *raw_url* in one call.

    Args:
        raw_url:          URL string.
        exclude_patterns: Extra exclusion patterns.
        preset:           Name of an exclusion preset whose patterns are
                          applied ahead of *exclude_patterns*.

    Returns:
        Canonical URL string.

    Raises:
        ParseError:     If *raw_url* cannot be parsed.
        NormalizeError: On a bad pattern or an unknown preset.
    """
    patterns: list[str] = []
    if preset is not None:
        patterns.extend(get_preset(preset).patterns)
    if exclude_patterns is not None:
        if isinstance(exclude_patterns, str):
            raise TypeError("exclude_patterns must be a sequence of strings, not a string")
        patterns.extend(exclude_patterns)
    return UrlNormalizer(raw_url).normalize(patterns)
