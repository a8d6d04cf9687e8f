"""Query-string helpers: splitting, key filtering, ordering, serialisation."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from url_normalizer.errors import NormalizeError

QueryPair = tuple[str, str]


def split_query(query: str) -> list[QueryPair]:
    """Split a raw query string into ``(key, value)`` pairs.

    Pieces are separated by ``&`` and split on the first ``=``; empty pieces
    are skipped and a piece without ``=`` gets an empty value. Nothing is
    percent-decoded.

    Args:
        query: Query string without the leading ``?``.

    Returns:
        Pairs in their original order, duplicates included.
    """
    pairs: list[QueryPair] = []
    for piece in query.split("&"):
        if not piece:
            continue
        key, _, value = piece.partition("=")
        pairs.append((key, value))
    return pairs


def compile_patterns(patterns: Sequence[str] | None) -> list[re.Pattern[str]]:
    """Compile every exclusion pattern up front.

    Args:
        patterns: Regular expressions, or ``None`` for no filtering.

    Returns:
        Compiled patterns in the order given.

    Raises:
        TypeError: If *patterns* is a bare string rather than a sequence.
        NormalizeError: If any pattern fails to compile.
    """
    if patterns is None:
        return []
    if isinstance(patterns, str):
        raise TypeError("exclude_patterns must be a sequence of strings, not a string")

    compiled: list[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise NormalizeError.invalid_pattern(pattern, str(exc)) from exc
    return compiled


def filter_pairs(pairs: Iterable[QueryPair], patterns: Sequence[re.Pattern[str]]) -> list[QueryPair]:
    """Drop every pair whose key is matched (anywhere) by one of *patterns*."""
    return [pair for pair in pairs if not any(p.search(pair[0]) for p in patterns)]


def sort_pairs(pairs: Iterable[QueryPair]) -> list[QueryPair]:
    """Return *pairs* sorted by key; equal keys keep their relative order."""
    return sorted(pairs, key=lambda pair: pair[0])


def serialize_pairs(pairs: Iterable[QueryPair]) -> str:
    """Join *pairs* as ``k=v&k=v``, verbatim."""
    return "&".join(f"{key}={value}" for key, value in pairs)
