"""Pydantic v2 data models for URL normalisation."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParsedUrl(BaseModel):
    """A URL decomposed into the components the normaliser works on.

    Instances are frozen: once built by :func:`~url_normalizer.parser.parse_url`
    they never change.
    """

    model_config = ConfigDict(frozen=True)

    scheme: str
    host: str = ""
    port: Optional[str] = None
    path: str = ""
    query: tuple[tuple[str, str], ...] = ()
    fragment: Optional[str] = None

    @property
    def netloc(self) -> str:
        """Host (bracketed when it is an IPv6 literal) plus ``:port``.

        The port is written as it appeared in the source; a zero port is
        omitted.
        """
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port and int(self.port) != 0:
            return f"{host}:{self.port}"
        return host


class ExclusionPreset(BaseModel):
    """A named list of query-key exclusion patterns."""

    name: str
    description: str = ""
    patterns: list[str] = Field(default_factory=list)
