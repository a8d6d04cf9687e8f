"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from url_normalizer.config import settings
from url_normalizer.normalizer import UrlNormalizer
from url_normalizer.presets import load_presets


# ---------------------------------------------------------------------------
# URL fixtures
# ---------------------------------------------------------------------------

TRACKED_URL = (
    "https://example.com:8080/main.php?c=1&b=2&a=5"
    "&utm_source=facebook&utm_medium=social&utm_campaign=seofanpage"
)


@pytest.fixture
def tracked_normalizer() -> UrlNormalizer:
    """Normalizer over a URL carrying utm_* tracking parameters."""
    return UrlNormalizer(TRACKED_URL)


# ---------------------------------------------------------------------------
# Preset fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def clear_preset_cache() -> Iterator[None]:
    """Drop the cached preset file before and after every test."""
    load_presets.cache_clear()
    yield
    load_presets.cache_clear()


@pytest.fixture
def presets_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the library at a temporary preset file."""
    path = tmp_path / "presets.yaml"
    path.write_text(
        "presets:\n"
        "  ads:\n"
        "    description: Ad click identifiers.\n"
        "    patterns:\n"
        "      - '^gclid$'\n"
        "      - '^dclid$'\n"
        "  empty:\n"
        "    patterns: []\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(settings, "presets_path", path)
    return path
