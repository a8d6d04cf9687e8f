"""Named exclusion-pattern presets loaded from YAML."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml

from url_normalizer.config import settings
from url_normalizer.errors import NormalizeError
from url_normalizer.models import ExclusionPreset
from url_normalizer.utils.logging import get_logger

logger = get_logger(__name__)

_BUNDLED_PATH = Path(__file__).resolve().parent / "exclusion_presets.yaml"
_FALLBACK_PRESETS = {
    "tracking": ExclusionPreset(
        name="tracking",
        description="Analytics and campaign tracking parameters.",
        patterns=["^utm_", "^fbclid$", "^gclid$", "^msclkid$"],
    ),
}


def _presets_path() -> Path:
    return settings.presets_path or _BUNDLED_PATH


@lru_cache(maxsize=1)
def load_presets() -> dict[str, ExclusionPreset]:
    """Load and cache the preset file.

    Returns:
        Dict mapping preset name → :class:`ExclusionPreset`. Falls back to a
        built-in ``tracking`` preset when the file is missing or malformed.
    """
    path = _presets_path()
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
        presets: dict[str, ExclusionPreset] = {}
        for name, spec in raw.get("presets", {}).items():
            presets[name] = ExclusionPreset(
                name=name,
                description=spec.get("description", ""),
                patterns=spec.get("patterns", []),
            )
        logger.info("presets.loaded", path=str(path), presets=sorted(presets))
        return presets
    except Exception as exc:  # noqa: BLE001
        logger.warning("presets.load_failed", path=str(path), error=str(exc))
        return dict(_FALLBACK_PRESETS)


def get_preset(name: str) -> ExclusionPreset:
    """Return the preset called *name*.

    Raises:
        NormalizeError: If no preset has that name.
    """
    preset = load_presets().get(name)
    if preset is None:
        raise NormalizeError.unknown_preset(name)
    return preset


def available_presets() -> list[str]:
    """Return the sorted names of all loaded presets."""
    return sorted(load_presets())
