"""Runtime settings for the standings dashboard, overridable via environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_URL = "https://api.jolpi.ca/ergast/f1"
DEFAULT_CACHE_FILE = os.path.join(os.path.dirname(__file__), "..", "data", "standings-cache.json")
DEFAULT_TIMEOUT = 30.0
DEFAULT_SEASONS = (2025, 2024, 2023, 2022, 2021)


@dataclass(frozen=True)
class Settings:
    api_url: str
    cache_file: str
    timeout: float
    seasons: tuple[int, ...]


def _parse_seasons(raw: str) -> tuple[int, ...]:
    seasons = tuple(int(part) for part in raw.split(",") if part.strip())
    if not seasons:
        raise ValueError("F1_STANDINGS_SEASONS must list at least one season")
    return seasons


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """Build Settings from defaults, applying F1_STANDINGS_* environment overrides."""
    env = os.environ if env is None else env
    seasons_raw = env.get("F1_STANDINGS_SEASONS")
    return Settings(
        api_url=env.get("F1_STANDINGS_API_URL", DEFAULT_API_URL),
        cache_file=env.get("F1_STANDINGS_CACHE_FILE", DEFAULT_CACHE_FILE),
        timeout=float(env.get("F1_STANDINGS_TIMEOUT", DEFAULT_TIMEOUT)),
        seasons=_parse_seasons(seasons_raw) if seasons_raw else DEFAULT_SEASONS,
    )
