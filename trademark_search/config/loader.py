"""
Environment-driven settings loader for trademark search.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from trademark_search.config.env import load_env_files
from trademark_search.config.models import TrademarkSearchSettings

DEFAULT_BASE_URL = "https://search.ipaustralia.gov.au"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/125.0.0.0 Safari/537.36"
)
DEFAULT_OUTPUT_PATH = "results.json"


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    stripped = raw.strip()
    return stripped if stripped else default


def resolve_output_path(raw_path: str) -> Path:
    candidate = Path(raw_path)
    if candidate.is_absolute():
        return candidate
    return (Path.cwd() / candidate).resolve()


def load_trademark_search_settings() -> TrademarkSearchSettings:
    """
    Build settings from environment variables and optional `.env` files.
    """

    load_env_files()
    return TrademarkSearchSettings(
        base_url=_get_str_env("TRADEMARK_SEARCH_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        user_agent=_get_str_env("TRADEMARK_SEARCH_USER_AGENT", DEFAULT_USER_AGENT),
        timeout_seconds=max(
            1.0,
            _get_float_env("TRADEMARK_SEARCH_TIMEOUT_SECONDS", 30.0),
        ),
        max_redirects=max(
            0,
            _get_int_env("TRADEMARK_SEARCH_MAX_REDIRECTS", 5),
        ),
        page_workers=max(
            1,
            _get_int_env("TRADEMARK_SEARCH_PAGE_WORKERS", 1),
        ),
        output_path=str(
            resolve_output_path(
                _get_str_env("TRADEMARK_SEARCH_OUTPUT_PATH", DEFAULT_OUTPUT_PATH)
            )
        ),
    )


@lru_cache(maxsize=1)
def get_trademark_search_settings() -> TrademarkSearchSettings:
    """
    Return cached search settings.
    """

    return load_trademark_search_settings()
