"""
Environment-backed settings.

Each value is read on call so tests can tweak the environment with
`monkeypatch.setenv` without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGIN = "http://localhost:5173"
DEFAULT_OPENWEATHER_BASE_URL = "https://api.openweathermap.org"
DEFAULT_UNSPLASH_BASE_URL = "https://api.unsplash.com"


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def database_url() -> str:
    return _env_str("DATABASE_URL")


def db_pool_min_size() -> int:
    return _env_int("DB_POOL_MIN_SIZE", 1)


def db_pool_max_size() -> int:
    return _env_int("DB_POOL_MAX_SIZE", 10)


def db_command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def db_apply_schema() -> bool:
    return _env_bool("DB_APPLY_SCHEMA", False)


def cors_origin() -> str:
    return _env_str("CORS_ORIGIN", DEFAULT_CORS_ORIGIN)


def openweather_api_key() -> str:
    return _env_str("OPENWEATHER_API_KEY")


def openweather_base_url() -> str:
    return _env_str("OPENWEATHER_BASE_URL", DEFAULT_OPENWEATHER_BASE_URL)


def unsplash_access_key() -> str:
    return _env_str("UNSPLASH_ACCESS_KEY")


def unsplash_base_url() -> str:
    return _env_str("UNSPLASH_BASE_URL", DEFAULT_UNSPLASH_BASE_URL)


def external_timeout_s() -> float:
    return _env_float("EXTERNAL_TIMEOUT_S", 10.0)


def photo_enrichment_enabled() -> bool:
    # Needs both the switch and a key; without a key every lookup would fail.
    return _env_bool("PHOTO_ENRICHMENT", True) and bool(unsplash_access_key())


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO")
