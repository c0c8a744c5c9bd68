"""
Environment-driven settings.

Everything is read lazily so tests can set variables before the app starts.
"""

from __future__ import annotations

import os

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def host() -> str:
    return _env_str("HOST", DEFAULT_HOST)


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def pool_min_size() -> int:
    return _env_int("DB_POOL_MIN_SIZE", 1)


def pool_max_size() -> int:
    return _env_int("DB_POOL_MAX_SIZE", 5)


def command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)
