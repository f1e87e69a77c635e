"""
Environment-backed settings.

Every setting is read on call so tests can monkeypatch the environment.
Bad numeric values fall back to the default instead of failing startup.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
)


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


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def ollama_base_url() -> str:
    return _env_str("OLLAMA_BASE_URL", "http://ollama:11434")


def suggestion_model() -> str:
    return _env_str("SUGGESTION_MODEL", "qwen2.5:3b-instruct")


def suggestion_count() -> int:
    count = _env_int("SUGGESTION_COUNT", 5)
    return count if count > 0 else 5


def suggestion_timeout_s() -> float:
    return _env_float("SUGGESTION_TIMEOUT_S", 120.0)
