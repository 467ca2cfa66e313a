"""Shared runtime settings for server/CLI adapters.

This module owns environment-backed application settings. It is intentionally
separate from ``addonshift.core.config`` because core config stays minimal and
framework-agnostic.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from .core.config import DEFAULT_MAX_UPLOAD_SIZE


@dataclass(frozen=True)
class Settings:
    app_name: str
    debug: bool
    log_verbosity: str
    upload_dir: str
    upload_url: str
    max_upload_size: int
    allowed_extensions: tuple[str, ...]
    store_currency: str
    cors_allow_origins: tuple[str, ...]


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError:
        return default


def _env_list(name: str, default: str) -> tuple[str, ...]:
    return tuple(
        item.strip()
        for item in os.getenv(name, default).split(",")
        if item.strip()
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = _env_list("CORS_ALLOW_ORIGINS", "*")
    return Settings(
        app_name=os.getenv("APP_NAME", "AddonShift"),
        debug=_env_bool("DEBUG", default=False),
        log_verbosity=_env_choice(
            "LOG_VERBOSITY",
            default="medium",
            allowed={"low", "medium", "high", "extrahigh"},
        ),
        upload_dir=os.getenv("ADDONS_UPLOAD_DIR", "uploads"),
        upload_url=os.getenv("ADDONS_UPLOAD_URL", "/uploads").rstrip("/"),
        max_upload_size=_env_int("ADDONS_MAX_UPLOAD_SIZE", DEFAULT_MAX_UPLOAD_SIZE),
        allowed_extensions=tuple(ext.lower().lstrip(".") for ext in _env_list("ADDONS_ALLOWED_EXTENSIONS", "")),
        store_currency=os.getenv("STORE_CURRENCY", "USD").strip().upper() or "USD",
        cors_allow_origins=origins or ("*",),
    )


__all__ = ["Settings", "get_settings"]
