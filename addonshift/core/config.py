"""Core engine configuration.

Core config is side-effect free: it does not load dotenv files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_UPLOAD_SIZE = 8 * 1024 * 1024


@dataclass(frozen=True)
class CoreConfig:
    max_upload_size: int = DEFAULT_MAX_UPLOAD_SIZE


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError:
        return default


def config_from_env() -> CoreConfig:
    return CoreConfig(
        max_upload_size=_env_int("ADDONS_MAX_UPLOAD_SIZE", DEFAULT_MAX_UPLOAD_SIZE),
    )


__all__ = ["DEFAULT_MAX_UPLOAD_SIZE", "CoreConfig", "config_from_env"]
