"""Settings loaded from environment variables.

All variables share the ``TASKLIST_`` prefix. Nothing is required: with no
environment set the server runs purely in memory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # JSON snapshot file; None keeps tasks in memory only
    data_file: Path | None
    log_level: str
    list_limit: int


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        data_file=_env_path(_k("DATA_FILE")),
        log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
        list_limit=max(1, min(500, _env_int(_k("LIST_LIMIT"), 50))),
    )
