"""Settings loaded from ``TODO_CLOCK_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "TODO_CLOCK"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_optional_path(name: str, default: Path) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None:
        return default
    if raw.strip() == "":
        # explicitly empty: no log file
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    log_dir: Optional[Path] = Path("./logs")
    clock_interval: float = 1.0


def load_settings() -> Settings:
    return Settings(
        host=_env(_k("HOST"), "0.0.0.0"),
        port=_env_int(_k("PORT"), 3001),
        log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
        log_dir=_env_optional_path(_k("LOG_DIR"), Path("./logs")),
        clock_interval=_env_float(_k("CLOCK_INTERVAL"), 1.0),
    )
