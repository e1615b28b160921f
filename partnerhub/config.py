"""
Runtime configuration, read once from environment variables.

    PARTNERHUB_STORAGE_BACKEND   file | memory          (default: file)
    PARTNERHUB_DATA_DIR          where the file backend writes (default: ./data)
    PARTNERHUB_STORAGE_KEY       document key inside the backend
    PARTNERHUB_SEED_ON_START     seed the sample dataset on startup (default: true)
    PARTNERHUB_LOG_LEVEL         root log level (default: INFO)
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_STORAGE_KEY = "partnerhub_prototype_db_v1"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    storage_backend: str
    data_dir: Path
    storage_key: str
    seed_on_start: bool
    log_level: str


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_settings() -> Settings:
    backend = os.getenv("PARTNERHUB_STORAGE_BACKEND", "file").strip().lower()
    if backend not in ("file", "memory"):
        raise ValueError(
            f"PARTNERHUB_STORAGE_BACKEND must be 'file' or 'memory', got '{backend}'"
        )

    return Settings(
        storage_backend=backend,
        data_dir=Path(os.getenv("PARTNERHUB_DATA_DIR", "./data")),
        storage_key=os.getenv("PARTNERHUB_STORAGE_KEY", DEFAULT_STORAGE_KEY),
        seed_on_start=_flag("PARTNERHUB_SEED_ON_START", True),
        log_level=os.getenv("PARTNERHUB_LOG_LEVEL", "INFO").upper(),
    )
