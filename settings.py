from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class Settings:
    # Backend selection: "file" or "memory"
    storage_backend: str

    # File backend
    storage_path: str
    create_dirs: bool
    access_mode: str
    encoding: str
    indent: int

    # Driver
    log_level: str


def get_settings() -> Settings:
    storage_backend = os.getenv("DOCSTORE_BACKEND", "file").strip().lower()

    storage_path = os.getenv("DOCSTORE_PATH", "data/db.json")
    create_dirs = _env_bool("DOCSTORE_CREATE_DIRS", True)
    # Validated by FileStorage, not here, so a bad value surfaces as InvalidAccessModeError.
    access_mode = os.getenv("DOCSTORE_ACCESS_MODE", "r+").strip()
    encoding = os.getenv("DOCSTORE_ENCODING", "utf-8")
    indent = _env_int("DOCSTORE_INDENT", 4)

    log_level = os.getenv("DOCSTORE_LOG_LEVEL", "INFO").strip().upper()

    return Settings(
        storage_backend=storage_backend,
        storage_path=storage_path,
        create_dirs=create_dirs,
        access_mode=access_mode,
        encoding=encoding,
        indent=indent,
        log_level=log_level,
    )
