from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .disk_store import FileStorage
from .interfaces import Storage
from .memory_store import MemoryStorage

if TYPE_CHECKING:
    from settings import Settings

logger = logging.getLogger(__name__)


def open_storage(settings: Settings) -> Storage:
    """
    Build the backend named by `settings.storage_backend`.

    Any object carrying the `Settings` attributes works; the package does not
    import the top-level settings module at runtime.
    """
    backend = settings.storage_backend
    if backend == "memory":
        logger.info("Using in-memory storage")
        return MemoryStorage()
    if backend == "file":
        logger.info("Using file storage at %s (mode %s)", settings.storage_path, settings.access_mode)
        return FileStorage(
            settings.storage_path,
            create_dirs=settings.create_dirs,
            access_mode=settings.access_mode,
            encoding=settings.encoding,
            indent=settings.indent,
        )
    raise ValueError(f"unknown storage backend: {backend!r}")
