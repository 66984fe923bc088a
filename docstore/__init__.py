from __future__ import annotations

from .disk_store import AccessMode, FileStorage
from .errors import (
    DocStoreError,
    DocumentParseError,
    InvalidAccessModeError,
    InvalidDocumentError,
    StorageIOError,
)
from .factory import open_storage
from .interfaces import Storage
from .json_store import Document
from .memory_store import MemoryStorage
from .paths import touch

__all__ = [
    "AccessMode",
    "Document",
    "DocStoreError",
    "DocumentParseError",
    "FileStorage",
    "InvalidAccessModeError",
    "InvalidDocumentError",
    "MemoryStorage",
    "Storage",
    "StorageIOError",
    "open_storage",
    "touch",
]
