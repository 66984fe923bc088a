from __future__ import annotations


class DocStoreError(Exception):
    """Base exception for document store errors."""

    pass


class InvalidAccessModeError(DocStoreError, ValueError):
    """Raised when a FileStorage is given an access mode it does not understand."""

    def __init__(self, mode: str):
        super().__init__(f"Invalid access mode: {mode!r}")
        self.mode = mode


class StorageIOError(DocStoreError, OSError):
    """Raised when the backing file cannot be created, opened or written."""

    pass


class DocumentParseError(DocStoreError, ValueError):
    """Raised when stored content is not JSON or not an object of objects."""

    pass


class InvalidDocumentError(DocStoreError, ValueError):
    """Raised when a document handed to `write` is not a mapping of sections."""

    pass
