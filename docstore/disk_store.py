from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import IO, Any

from .errors import DocumentParseError, InvalidAccessModeError, StorageIOError
from .interfaces import Storage
from .json_store import Document, dump_document, parse_document, validate_document
from .paths import touch

logger = logging.getLogger(__name__)


class AccessMode(str, Enum):
    READ_ONLY = "r"
    READ_WRITE = "r+"
    READ_ONLY_BINARY = "rb"
    READ_WRITE_BINARY = "rb+"

    @classmethod
    def parse(cls, mode: "str | AccessMode") -> "AccessMode":
        try:
            return cls(mode)
        except ValueError:
            raise InvalidAccessModeError(str(mode)) from None

    @property
    def writable(self) -> bool:
        return "+" in self.value

    @property
    def binary(self) -> bool:
        return "b" in self.value


class FileStorage(Storage):
    """
    Stores a single JSON document in a file at a fixed path.

    - An empty file reads as None (no document yet).
    - Writes replace the whole file and reopen the handle afterwards, so the
      next read starts from a clean stream.
    - Writes truncate after the new content; a shorter document never leaves
      bytes of the previous one behind.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        create_dirs: bool = False,
        access_mode: str | AccessMode = AccessMode.READ_WRITE,
        *,
        encoding: str = "utf-8",
        indent: int | None = 4,
        **json_kwargs: Any,
    ):
        self._handle: IO[Any] | None = None
        # Validate before anything touches the filesystem.
        self._mode = AccessMode.parse(access_mode)
        self._path = Path(path)
        self._encoding = encoding
        self._indent = indent
        self._json_kwargs = json_kwargs

        if self._mode.writable:
            touch(self._path, create_dirs)

        self._open()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def access_mode(self) -> AccessMode:
        return self._mode

    @property
    def closed(self) -> bool:
        return self._handle is None

    def read(self) -> Document | None:
        handle = self._require_handle()
        try:
            handle.seek(0, os.SEEK_END)
            size = handle.tell()
            if not size:
                logger.debug("Read %s: empty file", self._path)
                return None
            handle.seek(0)
            raw = handle.read()
        except OSError as e:
            raise StorageIOError(f"Failed to read data from file: {self._path}") from e
        except UnicodeDecodeError as e:
            raise DocumentParseError(f"Stored content is not valid {self._encoding}: {e}") from e

        document = parse_document(raw, encoding=self._encoding)
        logger.debug("Read %s: %d sections", self._path, len(document))
        return document

    def write(self, document: Document) -> None:
        handle = self._require_handle()
        if not self._mode.writable:
            raise StorageIOError(
                f"Cannot write to {self._path}: access mode is {self._mode.value!r}"
            )

        validate_document(document)
        serialized: str | bytes = dump_document(document, indent=self._indent, **self._json_kwargs)
        if self._mode.binary:
            serialized = serialized.encode(self._encoding)

        try:
            handle.seek(0)
            handle.write(serialized)
            handle.truncate()
            handle.flush()
            os.fsync(handle.fileno())
        except OSError as e:
            raise StorageIOError(f"Failed to write data to file: {self._path}") from e
        logger.debug("Wrote %s: %d sections", self._path, len(document))

        # Reopen so cursor and buffered state start fresh for the next read.
        self.close()
        self._open()

    def close(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None and not handle.closed:
            handle.close()
            logger.debug("Closed %s", self._path)

    def __del__(self) -> None:
        if getattr(self, "_handle", None) is not None:
            self.close()

    def _open(self) -> None:
        try:
            if self._mode.binary:
                self._handle = open(self._path, self._mode.value)
            else:
                self._handle = open(self._path, self._mode.value, encoding=self._encoding)
        except OSError as e:
            raise StorageIOError(f"Could not open file: {self._path}") from e
        logger.debug("Opened %s with mode %r", self._path, self._mode.value)

    def _require_handle(self) -> IO[Any]:
        if self._handle is None:
            raise StorageIOError(f"Storage for {self._path} is closed")
        return self._handle
