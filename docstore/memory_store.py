from __future__ import annotations

import copy

from .interfaces import Storage
from .json_store import Document, validate_document


class MemoryStorage(Storage):
    """
    Keeps the last written document in process memory.

    Documents are deep-copied on the way in and out, so callers never share
    mutable state with the store.
    """

    def __init__(self) -> None:
        self._memory: Document | None = None

    def read(self) -> Document | None:
        if self._memory is None:
            return None
        return copy.deepcopy(self._memory)

    def write(self, document: Document) -> None:
        validate_document(document)
        self._memory = copy.deepcopy(document)
