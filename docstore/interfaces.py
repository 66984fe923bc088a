from __future__ import annotations

from typing import Any

from .json_store import Document


class Storage:
    """
    Minimal storage contract: a single two-level JSON-like document that is
    read and replaced as a whole.
    """

    def read(self) -> Document | None:
        """Return the stored document, or None if nothing has been stored."""
        raise NotImplementedError

    def write(self, document: Document) -> None:
        """Replace the stored document."""
        raise NotImplementedError

    def close(self) -> None:
        """Release held resources. Safe to call more than once."""
        return None

    def __enter__(self) -> "Storage":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
