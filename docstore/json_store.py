from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import RootModel, ValidationError

from .errors import DocumentParseError, InvalidDocumentError

# section name -> { key -> JSON value }
Document = dict[str, dict[str, Any]]


class DocumentModel(RootModel[dict[str, dict[str, Any]]]):
    """
    Mirrors the on-disk document shape:
      { "<section>": { "<key>": <any JSON value>, ... }, ... }
    """

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "DocumentModel":
        return cls.model_validate(doc)

    def to_disk_doc(self) -> Document:
        return self.model_dump()


def parse_document(raw: str | bytes, *, encoding: str = "utf-8") -> Document:
    """
    Parse serialized JSON into a Document.

    Raises DocumentParseError for malformed JSON, undecodable bytes, or a value
    that is not an object whose values are objects.
    """
    try:
        if isinstance(raw, bytes):
            raw = raw.decode(encoding)
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DocumentParseError(f"Stored content is not valid JSON: {e}") from e

    try:
        return DocumentModel.from_disk_doc(payload).to_disk_doc()
    except ValidationError as e:
        raise DocumentParseError(
            f"Stored JSON is not a mapping of sections ({e.error_count()} errors)"
        ) from e


def validate_document(document: Any) -> None:
    """
    Check that `document` is a dict of dicts keyed by strings.

    JSON would coerce non-string keys on the way to disk, so they are rejected
    here to keep file and memory backends returning the same thing.
    """
    try:
        DocumentModel.model_validate(document, strict=True)
    except ValidationError as e:
        raise InvalidDocumentError(
            f"Document must map section names to dicts with string keys ({e.error_count()} errors)"
        ) from e


def dump_document(document: Mapping[str, Mapping[str, Any]], *, indent: int | None = 4, **json_kwargs: Any) -> str:
    """Serialize a Document as pretty-printed JSON text."""
    return json.dumps(document, indent=indent, **json_kwargs)
