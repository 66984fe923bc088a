from __future__ import annotations

import pytest

from docstore.errors import InvalidDocumentError
from docstore.interfaces import Storage
from docstore.memory_store import MemoryStorage


def test_fresh_memory_storage_reads_as_none():
    assert MemoryStorage().read() is None


def test_roundtrip(sample_document):
    storage = MemoryStorage()
    storage.write(sample_document)
    assert storage.read() == sample_document


def test_empty_document_is_not_absent():
    storage = MemoryStorage()
    storage.write({})
    assert storage.read() == {}


def test_write_replaces_document():
    storage = MemoryStorage()
    storage.write({"a": {"x": 1}})
    storage.write({"b": {"y": 2}})
    assert storage.read() == {"b": {"y": 2}}


def test_no_aliasing_with_caller_data(sample_document):
    storage = MemoryStorage()
    storage.write(sample_document)

    sample_document["key1"]["subkey1"] = "mutated"
    assert storage.read()["key1"]["subkey1"] == "value1"

    returned = storage.read()
    returned["key2"]["subkey1"] = 0
    returned["new"] = {}
    assert storage.read()["key2"]["subkey1"] == 123
    assert "new" not in storage.read()


def test_close_is_noop(sample_document):
    storage = MemoryStorage()
    storage.write(sample_document)
    storage.close()
    storage.close()
    assert storage.read() == sample_document


def test_context_manager_returns_storage():
    with MemoryStorage() as storage:
        assert isinstance(storage, Storage)
        storage.write({"a": {}})
        assert storage.read() == {"a": {}}


@pytest.mark.parametrize(
    "document",
    [
        {"a": 1},
        {"a": None},
        {"a": {1: "x"}},
        {1: {"k": "v"}},
    ],
)
def test_write_rejects_documents_that_are_not_sections(sample_document, document):
    storage = MemoryStorage()
    storage.write(sample_document)
    with pytest.raises(InvalidDocumentError):
        storage.write(document)
    assert storage.read() == sample_document


@pytest.mark.parametrize("document", [{"a": 1}, {"a": {1: "x"}}])
def test_backends_reject_the_same_documents(db_path, document):
    from docstore.disk_store import FileStorage

    with FileStorage(db_path) as file_storage:
        for storage in (file_storage, MemoryStorage()):
            with pytest.raises(InvalidDocumentError):
                storage.write(document)
            assert storage.read() is None
