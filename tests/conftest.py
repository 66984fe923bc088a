from __future__ import annotations

from pathlib import Path
import sys
from typing import Any


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import docstore...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


ENV_VARS = (
    "DOCSTORE_BACKEND",
    "DOCSTORE_PATH",
    "DOCSTORE_CREATE_DIRS",
    "DOCSTORE_ACCESS_MODE",
    "DOCSTORE_ENCODING",
    "DOCSTORE_INDENT",
    "DOCSTORE_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """
    Strip DOCSTORE_* variables so settings always start from their defaults.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "db.json"


@pytest.fixture
def sample_document() -> dict[str, dict[str, Any]]:
    return {
        "key1": {"subkey1": "value1", "subkey2": "value2"},
        "key2": {"subkey1": 123, "subkey2": 456},
    }
