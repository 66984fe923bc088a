from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import StorageIOError

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def touch(path: str | os.PathLike[str], create_dirs: bool = False) -> None:
    """
    Make sure the file at `path` exists without truncating it.

    With `create_dirs`, missing parent directories are created first.
    """
    if not os.fspath(path):
        raise ValueError("path must not be empty")

    target = Path(path)
    try:
        if create_dirs and not target.parent.exists():
            logger.debug("Creating directory %s", target.parent)
            ensure_dir(target.parent)

        # Append mode creates the file when missing and leaves content alone.
        with open(target, "a"):
            pass
    except OSError as e:
        raise StorageIOError(f"Failed to create or open the file: {target}") from e
