from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Sequence

from dotenv import load_dotenv

from docstore import DocStoreError, Document, MemoryStorage, open_storage
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENT: Document = {
    "key1": {"subkey1": "value1", "subkey2": "value2"},
    "key2": {"subkey1": 123, "subkey2": 456},
}


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docstore-demo",
        description="Write a sample document to a storage backend and read it back.",
    )
    parser.add_argument("--backend", choices=["file", "memory"], help="Override DOCSTORE_BACKEND")
    parser.add_argument("--path", help="Override DOCSTORE_PATH")
    parser.add_argument("--access-mode", help="Override DOCSTORE_ACCESS_MODE")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    overrides = {}
    if args.backend:
        overrides["storage_backend"] = args.backend
    if args.path:
        overrides["storage_path"] = args.path
    if args.access_mode:
        overrides["access_mode"] = args.access_mode
    return dataclasses.replace(settings, **overrides) if overrides else settings


def _dump(label: str, document: Document | None) -> None:
    if document is None:
        print(f"{label}: <empty>")
        return
    print(f"{label}: {json.dumps(document, indent=4)}")


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    settings = build_settings(args)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    memory_storage = MemoryStorage()
    try:
        with open_storage(settings) as storage:
            storage.write(SAMPLE_DOCUMENT)
            memory_storage.write(SAMPLE_DOCUMENT)

            _dump(f"{type(storage).__name__} Data", storage.read())
            _dump("MemoryStorage Data", memory_storage.read())
    except (DocStoreError, ValueError) as e:
        logger.debug("Demo failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        memory_storage.close()

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
