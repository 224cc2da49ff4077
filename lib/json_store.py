# =============================================================================
# lib/json_store.py - Flat JSON File Store
# =============================================================================
# This module provides the storage layer: each collection ("users",
# "contracts") is a JSON array in its own file under settings.DATA_DIR.
#
# - One shared store instance (singleton, like a DB client)
# - Read-modify-write happens under a process-wide lock
# - Writes go to a temp file first and are swapped in with os.replace,
#   so a crash never leaves a half-written file behind
# - Missing files are created from seed data on first access
#
# Usage:
#   from lib.json_store import JsonStore
#   store = JsonStore.get_store()
#   with store.transaction("contracts") as contracts:
#       contracts.append({...})
# =============================================================================

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from app.config import settings
from lib.seed_data import DEFAULT_COLLECTIONS
from lib.utils import ApplicationError

# Set up logging for this module
logger = logging.getLogger(__name__)

USERS = "users"
CONTRACTS = "contracts"


class StoreError(ApplicationError):
    """Error reading or writing a JSON collection."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("code", "STORE_ERROR")
        kwargs.setdefault("suggestion", "Check that DATA_DIR exists, is writable and holds valid JSON")
        super().__init__(message, **kwargs)


class JsonStore:
    """
    JSON-file backed collection store.

    Example:
        store = JsonStore.get_store()
        users = store.read(USERS)

        with store.transaction(CONTRACTS) as contracts:
            contracts[0]["status"] = "signed"
    """

    _instance: JsonStore | None = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        data_dir: str | Path,
        seeds: dict[str, list[dict[str, Any]]] | None = None,
    ):
        self.data_dir = Path(data_dir)
        self.seeds = DEFAULT_COLLECTIONS if seeds is None else seeds
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Singleton Access
    # -------------------------------------------------------------------------

    @classmethod
    def get_store(cls) -> JsonStore:
        """
        Get or create the shared store rooted at settings.DATA_DIR.

        Raises:
            StoreError: If the data directory cannot be prepared
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    store = cls(settings.data_path)
                    store.ensure_collections()
                    cls._instance = store
                    logger.info(f"JSON store initialized at {store.data_dir.resolve()}")
        return cls._instance

    @classmethod
    def configure(cls, data_dir: str | Path, seeds: dict[str, list[dict[str, Any]]] | None = None) -> JsonStore:
        """Replace the shared store (used at startup and by tests)."""
        with cls._instance_lock:
            store = cls(data_dir, seeds=seeds)
            store.ensure_collections()
            cls._instance = store
        return store

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def ensure_collections(self) -> None:
        """Create the data directory and any missing collection files."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(
                message=f"Cannot create data directory {self.data_dir}: {e}",
                details={"data_dir": str(self.data_dir)},
            )

        for collection, rows in self.seeds.items():
            path = self.path_for(collection)
            if not path.exists():
                logger.info(f"Seeding {path} with {len(rows)} rows")
                self._write_file(path, rows)

    def is_writable(self) -> bool:
        return self.data_dir.is_dir() and os.access(self.data_dir, os.R_OK | os.W_OK)

    # -------------------------------------------------------------------------
    # Read / Write
    # -------------------------------------------------------------------------

    def read(self, collection: str) -> list[dict[str, Any]]:
        """
        Read every row of a collection.

        A missing file reads as an empty collection.

        Raises:
            StoreError: If the file is unreadable or not a JSON array
        """
        path = self.path_for(collection)
        with self._lock:
            if not path.exists():
                return []
            try:
                with path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error(f"Error reading file {path}: {e}")
                raise StoreError(
                    message="Failed to read data file",
                    details={"path": str(path), "error": str(e)},
                )

        if not isinstance(data, list):
            raise StoreError(
                message="Data file does not contain a JSON array",
                details={"path": str(path)},
            )
        return data

    def write(self, collection: str, rows: list[dict[str, Any]]) -> None:
        """
        Replace a collection's contents.

        Raises:
            StoreError: If the file cannot be written
        """
        with self._lock:
            self._write_file(self.path_for(collection), rows)

    @contextmanager
    def transaction(self, collection: str) -> Iterator[list[dict[str, Any]]]:
        """
        Lock a collection for a read-modify-write cycle.

        The yielded list is written back when the block exits cleanly.
        If the block raises, nothing is written.
        """
        with self._lock:
            rows = self.read(collection)
            yield rows
            self._write_file(self.path_for(collection), rows)

    def _write_file(self, path: Path, rows: list[dict[str, Any]]) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(rows, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing file {path}: {e}")
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise StoreError(
                message="Failed to write data file",
                details={"path": str(path), "error": str(e)},
            )
