"""Key/value storage backings for the record store."""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from threading import RLock
from typing import Protocol

from backend.core import db
from backend.core.config import (
    STORAGE_FILE,
    STORAGE_MEMORY,
    STORAGE_SQLITE,
    Settings,
)

logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    def read(self, key: str) -> str | None: ...

    def write(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> bool: ...

    def list_keys(self) -> list[str]: ...


class MemoryStorage:
    """Process-local storage, lost on exit."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self._lock = RLock()

    def read(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def list_keys(self) -> list[str]:
        with self._lock:
            return list(self._data)


class JsonFileStorage:
    """One ``<key>.json`` file per key inside ``directory``.

    Writes go to a temporary file in the same directory which then replaces the
    target, so readers never observe a half-written payload.
    """

    suffix = ".json"

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}{self.suffix}"

    def read(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        path = self._path_for(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> bool:
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True

    def list_keys(self) -> list[str]:
        return sorted(path.stem for path in self.directory.glob(f"*{self.suffix}"))


class SqliteStorage:
    """Key/value rows in the ``kv_store`` table of a SQLite file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        db.init_database(path)

    def read(self, key: str) -> str | None:
        with db.get_connection(self.path) as conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        return row["value"] if row else None

    def write(self, key: str, value: str) -> None:
        with db.get_connection(self.path) as conn:
            conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )

    def delete(self, key: str) -> bool:
        with db.get_connection(self.path) as conn:
            cur = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            return cur.rowcount > 0

    def list_keys(self) -> list[str]:
        with db.get_connection(self.path) as conn:
            rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        return [row["key"] for row in rows]


def build_storage(config: Settings) -> StorageBackend:
    if config.STORAGE == STORAGE_MEMORY:
        logger.info("[STORAGE] using in-memory storage")
        return MemoryStorage()
    if config.STORAGE == STORAGE_FILE:
        logger.info("[STORAGE] using JSON files in %s", config.DATA_DIR)
        return JsonFileStorage(config.DATA_DIR)
    if config.STORAGE == STORAGE_SQLITE:
        logger.info("[STORAGE] using SQLite database %s", config.sqlite_path)
        return SqliteStorage(config.sqlite_path)
    raise ValueError(f"Unknown storage backend: {config.STORAGE}")
