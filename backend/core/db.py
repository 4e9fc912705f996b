"""Gestion basique des connexions SQLite."""
from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import ContextManager

logger = logging.getLogger(__name__)

_db_lock = RLock()

KV_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


def _connect(path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def _managed_connection(path: Path) -> Iterator[sqlite3.Connection]:
    """Yield a SQLite connection that is always closed on exit."""

    conn = _connect(path)
    try:
        yield conn
        conn.commit()
    except Exception:
        if conn.in_transaction:
            conn.rollback()
        raise
    finally:
        conn.close()


def get_connection(path: Path) -> ContextManager[sqlite3.Connection]:
    return _managed_connection(path)


def init_database(path: Path) -> None:
    """Crée le fichier et la table clé/valeur si nécessaire."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with _db_lock:
        with get_connection(path) as conn:
            conn.executescript(KV_SCHEMA)
    logger.info("[DB] kv_store ready at %s", path.resolve())
