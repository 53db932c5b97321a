"""
SQLite World State for MediChain.

This module keeps the world state in a single SQLite table so that records
survive between invocations of the command-line runtime. Every point operation
uses its own short-lived connection; a range scan keeps a dedicated connection
open until its iterator is closed.
"""

import sqlite3
import logging
import time
from contextlib import contextmanager
from typing import Iterator

from medichain.ledger.stub import LedgerError, StateIterator
from medichain.storage.base import WorldStateBackend

logger = logging.getLogger(__name__)


class SQLiteStorage(WorldStateBackend):
    """
    SQLite-backed world state.

    Keys are compared with SQLite's BINARY collation, which orders UTF-8 text
    the same way Python orders str, so scans match the in-memory backend.
    """

    def __init__(self, database_path: str = "medichain.db"):
        """
        Initialize the SQLite world state.

        Args:
            database_path: Path to the SQLite database file
        """
        self.database_path = database_path

        # Security check for Path Traversal (CWE-22)
        if ".." in self.database_path:
            raise ValueError(f"Security: Invalid database path '{self.database_path}'. Path traversal detected.")
        # Scans open their own connection, so a private in-memory database would be invisible to them
        if self.database_path == ":memory:":
            raise ValueError("SQLiteStorage requires a database file path")

        self._initialize_database()
        logger.info(f"Opened SQLite world state at {self.database_path}")

    def _initialize_database(self) -> None:
        """Initialize the database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS world_state (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL,
                    updated_at REAL NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get a database connection, mapping driver errors to LedgerError."""
        try:
            conn = sqlite3.connect(self.database_path)
        except sqlite3.Error as e:
            logger.error(f"Failed to open {self.database_path}: {e}")
            raise LedgerError(f"Cannot open world state database: {e}") from e
        try:
            yield conn
        except sqlite3.Error as e:
            conn.rollback()
            raise LedgerError(str(e)) from e
        finally:
            conn.close()

    def get(self, key: str) -> bytes | None:
        with self._get_connection() as conn:
            row = conn.execute("SELECT value FROM world_state WHERE key = ?", (key,)).fetchone()
        return bytes(row[0]) if row else None

    def put(self, key: str, value: bytes) -> None:
        with self._get_connection() as conn:
            conn.execute("""
                INSERT INTO world_state (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """, (key, sqlite3.Binary(value), time.time()))
            conn.commit()

    def range(self, start_key: str, end_key: str) -> StateIterator:
        """Lazily scan [start_key, end_key) in key order"""
        query = "SELECT key, value FROM world_state"
        clauses, params = [], []
        if start_key:
            clauses.append("key >= ?")
            params.append(start_key)
        if end_key:
            clauses.append("key < ?")
            params.append(end_key)
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY key"

        try:
            conn = sqlite3.connect(self.database_path)
        except sqlite3.Error as e:
            raise LedgerError(f"Failed to start range scan: {e}") from e
        try:
            cursor = conn.execute(query, params)
        except sqlite3.Error as e:
            conn.close()
            raise LedgerError(f"Failed to start range scan: {e}") from e

        return StateIterator(self._rows(cursor), on_close=conn.close)

    @staticmethod
    def _rows(cursor: sqlite3.Cursor) -> Iterator[tuple[str, bytes]]:
        while True:
            try:
                row = cursor.fetchone()
            except sqlite3.Error as e:
                raise LedgerError(f"Range scan failed: {e}") from e
            if row is None:
                return
            yield row[0], bytes(row[1])

    def size(self) -> int:
        with self._get_connection() as conn:
            return conn.execute("SELECT COUNT(*) FROM world_state").fetchone()[0]
