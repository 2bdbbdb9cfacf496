# src/ragvault/stores/sqlite_chunk.py
"""SQLite chunk store implementation."""

import json
import sqlite3
from pathlib import Path

from ragvault.exceptions import DuplicateKey, StorageUnavailable
from ragvault.logging import get_logger
from ragvault.models import Chunk
from ragvault.stores.base import ChunkStore

logger = get_logger(__name__)


class SQLiteChunkStore(ChunkStore):
    """SQLite-based chunk store.

    Each operation uses its own connection and a single transaction, so
    add, clear and scan_all are individually atomic and can be called
    from different threads (e.g. an ingestion task and a query task).
    """

    def __init__(self, db_path: str, timeout: float = 30.0) -> None:
        """Create the store. The database is opened lazily on first use.

        Args:
            db_path: Path to the SQLite database file.
            timeout: Seconds to wait on a locked database before failing.
        """
        super().__init__()
        self.db_path = db_path
        self.timeout = timeout

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path, timeout=self.timeout)

    def _open(self) -> None:
        """Create the database file and table if they don't exist."""
        try:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            with self._connect() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS chunks (
                        seq INTEGER PRIMARY KEY AUTOINCREMENT,
                        id TEXT NOT NULL UNIQUE,
                        text TEXT NOT NULL,
                        embedding TEXT NOT NULL,
                        metadata TEXT NOT NULL
                    )
                """)
                conn.commit()
        except (OSError, sqlite3.Error) as err:
            raise StorageUnavailable(f"Cannot open chunk store at {self.db_path}: {err}") from err
        logger.info("Opened chunk store at %s", self.db_path)

    def _add(self, chunk: Chunk) -> None:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO chunks (id, text, embedding, metadata)
                    VALUES (?, ?, ?, ?)
                    """,
                    (
                        chunk.id,
                        chunk.text,
                        json.dumps(chunk.embedding),
                        json.dumps(chunk.metadata),
                    ),
                )
                conn.commit()
        except sqlite3.IntegrityError as err:
            raise DuplicateKey(chunk.id) from err
        logger.debug("Added chunk %s", chunk.id)

    def _count(self) -> int:
        with self._connect() as conn:
            cursor = conn.execute("SELECT COUNT(id) FROM chunks")
            count = cursor.fetchone()
            return count[0] if count else 0

    def _clear(self) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM chunks")
            conn.commit()
        logger.info("Cleared chunk store at %s", self.db_path)

    def _scan_all(self) -> list[Chunk]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT id, text, embedding, metadata FROM chunks ORDER BY seq")
            return [
                Chunk(
                    id=row[0],
                    text=row[1],
                    embedding=json.loads(row[2]),
                    metadata=json.loads(row[3]),
                )
                for row in cursor.fetchall()
            ]
