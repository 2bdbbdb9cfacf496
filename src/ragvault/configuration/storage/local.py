"""Local storage configurations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ragvault.stores import ChunkStore


@dataclass(frozen=True)
class LocalStorage:
    """Local filesystem storage using SQLite.

    Chunks are persisted to ``<data_dir>/chunks.db``. The directory is
    created when the store is first opened.

    Args:
        data_dir: Base directory for storage files.

    Example:
        storage = LocalStorage("./my_data")
    """

    data_dir: str

    def build_chunk_store(self) -> ChunkStore:
        from ragvault.stores import SQLiteChunkStore

        return SQLiteChunkStore(os.path.join(self.data_dir, "chunks.db"))


@dataclass(frozen=True)
class MemoryStorage:
    """Process-local storage; contents are lost when the session ends."""

    def build_chunk_store(self) -> ChunkStore:
        from ragvault.stores import InMemoryChunkStore

        return InMemoryChunkStore()
