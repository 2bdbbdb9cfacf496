"""Storage abstractions for ragvault."""

from ragvault.stores.base import ChunkStore
from ragvault.stores.memory import InMemoryChunkStore
from ragvault.stores.sqlite_chunk import SQLiteChunkStore

__all__ = [
    "ChunkStore",
    "InMemoryChunkStore",
    "SQLiteChunkStore",
]
