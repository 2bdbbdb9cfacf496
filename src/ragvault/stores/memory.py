# src/ragvault/stores/memory.py
"""In-memory chunk store implementation."""

import threading

from ragvault.exceptions import DuplicateKey
from ragvault.logging import get_logger
from ragvault.models import Chunk
from ragvault.stores.base import ChunkStore

logger = get_logger(__name__)


class InMemoryChunkStore(ChunkStore):
    """Dict-backed chunk store. Contents live for the lifetime of the object."""

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()
        self._chunks: dict[str, Chunk] = {}

    def _open(self) -> None:
        logger.debug("Opened in-memory chunk store")

    def _add(self, chunk: Chunk) -> None:
        with self._lock:
            if chunk.id in self._chunks:
                raise DuplicateKey(chunk.id)
            self._chunks[chunk.id] = chunk
        logger.debug("Added chunk %s", chunk.id)

    def _count(self) -> int:
        with self._lock:
            return len(self._chunks)

    def _clear(self) -> None:
        with self._lock:
            self._chunks = {}
        logger.info("Cleared in-memory chunk store")

    def _scan_all(self) -> list[Chunk]:
        with self._lock:
            return list(self._chunks.values())
