# src/ragvault/stores/base.py
"""Abstract base class for chunk storage."""

import asyncio
import threading
from abc import ABC, abstractmethod

from ragvault.models import Chunk


class ChunkStore(ABC):
    """Keyed storage of chunks, readable only by full scan.

    Every public operation initializes the store on first use, so callers
    racing to touch the store first never see a "not initialized" error.
    Subclasses implement the underscore primitives; each one must be
    atomic on its own, but no isolation is promised across calls (a scan
    running alongside an add may or may not include the new chunk).
    """

    def __init__(self) -> None:
        self._init_lock = threading.Lock()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Open or create the underlying storage. No-op when already open.

        Raises:
            StorageUnavailable: If the storage medium cannot be opened.
        """
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            self._open()
            self._initialized = True

    def add(self, chunk: Chunk) -> None:
        """Insert a new chunk.

        A successful return means the chunk is visible to later reads.

        Raises:
            DuplicateKey: If a chunk with the same id is already stored.
        """
        self.initialize()
        self._add(chunk)

    def count(self) -> int:
        """Return the number of stored chunks."""
        self.initialize()
        return self._count()

    def clear(self) -> None:
        """Remove all chunks atomically. Clearing an empty store is a no-op."""
        self.initialize()
        self._clear()

    def scan_all(self) -> list[Chunk]:
        """Return every stored chunk. Order is unspecified."""
        self.initialize()
        return self._scan_all()

    async def ainitialize(self) -> None:
        """Async version of initialize(); runs in a worker thread."""
        await asyncio.to_thread(self.initialize)

    async def aadd(self, chunk: Chunk) -> None:
        """Async version of add(); runs in a worker thread."""
        await asyncio.to_thread(self.add, chunk)

    async def acount(self) -> int:
        """Async version of count(); runs in a worker thread."""
        return await asyncio.to_thread(self.count)

    async def aclear(self) -> None:
        """Async version of clear(); runs in a worker thread."""
        await asyncio.to_thread(self.clear)

    async def ascan_all(self) -> list[Chunk]:
        """Async version of scan_all(); runs in a worker thread."""
        return await asyncio.to_thread(self.scan_all)

    @abstractmethod
    def _open(self) -> None:
        """Open or create the backing storage."""
        ...

    @abstractmethod
    def _add(self, chunk: Chunk) -> None:
        """Insert a chunk, raising DuplicateKey on id collision."""
        ...

    @abstractmethod
    def _count(self) -> int:
        """Count stored chunks."""
        ...

    @abstractmethod
    def _clear(self) -> None:
        """Delete every stored chunk in one atomic step."""
        ...

    @abstractmethod
    def _scan_all(self) -> list[Chunk]:
        """Read every stored chunk."""
        ...
