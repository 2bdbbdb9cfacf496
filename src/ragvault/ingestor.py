"""Ingestion pipeline for ragvault."""

import asyncio
from collections.abc import Callable, Sequence

from ragvault.embedder import Embedder
from ragvault.logging import get_logger
from ragvault.models import Chunk, ParsedSegment
from ragvault.stores import ChunkStore

logger = get_logger(__name__)

ProgressCallback = Callable[[str, int, int, str], None]
"""Callback for ingestion progress updates.

Args:
    event: Event type, "embedding" or "storing"
    current: Current progress count (0 to total)
    total: Total items to process
    message: Human-readable status message

Example:
    def on_progress(event: str, current: int, total: int, message: str) -> None:
        print(f"[{event}] {current}/{total}: {message}")
"""


def chunk_id_for(source_name: str, position: int) -> str:
    """Build the id for the chunk at a position within a source."""
    return f"{source_name}-{position}"


class Ingestor:
    """Embeds parsed segments and stores them as chunks.

    Pipeline:
    1. Embed segment texts in batches
    2. Add one Chunk per segment to the ChunkStore

    Chunk ids follow ``<source_name>-<position>``, so re-ingesting the same
    source without clearing the store raises DuplicateKey.
    """

    def __init__(
        self,
        chunk_store: ChunkStore,
        embedder: Embedder,
        batch_size: int = 32,
    ) -> None:
        """Initialize the ingestor.

        Args:
            chunk_store: Store receiving the chunks
            embedder: Component to embed segment text
            batch_size: Segments embedded per embedder call
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.chunk_store = chunk_store
        self.embedder = embedder
        self.batch_size = batch_size

    def ingest_segments(
        self,
        source_name: str,
        segments: Sequence[ParsedSegment],
        on_progress: ProgressCallback | None = None,
    ) -> int:
        """Embed and store segments from one source.

        Args:
            source_name: Name of the source document (e.g. file name)
            segments: Parsed segments in document order
            on_progress: Optional callback for progress updates

        Returns:
            Number of chunks added

        Raises:
            DuplicateKey: If a chunk id for this source is already stored.
                Chunks added before the collision stay in the store.
        """

        def progress(event: str, current: int, total: int, message: str) -> None:
            if on_progress:
                on_progress(event, current, total, message)

        segments = [s for s in segments if s.text.strip()]
        total = len(segments)
        if total == 0:
            logger.info("No content to ingest from %s", source_name)
            return 0

        embeddings: list[list[float]] = []
        progress("embedding", 0, total, f"Embedding {total} chunks...")
        for start in range(0, total, self.batch_size):
            batch = segments[start : start + self.batch_size]
            embeddings.extend(self.embedder.embed_texts([s.text for s in batch]))
            done = min(start + self.batch_size, total)
            progress("embedding", done, total, f"Embedded {done}/{total} chunks")

        progress("storing", 0, total, f"Storing {total} chunks...")
        for position, (segment, embedding) in enumerate(zip(segments, embeddings, strict=True)):
            self.chunk_store.add(
                Chunk(
                    id=chunk_id_for(source_name, position),
                    text=segment.text,
                    embedding=embedding,
                    metadata={
                        "filename": source_name,
                        "chunk_index": segment.chunk_index,
                        "page_number": segment.page_number,
                    },
                )
            )
            progress("storing", position + 1, total, f"Stored {position + 1}/{total} chunks")

        logger.info("Ingested %d chunks from %s", total, source_name)
        return total

    async def aingest_segments(
        self,
        source_name: str,
        segments: Sequence[ParsedSegment],
        on_progress: ProgressCallback | None = None,
    ) -> int:
        """Async version of ingest_segments(); runs in a worker thread."""
        return await asyncio.to_thread(self.ingest_segments, source_name, segments, on_progress)
