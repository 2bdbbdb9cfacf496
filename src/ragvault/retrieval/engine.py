# src/ragvault/retrieval/engine.py
"""Ranked top-K search over a chunk store."""

import asyncio
import math
from collections.abc import Sequence

from ragvault.exceptions import InvalidArgument
from ragvault.logging import get_logger
from ragvault.models import SearchResult
from ragvault.retrieval.lexical import BM25Scorer
from ragvault.retrieval.similarity import cosine_similarities
from ragvault.stores import ChunkStore

logger = get_logger(__name__)

# Fixed blend for hybrid search. Callers needing other weights wrap the engine.
SEMANTIC_WEIGHT = 0.7
LEXICAL_WEIGHT = 0.3


def hybrid_score(semantic: float, lexical: float) -> float:
    """Blend cosine and BM25 scores, clamped to [0, 1]."""
    blended = SEMANTIC_WEIGHT * semantic + LEXICAL_WEIGHT * lexical
    return min(max(blended, 0.0), 1.0)


class RetrievalEngine:
    """Scores every stored chunk against a query and returns the top K.

    The engine keeps no state between calls; corpus statistics are
    rebuilt from a fresh scan on every search.
    """

    def __init__(self, chunk_store: ChunkStore) -> None:
        self.chunk_store = chunk_store

    def search(
        self,
        query_embedding: Sequence[float],
        k: int,
        use_hybrid: bool = False,
        query_text: str = "",
    ) -> list[SearchResult]:
        """Return the k most relevant chunks, best first.

        Args:
            query_embedding: Embedding of the query, same dimensionality as
                the stored embeddings.
            k: Maximum number of results. Fewer are returned when the
                store holds fewer than k chunks.
            use_hybrid: Blend cosine similarity with BM25 over query_text.
                Falls back to pure cosine when query_text is blank.
            query_text: Raw query text, used only in hybrid mode.

        Returns:
            SearchResult list sorted by descending score. Ties keep scan order.

        Raises:
            InvalidArgument: If k <= 0 or the query embedding is empty or
                holds NaN or infinite values.
            DimensionMismatch: If a stored embedding differs in length from
                the query embedding.
        """
        if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
            raise InvalidArgument(f"k must be a positive integer, got {k!r}")
        if len(query_embedding) == 0:
            raise InvalidArgument("query_embedding must not be empty")
        if not all(math.isfinite(value) for value in query_embedding):
            raise InvalidArgument("query_embedding must contain only finite values")

        chunks = self.chunk_store.scan_all()
        if not chunks:
            logger.debug("Search over empty store")
            return []

        semantic = cosine_similarities(query_embedding, [chunk.embedding for chunk in chunks])

        lexical: BM25Scorer | None = None
        if use_hybrid:
            if query_text.strip():
                lexical = BM25Scorer([chunk.text for chunk in chunks])
            else:
                logger.debug("Hybrid search requested without query text; using cosine only")

        results = []
        for chunk, cosine in zip(chunks, semantic, strict=True):
            score = float(cosine)
            if lexical is not None:
                score = hybrid_score(score, lexical.score(query_text, chunk.text))
            results.append(SearchResult(chunk=chunk, score=score))

        # list.sort is stable, so equal scores keep scan order
        results.sort(key=lambda result: result.score, reverse=True)

        logger.debug(
            "Scored %d chunks (hybrid=%s), returning %d",
            len(chunks),
            lexical is not None,
            min(k, len(results)),
        )
        return results[:k]

    async def asearch(
        self,
        query_embedding: Sequence[float],
        k: int,
        use_hybrid: bool = False,
        query_text: str = "",
    ) -> list[SearchResult]:
        """Async version of search(); runs in a worker thread."""
        return await asyncio.to_thread(self.search, query_embedding, k, use_hybrid, query_text)
