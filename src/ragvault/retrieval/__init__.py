"""Similarity scoring and ranked search for ragvault."""

from ragvault.retrieval.engine import (
    LEXICAL_WEIGHT,
    SEMANTIC_WEIGHT,
    RetrievalEngine,
    hybrid_score,
)
from ragvault.retrieval.lexical import BM25Scorer, tokenize
from ragvault.retrieval.similarity import cosine_similarities, cosine_similarity

__all__ = [
    "RetrievalEngine",
    "BM25Scorer",
    "tokenize",
    "cosine_similarity",
    "cosine_similarities",
    "hybrid_score",
    "SEMANTIC_WEIGHT",
    "LEXICAL_WEIGHT",
]
