# src/ragvault/retrieval/similarity.py
"""Cosine similarity between dense embeddings."""

from collections.abc import Sequence

import numpy as np

from ragvault.exceptions import DimensionMismatch


def _rescale(vectors: np.ndarray) -> np.ndarray:
    """Divide each vector (last axis) by its largest magnitude.

    Cosine is scale-invariant, so this leaves scores unchanged while
    keeping norms finite for components near the float limits.
    """
    peaks = np.max(np.abs(vectors), axis=-1, keepdims=True)
    return np.divide(vectors, peaks, out=np.zeros_like(vectors), where=peaks != 0)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Compute cosine similarity between two vectors.

    Cosine similarity measures the angle between two vectors:
    - 1.0 = identical direction
    - 0.0 = orthogonal
    - -1.0 = opposite direction

    Formula: cos(θ) = (a · b) / (||a|| * ||b||)

    A zero vector has no direction, so the similarity is defined as 0.0
    rather than NaN. Vectors holding NaN or infinity also score 0.0.

    Raises:
        DimensionMismatch: If the vectors differ in length.
    """
    if len(a) != len(b):
        raise DimensionMismatch(expected=len(a), actual=len(b))

    return float(cosine_similarities(a, [b])[0])


def cosine_similarities(query: Sequence[float], vectors: Sequence[Sequence[float]]) -> np.ndarray:
    """Score every vector against the query in one pass.

    Equivalent to calling cosine_similarity(query, v) for each v, but
    computed as a single matrix-vector product.

    Returns:
        1-D float array with one score per input vector, in input order.
        Every score is finite.

    Raises:
        DimensionMismatch: If any vector differs in length from the query.
    """
    if not vectors:
        return np.zeros(0, dtype=np.float64)

    dim = len(query)
    for vector in vectors:
        if len(vector) != dim:
            raise DimensionMismatch(expected=dim, actual=len(vector))

    with np.errstate(invalid="ignore", over="ignore"):
        q = _rescale(np.asarray(query, dtype=np.float64))
        matrix = _rescale(np.asarray(vectors, dtype=np.float64))

        dots = matrix @ q
        denominators = np.linalg.norm(matrix, axis=1) * np.linalg.norm(q)

        # Rows (or a query) with zero magnitude score 0.0
        scores = np.divide(
            dots,
            denominators,
            out=np.zeros_like(dots),
            where=denominators != 0,
        )

    # NaN or infinite inputs have no defined direction either
    scores[~np.isfinite(scores)] = 0.0
    return np.clip(scores, -1.0, 1.0)
