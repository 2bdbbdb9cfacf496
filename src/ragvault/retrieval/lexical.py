# src/ragvault/retrieval/lexical.py
"""BM25-style lexical scoring."""

import math
from collections import Counter
from collections.abc import Sequence

# BM25 parameters
K1 = 1.5  # Term-frequency saturation
B = 0.75  # Length normalization


def tokenize(text: str) -> list[str]:
    """Lowercase and split on runs of whitespace. No stemming or stop words."""
    return text.lower().split()


class BM25Scorer:
    """Scores documents against a query using corpus statistics.

    Statistics (corpus size, average document length) are computed from
    the texts passed at construction, so a scorer built per search never
    sees stale numbers.

    The score is an approximation bounded to [0, 1], not a true BM25
    value: the raw sum is divided by the number of query tokens and then
    clamped to 1.0. It is not a calibrated probability.

    Document frequency counts corpus documents whose lowercased text
    *contains* the token as a substring, not as a whole token. Short
    tokens are therefore overcounted (e.g. "cat" matches "category"),
    which lowers their idf.
    """

    def __init__(self, corpus: Sequence[str], k1: float = K1, b: float = B) -> None:
        """Build corpus statistics.

        Args:
            corpus: Text of every document in the corpus.
            k1: Term-frequency saturation parameter.
            b: Length normalization parameter.
        """
        self.k1 = k1
        self.b = b
        self._texts = [text.lower() for text in corpus]
        self.corpus_size = len(self._texts)
        total_tokens = sum(len(tokenize(text)) for text in self._texts)
        self.avg_doc_length = total_tokens / self.corpus_size if self.corpus_size else 0.0
        self._df_cache: dict[str, int] = {}

    def document_frequency(self, token: str) -> int:
        """Number of corpus documents whose text contains the token."""
        if token not in self._df_cache:
            self._df_cache[token] = sum(1 for text in self._texts if token in text)
        return self._df_cache[token]

    def idf(self, token: str) -> float:
        """Inverse document frequency: ln((N - df + 0.5) / (df + 0.5) + 1)."""
        n = self.corpus_size
        df = self.document_frequency(token)
        return math.log((n - df + 0.5) / (df + 0.5) + 1)

    def score(self, query: str, text: str) -> float:
        """Score one document against a query.

        Returns:
            Normalized score in [0, 1]. 0.0 for an empty query or corpus.
        """
        query_tokens = tokenize(query)
        if not query_tokens or self.corpus_size == 0 or self.avg_doc_length == 0:
            return 0.0

        doc_tokens = tokenize(text)
        if not doc_tokens:
            return 0.0

        term_freqs = Counter(doc_tokens)
        length_ratio = len(doc_tokens) / self.avg_doc_length

        total = 0.0
        for token in query_tokens:
            tf = term_freqs.get(token, 0)
            if tf == 0:
                continue
            saturation = tf * (self.k1 + 1) / (tf + self.k1 * (1 - self.b + self.b * length_ratio))
            total += self.idf(token) * saturation

        return min(total / len(query_tokens), 1.0)
