# src/ragvault/embedder/client.py
"""Client-based embedder implementation."""

from ragvault.embedder.base import Embedder
from ragvault.providers.base import EmbeddingClient, ProgressListener


class ClientEmbedder(Embedder):
    """Embedder that uses an EmbeddingClient for generating embeddings.

    Example:
        from ragvault.providers.litellm import LiteLLMEmbeddingClient
        from ragvault.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="ollama/all-minilm")
        embedder = ClientEmbedder(embedding_client=client)
    """

    def __init__(self, embedding_client: EmbeddingClient) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation
        """
        self._client = embedding_client

    def initialize(self, on_progress: ProgressListener | None = None) -> None:
        """Initialize the underlying client, forwarding its progress messages."""
        self._client.initialize(on_progress)

    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        result = self._client.embed([text])
        return result[0]

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts (batched)."""
        return self._client.embed(texts)
