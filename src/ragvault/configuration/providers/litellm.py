"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ragvault.embedder import Embedder
    from ragvault.providers import LLMClient
    from ragvault.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for embedding and generation calls.

    Args:
        embedding: LiteLLM model identifier for embeddings.
                   Examples: "ollama/all-minilm", "openai/text-embedding-3-small"
        llm: LiteLLM model identifier for answer generation. None builds a
             retrieval-only session.
             Examples: "ollama/phi3:mini", "openai/gpt-5-mini"

    Example:
        provider = LiteLLMProvider(
            embedding="ollama/all-minilm",
            llm="ollama/llama3.2:1b",
        )
    """

    embedding: str
    llm: str | None = None

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder using the LiteLLM embedding client."""
        from ragvault.embedder import ClientEmbedder
        from ragvault.providers.litellm import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
        )
        return ClientEmbedder(embedding_client=embedding_client)

    def build_llm_client(self, settings: Settings) -> LLMClient | None:
        """Build a streaming LiteLLM client, or None when no llm is configured."""
        if self.llm is None:
            return None

        from ragvault.providers.litellm import LiteLLMClient

        return LiteLLMClient(
            model=self.llm,
            num_retries=settings.num_retries,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
        )
