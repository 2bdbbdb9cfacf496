"""Protocol definitions for configuration objects.

Provider and storage configurations are structural: any frozen
dataclass with the right methods satisfies the interface without
inheriting from anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ragvault.embedder import Embedder
    from ragvault.providers import LLMClient
    from ragvault.settings import Settings
    from ragvault.stores import ChunkStore


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the external model collaborators:
    - Embedder: Creates vector embeddings for chunks and queries
    - LLMClient: Streams generated answers (optional)
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build an embedder for creating vector embeddings."""
        ...

    def build_llm_client(self, settings: Settings) -> LLMClient | None:
        """Build an LLM client for answer generation, or None for retrieval only."""
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations."""

    def build_chunk_store(self) -> ChunkStore:
        """Build the chunk store."""
        ...
