# src/ragvault/embedder/base.py
"""Embedder abstract base class."""

import asyncio
from abc import ABC, abstractmethod

from ragvault.providers.base import ProgressListener


class Embedder(ABC):
    """Abstract base class for embedding generation.

    Subclasses must implement embed_text and embed_texts.
    """

    def initialize(self, on_progress: ProgressListener | None = None) -> None:
        """Load whatever the embedder needs. Default: nothing to load."""
        if on_progress is not None:
            on_progress("Embedder ready")

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        ...

    @abstractmethod
    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts (batched)."""
        ...

    async def aembed_text(self, text: str) -> list[float]:
        """Async version of embed_text(); runs in a worker thread."""
        return await asyncio.to_thread(self.embed_text, text)
