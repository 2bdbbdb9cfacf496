"""LiteLLM provider clients for ragvault.

This module contains LiteLLM-based client implementations:
- LiteLLMClient: Streaming text generation using LiteLLM
- LiteLLMEmbeddingClient: Embeddings using LiteLLM
- ChatModels: Curated chat model constants
- EmbeddingModels: Curated embedding model constants
"""

from ragvault.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from ragvault.providers.litellm.models import ChatModels, EmbeddingModels

__all__ = [
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # Clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
