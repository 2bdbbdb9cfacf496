"""Provider implementations for ragvault.

This module contains LLM and embedding provider abstractions:
- LLMClient: Abstract base class for streaming text generation
- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementations (requires: pip install ragvault[litellm])

Usage:
    from ragvault.providers import LLMClient, EmbeddingClient
    from ragvault.providers.litellm import LiteLLMClient, ChatModels
"""

from ragvault.providers.base import (
    EmbeddingClient,
    IncrementCallback,
    LLMClient,
    ProgressListener,
)

try:
    from ragvault.providers.litellm import (
        ChatModels,
        EmbeddingModels,
        LiteLLMClient,
        LiteLLMEmbeddingClient,
    )
except ImportError:
    from ragvault._optional import _create_missing_dependency_class

    class ChatModels:  # type: ignore[no-redef]
        """Placeholder - requires litellm package."""

        pass

    class EmbeddingModels:  # type: ignore[no-redef]
        """Placeholder - requires litellm package."""

        pass

    LiteLLMClient = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "LiteLLMClient", "litellm"
    )
    LiteLLMEmbeddingClient = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "LiteLLMEmbeddingClient", "litellm"
    )

__all__ = [
    # ABCs
    "LLMClient",
    "EmbeddingClient",
    "IncrementCallback",
    "ProgressListener",
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # LiteLLM clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
