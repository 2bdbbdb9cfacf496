# src/ragvault/providers/litellm/models.py
"""Curated model constants for the LiteLLM provider.

These are convenience constants for IDE autocomplete. Any valid LiteLLM
model string can be passed directly. The defaults favour small local
models served by Ollama, matching the one-document, one-machine use case.

Example:
    from ragvault.providers.litellm import ChatModels, LiteLLMClient

    llm_client = LiteLLMClient(model=ChatModels.LLAMA_32_1B)
"""


class ChatModels:
    """Chat models for LiteLLMClient."""

    # Local (Ollama)
    PHI3_MINI = "ollama/phi3:mini"
    LLAMA_32_1B = "ollama/llama3.2:1b"
    LLAMA_32_3B = "ollama/llama3.2:3b"
    MISTRAL_7B = "ollama/mistral:7b"
    QWEN_25_15B = "ollama/qwen2.5:1.5b"

    # Hosted
    GPT_5_MINI = "openai/gpt-5-mini"
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"


class EmbeddingModels:
    """Embedding models for LiteLLMEmbeddingClient."""

    # Local (Ollama); all-minilm produces 384-dimensional vectors
    ALL_MINILM = "ollama/all-minilm"
    NOMIC_EMBED_TEXT = "ollama/nomic-embed-text"

    # Hosted
    TEXT_3_SMALL = "openai/text-embedding-3-small"
