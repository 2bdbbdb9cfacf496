# src/ragvault/providers/litellm/client.py
"""LiteLLM client implementations for LLM and embedding APIs."""

from collections.abc import Iterator

import litellm

from ragvault.logging import get_logger
from ragvault.providers.base import EmbeddingClient, LLMClient
from ragvault.providers.litellm.models import ChatModels, EmbeddingModels

logger = get_logger(__name__)


class LiteLLMClient(LLMClient):
    """LiteLLM-based streaming LLM client.

    Supports any model available through LiteLLM (Ollama, OpenAI,
    Anthropic, Gemini, etc.).

    Example:
        from ragvault.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.PHI3_MINI)
        answer = client.generate("Hello", on_increment=print)
    """

    def __init__(
        self,
        model: str = ChatModels.PHI3_MINI,
        num_retries: int = 3,
        max_tokens: int = 512,
        temperature: float | None = 0.7,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
                   Examples: "ollama/llama3.2:1b", "openai/gpt-5-mini"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
            max_tokens: Upper bound on generated tokens.
            temperature: Default sampling temperature, used when a call
                        does not pass one.
        """
        self.model = model
        self.num_retries = num_retries
        self.max_tokens = max_tokens
        self.temperature = temperature

    def stream(self, prompt: str, temperature: float | None = None) -> Iterator[str]:
        """Stream a completion using LiteLLM."""
        completion_kwargs = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "stream": True,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        effective_temperature = temperature if temperature is not None else self.temperature
        if effective_temperature is not None:
            completion_kwargs["temperature"] = effective_temperature

        logger.debug("Streaming completion from %s (%d prompt chars)", self.model, len(prompt))
        response = litellm.completion(**completion_kwargs)

        for part in response:
            if not part.choices:
                continue
            delta = part.choices[0].delta.content
            if delta:
                yield str(delta)


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Supports any embedding model available through LiteLLM.

    Example:
        from ragvault.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.ALL_MINILM)
        embeddings = client.embed(["Hello world", "How are you?"])
    """

    def __init__(
        self,
        model: str = EmbeddingModels.ALL_MINILM,
        num_retries: int = 3,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
                   Examples: "ollama/all-minilm", "openai/text-embedding-3-small"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 3.
        """
        self.model = model
        self.num_retries = num_retries

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []

        response = litellm.embedding(
            model=self.model,
            input=texts,
            num_retries=self.num_retries,
        )
        # Sort by index to maintain order
        sorted_data = sorted(response.data, key=lambda x: x["index"])
        return [item["embedding"] for item in sorted_data]
