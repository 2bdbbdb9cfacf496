"""Configuration management for ragvault.

Settings are passed programmatically; the library does not read
environment variables. Applications that want env-based config read
them at the application layer and pass values explicitly.

Scoring constants (hybrid weights, BM25 k1/b) live in ragvault.retrieval,
not here.
"""

from pydantic import BaseModel, field_validator


class Settings(BaseModel):
    """Behavioral settings for a ragvault session.

    Example:
        settings = Settings(context_k=5, use_hybrid=True)
    """

    # Retrieval
    default_k: int = 5  # Results returned by RagSession.search when k is omitted
    context_k: int = 3  # Chunks placed in the generation prompt
    use_hybrid: bool = False
    cite_sources: bool = False

    # Ingestion
    chunk_size: int = 500  # Characters per segment for the built-in TextParser
    embed_batch_size: int = 32

    # Generation
    prompt_template: str | None = None
    temperature: float | None = 0.7
    max_tokens: int = 512

    # Retry configuration (LiteLLM handles exponential backoff for RateLimitError)
    num_retries: int = 3

    @field_validator("default_k", "context_k", "chunk_size", "embed_batch_size", "max_tokens")
    @classmethod
    def _must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"must be positive, got {value}")
        return value
