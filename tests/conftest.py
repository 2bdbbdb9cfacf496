"""Shared pytest fixtures."""

import os
import tempfile

import pytest

# Keyword axes for the fake embedder. The final axis is a constant bias so
# no text ever embeds to the zero vector.
VOCABULARY = ["apple", "banana", "bread", "pie", "battery", "reset", "warranty"]


def keyword_embedding(text: str) -> list[float]:
    """Embed text as keyword counts over VOCABULARY plus a bias term."""
    tokens = text.lower().split()
    return [float(tokens.count(word)) for word in VOCABULARY] + [0.1]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def sqlite_store(temp_dir):
    """Create an unopened SQLiteChunkStore in a temp directory."""
    from ragvault.stores import SQLiteChunkStore

    return SQLiteChunkStore(os.path.join(temp_dir, "chunks.db"))


@pytest.fixture
def memory_store():
    """Create an InMemoryChunkStore."""
    from ragvault.stores import InMemoryChunkStore

    return InMemoryChunkStore()


@pytest.fixture(params=["sqlite", "memory"])
def chunk_store(request, temp_dir):
    """Each ChunkStore implementation, for contract tests."""
    from ragvault.stores import InMemoryChunkStore, SQLiteChunkStore

    if request.param == "sqlite":
        return SQLiteChunkStore(os.path.join(temp_dir, "chunks.db"))
    return InMemoryChunkStore()


@pytest.fixture
def mock_embedder():
    """Create a deterministic keyword embedder for testing."""
    from ragvault.embedder import Embedder

    class MockEmbedder(Embedder):
        """Mock embedder that embeds by keyword counts."""

        def __init__(self) -> None:
            self.calls: list[list[str]] = []

        def embed_text(self, text: str) -> list[float]:
            self.calls.append([text])
            return keyword_embedding(text)

        def embed_texts(self, texts: list[str]) -> list[list[float]]:
            self.calls.append(list(texts))
            return [keyword_embedding(t) for t in texts]

    return MockEmbedder()


@pytest.fixture
def mock_llm():
    """Create an LLM client that streams a fixed answer token by token."""
    from ragvault.providers import LLMClient

    class MockLLMClient(LLMClient):
        """Mock LLM that records prompts and streams canned tokens."""

        def __init__(self, tokens: list[str]) -> None:
            self.tokens = tokens
            self.prompts: list[str] = []
            self.temperatures: list[float | None] = []

        def stream(self, prompt, temperature=None):
            self.prompts.append(prompt)
            self.temperatures.append(temperature)
            yield from self.tokens

    return MockLLMClient(["The ", "answer", "."])
