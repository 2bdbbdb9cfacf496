"""ragvault - embedded retrieval for local RAG.

Stores text chunks with their embeddings and answers top-K queries by
cosine similarity, optionally blended with BM25 keyword relevance.

Quick Start (LiteLLM + Local Storage):
    from ragvault import LiteLLMProvider, LocalStorage, RagSession

    session = RagSession(
        provider=LiteLLMProvider(embedding="ollama/all-minilm", llm="ollama/phi3:mini"),
        storage=LocalStorage("./data"),
    )
    session.initialize(on_progress=print)

    # Ingest a document (replaces whatever was loaded before)
    session.ingest_file("manual.txt")

    # Query, streaming the answer as it is generated
    response = session.query("How do I reset it?", on_increment=print, use_hybrid=True)

Engine only (bring your own embeddings):
    from ragvault import Chunk, RetrievalEngine
    from ragvault.stores import SQLiteChunkStore

    store = SQLiteChunkStore("./data/chunks.db")
    store.add(Chunk(id="doc-0", text="apple pie", embedding=[1.0, 0.0]))
    results = RetrievalEngine(store).search([1.0, 0.0], k=5)
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("ragvault")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

# Configuration objects
from ragvault.configuration import (
    LiteLLMProvider,
    LocalStorage,
    MemoryStorage,
    ProviderConfig,
    StorageConfig,
)
from ragvault.embedder import ClientEmbedder, Embedder

# Errors
from ragvault.exceptions import (
    DimensionMismatch,
    DuplicateKey,
    InvalidArgument,
    RagVaultError,
    StorageUnavailable,
)

# Pipelines
from ragvault.ingestor import Ingestor

# Document parsing
from ragvault.loaders import DocumentParser, TextParser

# Core models
from ragvault.models import Chunk, Exchange, ParsedSegment, QueryResponse, SearchResult

# Provider ABCs
from ragvault.providers import EmbeddingClient, LLMClient

# Retrieval
from ragvault.retrieval import BM25Scorer, RetrievalEngine, cosine_similarity
from ragvault.retriever import Retriever

# Central session
from ragvault.session import RagSession

# Configuration
from ragvault.settings import Settings

# Storage
from ragvault.stores import ChunkStore, InMemoryChunkStore, SQLiteChunkStore

__all__ = [
    # Version
    "__version__",
    # Models
    "Chunk",
    "Exchange",
    "ParsedSegment",
    "QueryResponse",
    "SearchResult",
    # Errors
    "RagVaultError",
    "StorageUnavailable",
    "DuplicateKey",
    "DimensionMismatch",
    "InvalidArgument",
    # Config
    "Settings",
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    "MemoryStorage",
    # Storage
    "ChunkStore",
    "InMemoryChunkStore",
    "SQLiteChunkStore",
    # Retrieval
    "RetrievalEngine",
    "BM25Scorer",
    "cosine_similarity",
    # Embedding
    "Embedder",
    "ClientEmbedder",
    # Provider ABCs
    "LLMClient",
    "EmbeddingClient",
    # Parsing
    "DocumentParser",
    "TextParser",
    # Pipelines
    "Ingestor",
    "Retriever",
    # Central session
    "RagSession",
]
