"""Central session object tying stores, engine and model collaborators together."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from ragvault.logging import get_logger
from ragvault.retrieval import RetrievalEngine
from ragvault.settings import Settings

if TYPE_CHECKING:
    from ragvault.configuration import ProviderConfig, StorageConfig
    from ragvault.embedder import Embedder
    from ragvault.ingestor import Ingestor, ProgressCallback
    from ragvault.loaders import DocumentParser
    from ragvault.models import Exchange, QueryResponse, SearchResult
    from ragvault.providers import IncrementCallback, LLMClient, ProgressListener
    from ragvault.retriever import Retriever
    from ragvault.stores import ChunkStore

logger = get_logger(__name__)


class RagSession:
    """One RAG session: a chunk store plus the models that feed and read it.

    A session is constructed explicitly with the collaborators it uses.
    There is no global instance.

    There are two ways to supply storage:

    1. With a storage configuration:

        from ragvault import RagSession, LiteLLMProvider, LocalStorage

        session = RagSession(
            provider=LiteLLMProvider(embedding="ollama/all-minilm", llm="ollama/phi3:mini"),
            storage=LocalStorage("./data"),
        )

    2. With an explicit store:

        from ragvault.stores import SQLiteChunkStore

        session = RagSession(
            provider=LiteLLMProvider(embedding="ollama/all-minilm"),
            chunk_store=SQLiteChunkStore("./data/chunks.db"),
        )

    Then:

        session.initialize(on_progress=print)
        session.ingest_file("manual.txt")
        response = session.query("How do I reset it?", on_increment=print)
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig | None = None,
        storage: StorageConfig | None = None,
        chunk_store: ChunkStore | None = None,
        embedder: Embedder | None = None,
        llm_client: LLMClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a session.

        Args:
            provider: Provider configuration that builds the embedder and
                LLM client. Mutually exclusive with explicit embedder/llm_client.
            storage: Storage configuration. Mutually exclusive with chunk_store.
            chunk_store: Explicit chunk store.
            embedder: Explicit embedder.
            llm_client: Explicit LLM client. Optional; without one, queries
                return retrieved chunks only.
            settings: Behavioral settings.

        Raises:
            ValueError: If storage or models are specified both ways or not at all.
        """
        self.settings = settings if settings is not None else Settings()

        if storage is not None and chunk_store is not None:
            raise ValueError("Cannot mix 'storage' configuration with an explicit chunk_store")
        if storage is not None:
            self.chunk_store = storage.build_chunk_store()
        elif chunk_store is not None:
            self.chunk_store = chunk_store
        else:
            raise ValueError("Must provide either 'storage' or 'chunk_store'")

        if provider is not None:
            if embedder is not None or llm_client is not None:
                raise ValueError("Cannot mix 'provider' with explicit embedder/llm_client")
            self.embedder = provider.build_embedder(self.settings)
            self.llm_client = provider.build_llm_client(self.settings)
        elif embedder is not None:
            self.embedder = embedder
            self.llm_client = llm_client
        else:
            raise ValueError("Must provide either 'provider' or an explicit embedder")

        self.engine = RetrievalEngine(self.chunk_store)

    def initialize(self, on_progress: ProgressListener | None = None) -> None:
        """Load models and open the store, in that order.

        Progress messages from the collaborators are forwarded to on_progress.
        """

        def progress(message: str) -> None:
            logger.info(message)
            if on_progress:
                on_progress(message)

        progress("Initializing embedder...")
        self.embedder.initialize(progress)
        if self.llm_client is not None:
            progress("Initializing LLM...")
            self.llm_client.initialize(progress)
        progress("Initializing chunk store...")
        self.chunk_store.initialize()
        progress("Session ready")

    async def ainitialize(self, on_progress: ProgressListener | None = None) -> None:
        """Async version of initialize(); runs in a worker thread."""
        await asyncio.to_thread(self.initialize, on_progress)

    def ingestor(self) -> Ingestor:
        """Create an Ingestor over this session's store and embedder."""
        from ragvault.ingestor import Ingestor

        return Ingestor(
            chunk_store=self.chunk_store,
            embedder=self.embedder,
            batch_size=self.settings.embed_batch_size,
        )

    def retriever(self) -> Retriever:
        """Create a Retriever over this session's engine and models."""
        from ragvault.retriever import Retriever

        return Retriever(
            engine=self.engine,
            embedder=self.embedder,
            llm_client=self.llm_client,
            context_k=self.settings.context_k,
            prompt_template=self.settings.prompt_template,
            temperature=self.settings.temperature,
        )

    def count(self) -> int:
        """Number of chunks in the store."""
        return self.chunk_store.count()

    def clear(self) -> None:
        """Remove every chunk from the store."""
        self.chunk_store.clear()

    def ingest_file(
        self,
        filepath: str,
        parser: DocumentParser | None = None,
        *,
        replace: bool = True,
        on_progress: ProgressCallback | None = None,
    ) -> int:
        """Parse a file and ingest its segments.

        The file name (not the full path) is the source name, so chunk ids
        read ``<file name>-<n>``.

        Args:
            filepath: Path to the file to ingest
            parser: Parser to use. Defaults to a TextParser with the
                configured chunk_size.
            replace: Clear the store first, keeping one document loaded at
                a time. With replace=False, ingesting a file whose name is
                already stored raises DuplicateKey.
            on_progress: Optional callback for progress updates

        Returns:
            Number of chunks added
        """
        if parser is None:
            from ragvault.loaders import TextParser

            parser = TextParser(chunk_size=self.settings.chunk_size)

        source_name = Path(filepath).name
        if replace:
            logger.info("Clearing store before ingesting %s", source_name)
            self.chunk_store.clear()

        segments = parser.parse(filepath)
        return self.ingestor().ingest_segments(source_name, segments, on_progress=on_progress)

    async def aingest_file(
        self,
        filepath: str,
        parser: DocumentParser | None = None,
        *,
        replace: bool = True,
        on_progress: ProgressCallback | None = None,
    ) -> int:
        """Async version of ingest_file(); runs in a worker thread."""
        return await asyncio.to_thread(
            self.ingest_file,
            filepath,
            parser,
            replace=replace,
            on_progress=on_progress,
        )

    def search(
        self,
        query: str,
        k: int | None = None,
        use_hybrid: bool | None = None,
    ) -> list[SearchResult]:
        """Embed a query and return the top k chunks without generating an answer."""
        return self.retriever().get_context(
            query,
            k=self.settings.default_k if k is None else k,
            use_hybrid=self.settings.use_hybrid if use_hybrid is None else use_hybrid,
        )

    def query(
        self,
        query: str,
        on_increment: IncrementCallback | None = None,
        history: Sequence[Exchange] = (),
        use_hybrid: bool | None = None,
        cite_sources: bool | None = None,
    ) -> QueryResponse:
        """Answer a question. Unset flags fall back to settings."""
        return self.retriever().query(
            query,
            on_increment=on_increment,
            history=history,
            use_hybrid=self.settings.use_hybrid if use_hybrid is None else use_hybrid,
            cite_sources=self.settings.cite_sources if cite_sources is None else cite_sources,
        )

    async def aquery(
        self,
        query: str,
        on_increment: IncrementCallback | None = None,
        history: Sequence[Exchange] = (),
        use_hybrid: bool | None = None,
        cite_sources: bool | None = None,
    ) -> QueryResponse:
        """Async version of query()."""
        return await self.retriever().aquery(
            query,
            on_increment=on_increment,
            history=history,
            use_hybrid=self.settings.use_hybrid if use_hybrid is None else use_hybrid,
            cite_sources=self.settings.cite_sources if cite_sources is None else cite_sources,
        )
