# tests/test_session.py
"""Tests for RagSession."""

import os

import pytest

from ragvault import RagSession
from ragvault.configuration import LocalStorage, MemoryStorage
from ragvault.exceptions import DuplicateKey
from ragvault.models import Exchange
from ragvault.retriever import EMPTY_STORE_ANSWER
from ragvault.settings import Settings
from ragvault.stores import SQLiteChunkStore


@pytest.fixture
def manual(temp_dir):
    """A two-page text document."""
    path = os.path.join(temp_dir, "manual.txt")
    with open(path, "w", encoding="utf-8") as f:
        f.write("To reset the battery hold the button.\fThe warranty lasts two years.")
    return path


@pytest.fixture
def recipes(temp_dir):
    path = os.path.join(temp_dir, "recipes.txt")
    with open(path, "w", encoding="utf-8") as f:
        f.write("apple pie and banana bread")
    return path


@pytest.fixture
def session(mock_embedder, mock_llm):
    return RagSession(storage=MemoryStorage(), embedder=mock_embedder, llm_client=mock_llm)


class StaticProvider:
    """Provider config returning prebuilt collaborators."""

    def __init__(self, embedder, llm_client=None):
        self.embedder = embedder
        self.llm_client = llm_client
        self.settings_seen = []

    def build_embedder(self, settings):
        self.settings_seen.append(settings)
        return self.embedder

    def build_llm_client(self, settings):
        return self.llm_client


class TestConstruction:
    def test_with_storage_config(self, temp_dir, mock_embedder):
        session = RagSession(storage=LocalStorage(temp_dir), embedder=mock_embedder)

        assert isinstance(session.chunk_store, SQLiteChunkStore)
        assert session.llm_client is None
        assert session.engine.chunk_store is session.chunk_store

    def test_with_explicit_store(self, memory_store, mock_embedder):
        session = RagSession(chunk_store=memory_store, embedder=mock_embedder)
        assert session.chunk_store is memory_store

    def test_with_provider(self, memory_store, mock_embedder, mock_llm):
        settings = Settings(context_k=1)
        provider = StaticProvider(mock_embedder, mock_llm)

        session = RagSession(provider=provider, chunk_store=memory_store, settings=settings)

        assert session.embedder is mock_embedder
        assert session.llm_client is mock_llm
        assert provider.settings_seen == [settings]

    def test_default_settings(self, session):
        assert session.settings == Settings()

    def test_storage_and_store_conflict(self, memory_store, mock_embedder):
        with pytest.raises(ValueError, match="Cannot mix"):
            RagSession(storage=MemoryStorage(), chunk_store=memory_store, embedder=mock_embedder)

    def test_storage_required(self, mock_embedder):
        with pytest.raises(ValueError, match="storage"):
            RagSession(embedder=mock_embedder)

    def test_provider_and_embedder_conflict(self, mock_embedder):
        with pytest.raises(ValueError, match="Cannot mix"):
            RagSession(
                provider=StaticProvider(mock_embedder),
                storage=MemoryStorage(),
                embedder=mock_embedder,
            )

    def test_embedder_required(self):
        with pytest.raises(ValueError, match="embedder"):
            RagSession(storage=MemoryStorage())

    def test_sessions_are_independent(self, mock_embedder):
        first = RagSession(storage=MemoryStorage(), embedder=mock_embedder)
        second = RagSession(storage=MemoryStorage(), embedder=mock_embedder)
        assert first.chunk_store is not second.chunk_store


class TestInitialize:
    def test_progress_order(self, session):
        messages = []
        session.initialize(on_progress=messages.append)

        assert messages == [
            "Initializing embedder...",
            "Embedder ready",
            "Initializing LLM...",
            "LLM ready",
            "Initializing chunk store...",
            "Session ready",
        ]
        assert session.chunk_store.is_initialized

    def test_without_llm(self, mock_embedder):
        session = RagSession(storage=MemoryStorage(), embedder=mock_embedder)
        messages = []

        session.initialize(on_progress=messages.append)

        assert "Initializing LLM..." not in messages
        assert messages[-1] == "Session ready"

    def test_without_listener(self, session):
        session.initialize()
        assert session.chunk_store.is_initialized

    def test_creates_database(self, temp_dir, mock_embedder):
        data_dir = os.path.join(temp_dir, "data")
        session = RagSession(storage=LocalStorage(data_dir), embedder=mock_embedder)

        session.initialize()

        assert os.path.exists(os.path.join(data_dir, "chunks.db"))

    @pytest.mark.asyncio
    async def test_ainitialize(self, session):
        messages = []
        await session.ainitialize(on_progress=messages.append)
        assert messages[-1] == "Session ready"


class TestIngestFile:
    def test_ingest_file(self, session, manual):
        added = session.ingest_file(manual)

        assert added == 2
        assert session.count() == 2
        chunks = {c.id: c for c in session.chunk_store.scan_all()}
        assert chunks["manual.txt-1"].metadata == {
            "filename": "manual.txt",
            "chunk_index": 1,
            "page_number": 2,
        }

    def test_chunk_size_from_settings(self, mock_embedder, manual):
        session = RagSession(
            storage=MemoryStorage(), embedder=mock_embedder, settings=Settings(chunk_size=10)
        )

        session.ingest_file(manual)

        assert all(len(c.text) <= 10 for c in session.chunk_store.scan_all())

    def test_replace_clears_previous_document(self, session, manual, recipes):
        session.ingest_file(manual)
        session.ingest_file(recipes)

        assert [c.id for c in session.chunk_store.scan_all()] == ["recipes.txt-0"]

    def test_reingest_same_file_with_replace(self, session, manual):
        session.ingest_file(manual)
        assert session.ingest_file(manual) == 2
        assert session.count() == 2

    def test_reingest_without_replace_raises_duplicate(self, session, manual):
        session.ingest_file(manual)

        with pytest.raises(DuplicateKey):
            session.ingest_file(manual, replace=False)

        assert session.count() == 2

    def test_accumulate_without_replace(self, session, manual, recipes):
        session.ingest_file(manual)
        session.ingest_file(recipes, replace=False)
        assert session.count() == 3

    def test_missing_file(self, session, temp_dir):
        with pytest.raises(FileNotFoundError):
            session.ingest_file(os.path.join(temp_dir, "missing.txt"))

    def test_custom_parser(self, session, manual):
        from ragvault.loaders import DocumentParser
        from ragvault.models import ParsedSegment

        class OneSegmentParser(DocumentParser):
            def supports(self, path):
                return True

            def parse(self, path):
                return [ParsedSegment(text="warranty details")]

        assert session.ingest_file(manual, parser=OneSegmentParser()) == 1
        assert session.chunk_store.scan_all()[0].text == "warranty details"

    def test_progress_forwarded(self, session, manual):
        events = []
        session.ingest_file(manual, on_progress=lambda e, c, t, m: events.append(e))
        assert events[0] == "embedding"
        assert events[-1] == "storing"

    @pytest.mark.asyncio
    async def test_aingest_file(self, session, manual):
        assert await session.aingest_file(manual) == 2
        assert session.count() == 2


class TestQuery:
    def test_empty_store(self, session, mock_llm):
        response = session.query("How do I reset the battery?")

        assert response.answer == EMPTY_STORE_ANSWER
        assert mock_llm.prompts == []

    def test_query_after_ingest(self, session, manual, mock_llm):
        session.ingest_file(manual)
        seen = []

        response = session.query("battery reset", on_increment=seen.append)

        assert response.answer == "The answer."
        assert seen[-1] == "The answer."
        assert response.results[0].chunk.id == "manual.txt-0"
        assert "Question: battery reset" in mock_llm.prompts[0]

    def test_context_k_from_settings(self, mock_embedder, mock_llm, manual):
        session = RagSession(
            storage=MemoryStorage(),
            embedder=mock_embedder,
            llm_client=mock_llm,
            settings=Settings(context_k=1),
        )
        session.ingest_file(manual)

        assert len(session.query("battery").results) == 1

    def test_cite_sources_from_settings(self, mock_embedder, mock_llm, manual):
        session = RagSession(
            storage=MemoryStorage(),
            embedder=mock_embedder,
            llm_client=mock_llm,
            settings=Settings(cite_sources=True),
        )
        session.ingest_file(manual)

        session.query("warranty")

        assert "[Source: manual.txt, page 2]" in mock_llm.prompts[0]

    def test_explicit_flag_overrides_settings(self, mock_embedder, mock_llm, manual):
        session = RagSession(
            storage=MemoryStorage(),
            embedder=mock_embedder,
            llm_client=mock_llm,
            settings=Settings(cite_sources=True),
        )
        session.ingest_file(manual)

        session.query("warranty", cite_sources=False)

        assert "[Source:" not in mock_llm.prompts[0]

    def test_temperature_from_settings(self, session, manual, mock_llm):
        session.ingest_file(manual)
        session.query("warranty")
        assert mock_llm.temperatures == [0.7]

    def test_history_in_prompt(self, session, manual, mock_llm):
        session.ingest_file(manual)

        session.query(
            "And the warranty?",
            history=[Exchange(question="How do I reset?", answer="Hold the button.")],
        )

        assert "Q: How do I reset?\nA: Hold the button." in mock_llm.prompts[0]

    @pytest.mark.asyncio
    async def test_aquery(self, session, manual):
        session.ingest_file(manual)
        response = await session.aquery("battery reset")
        assert response.answer == "The answer."


class TestSearch:
    def test_search_default_k(self, mock_embedder, temp_dir):
        session = RagSession(
            storage=MemoryStorage(), embedder=mock_embedder, settings=Settings(default_k=2)
        )
        path = os.path.join(temp_dir, "long.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("\f".join(f"page {i} apple" for i in range(5)))
        session.ingest_file(path)

        assert len(session.search("apple")) == 2
        assert len(session.search("apple", k=4)) == 4

    def test_search_hybrid_from_settings(self, mock_embedder, recipes):
        session = RagSession(
            storage=MemoryStorage(), embedder=mock_embedder, settings=Settings(use_hybrid=True)
        )
        session.ingest_file(recipes)

        results = session.search("apple")

        assert 0.0 <= results[0].score <= 1.0

    def test_search_empty_store(self, session):
        assert session.search("anything") == []

    def test_clear(self, session, manual):
        session.ingest_file(manual)
        session.clear()
        assert session.count() == 0


class TestPersistence:
    def test_chunks_survive_new_session(self, temp_dir, mock_embedder, manual):
        data_dir = os.path.join(temp_dir, "data")
        RagSession(storage=LocalStorage(data_dir), embedder=mock_embedder).ingest_file(manual)

        reopened = RagSession(storage=LocalStorage(data_dir), embedder=mock_embedder)

        assert reopened.count() == 2
        assert reopened.search("battery reset", k=1)[0].chunk.id == "manual.txt-0"
