# tests/models/test_results.py
"""Tests for SearchResult, Exchange and QueryResponse models."""

from ragvault.models import Chunk, Exchange, QueryResponse, SearchResult


def make_chunk() -> Chunk:
    return Chunk(id="manual.txt-0", text="Hold the button for ten seconds.", embedding=[1.0, 0.0])


class TestSearchResult:
    def test_create_search_result(self):
        chunk = make_chunk()
        result = SearchResult(chunk=chunk, score=0.95)

        assert result.chunk == chunk
        assert result.score == 0.95

    def test_negative_score_allowed(self):
        assert SearchResult(chunk=make_chunk(), score=-0.5).score == -0.5


class TestExchange:
    def test_create_exchange(self):
        exchange = Exchange(question="How do I reset it?", answer="Hold the button.")
        assert exchange.question == "How do I reset it?"
        assert exchange.answer == "Hold the button."


class TestQueryResponse:
    def test_create_query_response_with_answer(self):
        result = SearchResult(chunk=make_chunk(), score=0.95)

        response = QueryResponse(
            query="How do I reset it?",
            answer="Hold the button for ten seconds.",
            results=[result],
        )

        assert response.query == "How do I reset it?"
        assert response.answer == "Hold the button for ten seconds."
        assert response.results == [result]

    def test_create_query_response_without_answer(self):
        response = QueryResponse(query="Anything?", answer="", results=[])
        assert response.answer == ""
        assert response.results == []
