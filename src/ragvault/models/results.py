# src/ragvault/models/results.py
"""Result data models for ragvault queries."""

from pydantic import BaseModel

from ragvault.models.chunk import Chunk


class SearchResult(BaseModel):
    """A retrieved chunk and its relevance score (higher is better)."""

    chunk: Chunk
    score: float


class Exchange(BaseModel):
    """One question/answer turn of conversation history."""

    question: str
    answer: str


class QueryResponse(BaseModel):
    """Full response to a user query."""

    query: str
    answer: str
    results: list[SearchResult]
