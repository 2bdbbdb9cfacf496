"""Data models for ragvault."""

from ragvault.models.chunk import Chunk, MetadataValue
from ragvault.models.results import Exchange, QueryResponse, SearchResult
from ragvault.models.segment import ParsedSegment

__all__ = ["Chunk", "MetadataValue", "ParsedSegment", "SearchResult", "Exchange", "QueryResponse"]
