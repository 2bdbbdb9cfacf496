# src/ragvault/models/segment.py
"""Parsed document segment model."""

from pydantic import BaseModel, Field


class ParsedSegment(BaseModel):
    """A piece of document text produced by a parser, before embedding."""

    text: str
    page_number: int = Field(default=1, ge=1)
    chunk_index: int = Field(default=0, ge=0)  # Sequential across the whole document
