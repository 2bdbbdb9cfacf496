# src/ragvault/models/chunk.py
"""Chunk data model."""

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

MetadataValue = str | int | float


class Chunk(BaseModel):
    """A retrievable piece of text with its embedding.

    Chunks are immutable once created. The id is assigned by the caller;
    the recommended scheme is ``<source-name>-<sequence>``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    text: str = Field(min_length=1)
    embedding: list[FiniteFloat] = Field(min_length=1)  # NaN and infinity rejected
    metadata: dict[str, MetadataValue] = Field(default_factory=dict)  # Opaque provenance
