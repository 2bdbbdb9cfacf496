"""Embedding functionality for ragvault."""

from ragvault.embedder.base import Embedder
from ragvault.embedder.client import ClientEmbedder

__all__ = ["Embedder", "ClientEmbedder"]
