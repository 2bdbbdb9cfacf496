# src/ragvault/loaders/base.py
"""Document parser abstract base class."""

from abc import ABC, abstractmethod

from ragvault.models import ParsedSegment


class DocumentParser(ABC):
    """Abstract base class for turning a file into text segments."""

    @abstractmethod
    def parse(self, path: str) -> list[ParsedSegment]:
        """Parse a file into segments ready for embedding.

        Args:
            path: Path to the file to parse

        Returns:
            Segments in document order, with chunk_index numbered from 0
        """
        ...

    @abstractmethod
    def supports(self, path: str) -> bool:
        """Check if this parser supports the given path."""
        ...
