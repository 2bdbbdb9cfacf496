# src/ragvault/loaders/text.py
"""Plain text file parser."""

from pathlib import Path

from ragvault.loaders.base import DocumentParser
from ragvault.models import ParsedSegment

PAGE_BREAK = "\f"


class TextParser(DocumentParser):
    """Parse plain text files into fixed-size segments.

    Form feeds separate pages. Whitespace inside each page is collapsed
    to single spaces, then the page is cut into consecutive pieces of
    chunk_size characters with no overlap.
    """

    SUPPORTED_EXTENSIONS = {".txt", ".md", ".markdown", ".text"}

    def __init__(self, chunk_size: int = 500) -> None:
        """Initialize the text parser.

        Args:
            chunk_size: Maximum characters per segment

        Raises:
            ValueError: If chunk_size is not positive
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.chunk_size = chunk_size

    def supports(self, path: str) -> bool:
        """Check if this parser supports the given file."""
        return Path(path).suffix.lower() in self.SUPPORTED_EXTENSIONS

    def parse(self, path: str) -> list[ParsedSegment]:
        """Parse a text file into segments."""
        file_path = Path(path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        content = file_path.read_text(encoding="utf-8")
        return self.split(content)

    def split(self, content: str) -> list[ParsedSegment]:
        """Split already-loaded text into segments."""
        segments: list[ParsedSegment] = []
        for page_number, page in enumerate(content.split(PAGE_BREAK), start=1):
            text = " ".join(page.split())
            for start in range(0, len(text), self.chunk_size):
                segments.append(
                    ParsedSegment(
                        text=text[start : start + self.chunk_size],
                        page_number=page_number,
                        chunk_index=len(segments),
                    )
                )
        return segments
