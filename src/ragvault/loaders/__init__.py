"""Document parsing for ragvault."""

from ragvault.loaders.base import DocumentParser
from ragvault.loaders.text import TextParser

__all__ = ["DocumentParser", "TextParser"]
