"""Exceptions raised by ragvault stores and the retrieval engine."""


class RagVaultError(Exception):
    """Base class for all ragvault errors."""


class StorageUnavailable(RagVaultError):
    """Raised when the underlying storage cannot be opened or created.

    Fatal to the session. Not retried internally.
    """


class DuplicateKey(RagVaultError):
    """Raised when a chunk is added with an id that already exists.

    Attributes:
        chunk_id: The id that collided.
    """

    def __init__(self, chunk_id: str) -> None:
        super().__init__(f"Chunk with id '{chunk_id}' already exists")
        self.chunk_id = chunk_id


class DimensionMismatch(RagVaultError):
    """Raised when a query embedding and a stored embedding differ in length.

    Attributes:
        expected: Length of the query embedding.
        actual: Length of the mismatching embedding.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Embedding dimension mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidArgument(RagVaultError, ValueError):
    """Raised when a caller passes an argument outside its valid range (e.g. k <= 0)."""
