"""Storage configurations."""

from ragvault.configuration.storage.local import LocalStorage, MemoryStorage

__all__ = ["LocalStorage", "MemoryStorage"]
