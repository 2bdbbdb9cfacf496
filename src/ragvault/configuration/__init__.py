"""Configuration objects for building ragvault sessions."""

from ragvault.configuration.base import ProviderConfig, StorageConfig
from ragvault.configuration.providers import LiteLLMProvider
from ragvault.configuration.storage import LocalStorage, MemoryStorage

__all__ = [
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    "MemoryStorage",
]
