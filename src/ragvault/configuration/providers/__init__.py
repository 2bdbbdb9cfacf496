"""Provider configurations."""

from ragvault.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
