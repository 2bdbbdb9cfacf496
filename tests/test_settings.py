# tests/test_settings.py
"""Tests for Settings.

Settings is a plain BaseModel; nothing is read from the environment.
"""

import pytest
from pydantic import ValidationError

from ragvault.settings import Settings


class TestSettings:
    def test_default_settings(self):
        """Test Settings has correct defaults."""
        settings = Settings()
        assert settings.default_k == 5
        assert settings.context_k == 3
        assert settings.use_hybrid is False
        assert settings.cite_sources is False
        assert settings.chunk_size == 500
        assert settings.embed_batch_size == 32
        assert settings.prompt_template is None
        assert settings.temperature == 0.7
        assert settings.max_tokens == 512
        assert settings.num_retries == 3

    def test_settings_with_custom_values(self):
        """Test Settings accepts custom values."""
        settings = Settings(
            default_k=10,
            context_k=4,
            use_hybrid=True,
            cite_sources=True,
            chunk_size=200,
            prompt_template="{context} {query}",
            temperature=None,
        )
        assert settings.default_k == 10
        assert settings.context_k == 4
        assert settings.use_hybrid is True
        assert settings.cite_sources is True
        assert settings.chunk_size == 200
        assert settings.prompt_template == "{context} {query}"
        assert settings.temperature is None

    @pytest.mark.parametrize(
        "field", ["default_k", "context_k", "chunk_size", "embed_batch_size", "max_tokens"]
    )
    @pytest.mark.parametrize("value", [0, -3])
    def test_counts_must_be_positive(self, field, value):
        with pytest.raises(ValidationError):
            Settings(**{field: value})

    def test_zero_retries_allowed(self):
        assert Settings(num_retries=0).num_retries == 0
