# src/ragvault/providers/base.py
"""Abstract base classes for LLM and embedding providers."""

import asyncio
import contextlib
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Callable, Iterator

ProgressListener = Callable[[str], None]
"""Receives human-readable progress messages (e.g. during model load)."""

IncrementCallback = Callable[[str], bool | None]
"""Receives the accumulated text after each streamed increment.

Return False to stop consuming the stream; any other return value
(including None) continues.
"""

_END = object()


class LLMClient(ABC):
    """Abstract base class for streaming text generation providers.

    Implementations only need stream(). generate() assembles the deltas
    and reports progress to an optional callback.

    Example:
        class MyLLMClient(LLMClient):
            def stream(self, prompt, temperature=None):
                for token in my_api.stream(prompt, temp=temperature):
                    yield token
    """

    def initialize(self, on_progress: ProgressListener | None = None) -> None:
        """Prepare the model (download, load, warm up).

        The default implementation has nothing to load and reports ready.
        """
        if on_progress is not None:
            on_progress("LLM ready")

    @abstractmethod
    def stream(self, prompt: str, temperature: float | None = None) -> Iterator[str]:
        """Yield generated text deltas in generation order.

        Args:
            prompt: Full prompt text.
            temperature: Optional sampling temperature. If None, use provider default.
        """
        ...

    def generate(
        self,
        prompt: str,
        on_increment: IncrementCallback | None = None,
        temperature: float | None = None,
    ) -> str:
        """Generate a completion, reporting partial text as it arrives.

        on_increment receives the accumulated text after every non-empty
        delta, so the last increment equals the returned value. If it
        returns False the stream is closed and the text so far is
        returned. Errors from the provider propagate unchanged.

        Returns:
            The assembled text.
        """
        text = ""
        deltas = self.stream(prompt, temperature)
        try:
            for delta in deltas:
                if not delta:
                    continue
                text += delta
                if on_increment is not None and on_increment(text) is False:
                    break
        finally:
            close = getattr(deltas, "close", None)
            if close is not None:
                close()
        return text

    async def astream(self, prompt: str, temperature: float | None = None) -> AsyncIterator[str]:
        """Async version of stream().

        Each delta is pulled in a worker thread so a slow provider never
        blocks the event loop. Order is preserved. Closing the iterator
        closes the provider stream.
        """
        deltas = self.stream(prompt, temperature)
        try:
            while True:
                delta = await asyncio.to_thread(next, deltas, _END)
                if delta is _END:
                    return
                yield delta
        finally:
            close = getattr(deltas, "close", None)
            if close is not None:
                close()

    async def agenerate(
        self,
        prompt: str,
        on_increment: IncrementCallback | None = None,
        temperature: float | None = None,
    ) -> str:
        """Async version of generate()."""
        text = ""
        async with contextlib.aclosing(self.astream(prompt, temperature)) as deltas:
            async for delta in deltas:
                if not delta:
                    continue
                text += delta
                if on_increment is not None and on_increment(text) is False:
                    break
        return text


class EmbeddingClient(ABC):
    """Abstract base class for embedding providers.

    Implementations of this class generate vector embeddings for text.
    The interface supports batched embedding for efficiency.

    Example:
        class MyEmbeddingClient(EmbeddingClient):
            def embed(self, texts):
                return my_api.embed_batch(texts)
    """

    def initialize(self, on_progress: ProgressListener | None = None) -> None:
        """Prepare the model. The default has nothing to load and reports ready."""
        if on_progress is not None:
            on_progress("Embedder ready")

    @abstractmethod
    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts.

        Args:
            texts: List of texts to embed.

        Returns:
            List of embedding vectors, one per input text.
            Order is preserved (result[i] corresponds to texts[i]).
        """
        ...
