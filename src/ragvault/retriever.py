"""Query pipeline for ragvault: retrieve context, then generate an answer."""

import asyncio
import time
from collections.abc import Sequence

from ragvault.embedder import Embedder
from ragvault.logging import get_logger
from ragvault.models import Exchange, QueryResponse, SearchResult
from ragvault.providers import IncrementCallback, LLMClient
from ragvault.retrieval import RetrievalEngine

logger = get_logger(__name__)

PROMPT_TEMPLATE = """{history}Context:
{context}

Question: {query}

Answer:"""

EMPTY_STORE_ANSWER = "Please upload a document first before asking questions."


def format_history(history: Sequence[Exchange]) -> str:
    """Render prior exchanges as a prompt prefix. Empty history renders as ""."""
    if not history:
        return ""
    turns = [f"Q: {exchange.question}\nA: {exchange.answer}" for exchange in history]
    return "Conversation so far:\n" + "\n\n".join(turns) + "\n\n"


def format_context(results: Sequence[SearchResult], cite_sources: bool = False) -> str:
    """Join retrieved chunk texts with blank lines, optionally tagged with their source."""
    parts = []
    for result in results:
        chunk = result.chunk
        if cite_sources:
            filename = chunk.metadata.get("filename", chunk.id)
            page = chunk.metadata.get("page_number")
            label = f"{filename}, page {page}" if page is not None else f"{filename}"
            parts.append(f"[Source: {label}]\n{chunk.text}")
        else:
            parts.append(chunk.text)
    return "\n\n".join(parts)


class Retriever:
    """Orchestrates a RAG query.

    Pipeline:
    1. Short-circuit when the store is empty
    2. Embed the question
    3. Search the engine for the top context_k chunks
    4. Build a prompt from history, context and question
    5. Stream the answer from the LLM client (if one is configured)
    """

    def __init__(
        self,
        engine: RetrievalEngine,
        embedder: Embedder,
        llm_client: LLMClient | None = None,
        context_k: int = 3,
        prompt_template: str | None = None,
        temperature: float | None = None,
    ) -> None:
        """Initialize the retriever.

        Args:
            engine: Retrieval engine over the session's chunk store
            embedder: Embedder for the query text
            llm_client: LLM client for answer generation (optional)
            context_k: Number of chunks placed in the prompt
            prompt_template: Custom template with {history}, {context} and
                {query} placeholders
            temperature: Sampling temperature passed to the LLM client
        """
        self.engine = engine
        self.embedder = embedder
        self._llm_client = llm_client
        self.context_k = context_k
        self.prompt_template = prompt_template or PROMPT_TEMPLATE
        self.temperature = temperature

    def get_context(
        self,
        query: str,
        k: int | None = None,
        use_hybrid: bool = False,
    ) -> list[SearchResult]:
        """Embed the query and return the most relevant chunks.

        Args:
            query: User's question
            k: Number of results to return (default: self.context_k)
            use_hybrid: Blend in BM25 keyword relevance

        Returns:
            List of SearchResult objects ordered by relevance
        """
        k = self.context_k if k is None else k

        start = time.perf_counter()
        query_embedding = self.embedder.embed_text(query)
        embedded = time.perf_counter()
        results = self.engine.search(query_embedding, k, use_hybrid=use_hybrid, query_text=query)
        searched = time.perf_counter()

        logger.info(
            "Retrieved %d chunks (embedding %.2fs, search %.2fs)",
            len(results),
            embedded - start,
            searched - embedded,
        )
        return results

    def build_prompt(
        self,
        query: str,
        results: Sequence[SearchResult],
        history: Sequence[Exchange] = (),
        cite_sources: bool = False,
    ) -> str:
        """Render the generation prompt."""
        return self.prompt_template.format(
            history=format_history(history),
            context=format_context(results, cite_sources=cite_sources),
            query=query,
        )

    def query(
        self,
        query: str,
        on_increment: IncrementCallback | None = None,
        history: Sequence[Exchange] = (),
        use_hybrid: bool = False,
        cite_sources: bool = False,
    ) -> QueryResponse:
        """Answer a question from the stored chunks.

        If no llm_client is configured, returns the retrieved results with
        an empty answer.

        Args:
            query: User's question
            on_increment: Receives the accumulated answer as it streams;
                return False to stop generation early
            history: Prior exchanges to include in the prompt
            use_hybrid: Blend in BM25 keyword relevance
            cite_sources: Tag each context chunk with filename and page

        Returns:
            QueryResponse with results and generated answer
        """
        if self.engine.chunk_store.count() == 0:
            logger.warning("Query against an empty chunk store")
            return QueryResponse(query=query, answer=EMPTY_STORE_ANSWER, results=[])

        results = self.get_context(query, use_hybrid=use_hybrid)

        answer = ""
        if self._llm_client is not None:
            prompt = self.build_prompt(query, results, history=history, cite_sources=cite_sources)
            start = time.perf_counter()
            answer = self._llm_client.generate(
                prompt,
                on_increment=on_increment,
                temperature=self.temperature,
            )
            logger.info(
                "Generated %d-char answer in %.2fs (prompt %d chars)",
                len(answer),
                time.perf_counter() - start,
                len(prompt),
            )

        return QueryResponse(query=query, answer=answer, results=results)

    async def aquery(
        self,
        query: str,
        on_increment: IncrementCallback | None = None,
        history: Sequence[Exchange] = (),
        use_hybrid: bool = False,
        cite_sources: bool = False,
    ) -> QueryResponse:
        """Async version of query().

        Store and embedding calls run in worker threads; the answer is
        streamed through LLMClient.agenerate().
        """
        if await self.engine.chunk_store.acount() == 0:
            logger.warning("Query against an empty chunk store")
            return QueryResponse(query=query, answer=EMPTY_STORE_ANSWER, results=[])

        results = await asyncio.to_thread(self.get_context, query, None, use_hybrid)

        answer = ""
        if self._llm_client is not None:
            prompt = self.build_prompt(query, results, history=history, cite_sources=cite_sources)
            start = time.perf_counter()
            answer = await self._llm_client.agenerate(
                prompt,
                on_increment=on_increment,
                temperature=self.temperature,
            )
            logger.info(
                "Generated %d-char answer in %.2fs (prompt %d chars)",
                len(answer),
                time.perf_counter() - start,
                len(prompt),
            )

        return QueryResponse(query=query, answer=answer, results=results)
