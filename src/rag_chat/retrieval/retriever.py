"""Semantic retriever and vector-store factory.

Usage::

    from rag_chat.retrieval.retriever import SemanticRetriever

    retriever = SemanticRetriever(store, default_k=4)
    for r in retriever.search("How are chunks stored?"):
        print(r.score, r.content[:80])
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rag_chat.retrieval.base import VectorStoreBase
from rag_chat.retrieval.models import RetrievalResult

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings
    from langchain_core.retrievers import BaseRetriever

    from rag_chat.config import Settings
    from rag_chat.storage.repository import DocumentRepository

logger = logging.getLogger(__name__)


class SemanticRetriever:
    """High-level retriever that wraps any :class:`VectorStoreBase`.

    Parameters
    ----------
    store:
        A concrete vector-store backend.
    default_k:
        Default number of results returned by :meth:`search`.
    score_threshold:
        Optional minimum similarity score; when set, results below it are
        discarded. Unset by default, so the store alone decides what is
        returned.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        *,
        default_k: int = 4,
        score_threshold: float | None = None,
    ) -> None:
        self._store = store
        self.default_k = default_k
        self.score_threshold = score_threshold

    # -- public API -----------------------------------------------------------

    def search(self, query: str, *, k: int | None = None) -> list[RetrievalResult]:
        """Run a semantic search and return ranked results.

        Parameters
        ----------
        query:
            Natural-language query string.
        k:
            Number of results (defaults to ``self.default_k``).
        """
        k = k or self.default_k
        raw_hits = self._store.similarity_search_by_text(query, k=k)
        return self._to_results(raw_hits)

    # -- LangChain compat -----------------------------------------------------

    def as_langchain_retriever(self, k: int | None = None) -> BaseRetriever:
        """Return a LangChain-compatible retriever so it composes with runnables."""
        from langchain_core.documents import Document
        from langchain_core.retrievers import BaseRetriever

        outer = self

        class _LCRetriever(BaseRetriever):
            """Adapter that satisfies LangChain's retriever protocol."""

            def _get_relevant_documents(self_inner, query: str, **kwargs: Any) -> list[Document]:  # type: ignore[override]  # noqa: N805
                results = outer.search(query, k=k)
                return [
                    Document(
                        page_content=r.content,
                        id=r.document_id,
                        metadata={"score": r.score},
                    )
                    for r in results
                ]

        return _LCRetriever()

    # -- internals ------------------------------------------------------------

    def _to_results(self, raw_hits: list[dict[str, Any]]) -> list[RetrievalResult]:
        results: list[RetrievalResult] = []
        for hit in raw_hits:
            score = hit.get("score")
            if self.score_threshold is not None and score is not None and score < self.score_threshold:
                continue
            results.append(
                RetrievalResult(
                    document_id=hit.get("id"),
                    content=hit.get("content", ""),
                    score=score,
                )
            )
        return results


# ---------------------------------------------------------------------------
# Backend factory
# ---------------------------------------------------------------------------


def build_vector_store(
    config: Settings,
    repository: DocumentRepository,
    embeddings: Embeddings,
) -> VectorStoreBase:
    """Instantiate the backend named by ``config.vector_backend``."""
    if config.vector_backend == "chroma":
        from rag_chat.retrieval.chroma_store import ChromaVectorStore

        logger.info("Using Chroma vector store at %s:%d", config.chroma_host, config.chroma_port)
        return ChromaVectorStore(
            embeddings,
            config.chroma_collection,
            host=config.chroma_host,
            port=config.chroma_port,
        )

    from rag_chat.retrieval.sql_store import SQLVectorStore

    logger.info("Using SQL vector store")
    return SQLVectorStore(repository, embeddings)
