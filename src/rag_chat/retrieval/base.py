"""Abstract base class for vector-store backends.

Adding a new backend (pgvector, OpenSearch, Qdrant …) only requires
subclassing :class:`VectorStoreBase` and implementing the abstract
methods.  The ingest and chat pipelines are backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

    from rag_chat.storage.repository import StoredDocument


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Parameters
    ----------
    embeddings:
        LangChain embedding model used for both records and queries.
    """

    def __init__(self, embeddings: Embeddings) -> None:
        self.embeddings = embeddings

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def add_records(self, records: Sequence[StoredDocument]) -> None:
        """Embed each record's content and index it under the record id."""
        ...

    @abstractmethod
    def similarity_search(
        self,
        query_embedding: list[float],
        *,
        k: int = 4,
    ) -> list[dict[str, Any]]:
        """Return the top-*k* records closest to *query_embedding*.

        Each result dict **must** contain:

        * ``"id"`` – stored document identifier
        * ``"content"`` – the chunk text
        * ``"score"`` – similarity score (higher = more similar)
        """
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...

    # -- optional overrides ---------------------------------------------------

    def similarity_search_by_text(self, query: str, *, k: int = 4) -> list[dict[str, Any]]:
        """Embed *query* and delegate to :meth:`similarity_search`.

        Backends that accept raw text queries can override this.
        """
        return self.similarity_search(self.embeddings.embed_query(query), k=k)
