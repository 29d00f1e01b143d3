"""Vector store that keeps embeddings in the ``documents`` table itself."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from rag_chat.retrieval.base import VectorStoreBase

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

    from rag_chat.storage.repository import DocumentRepository, StoredDocument

logger = logging.getLogger(__name__)


class SQLVectorStore(VectorStoreBase):
    """Store vectors next to their content and rank by cosine similarity.

    Ranking is an exact scan over every embedded row, which is fine for
    the small corpora this service ingests.

    Parameters
    ----------
    repository:
        Repository over the ``documents`` table.
    embeddings:
        LangChain embedding model.
    """

    def __init__(self, repository: DocumentRepository, embeddings: Embeddings) -> None:
        super().__init__(embeddings)
        self._repository = repository

    # -- VectorStoreBase overrides --------------------------------------------

    def add_records(self, records: Sequence[StoredDocument]) -> None:
        if not records:
            return
        vectors = self.embeddings.embed_documents([record.content for record in records])
        self._repository.set_vectors({record.id: vector for record, vector in zip(records, vectors)})

    def similarity_search(
        self,
        query_embedding: list[float],
        *,
        k: int = 4,
    ) -> list[dict[str, Any]]:
        rows = self._repository.list_embedded()
        if not rows:
            return []

        matrix = np.asarray([vector for _, vector in rows], dtype=float)
        query = np.asarray(query_embedding, dtype=float)

        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        # Zero vectors score 0 instead of dividing by zero.
        scores = np.divide(matrix @ query, norms, out=np.zeros(len(rows)), where=norms > 0)

        top = np.argsort(-scores, kind="stable")[:k]
        return [
            {
                "id": rows[i][0].id,
                "content": rows[i][0].content,
                "score": float(scores[i]),
            }
            for i in top
        ]

    def health_check(self) -> bool:
        try:
            self._repository.count()
            return True
        except Exception:
            logger.warning("Database health-check failed", exc_info=True)
            return False
