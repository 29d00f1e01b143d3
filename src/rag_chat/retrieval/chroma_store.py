"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import chromadb

from rag_chat.retrieval.base import VectorStoreBase

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

    from rag_chat.storage.repository import StoredDocument

logger = logging.getLogger(__name__)


class ChromaVectorStore(VectorStoreBase):
    """Chroma-backed vector store.

    Records are upserted under their stored-document id, so re-indexing
    the same record overwrites instead of duplicating.

    Parameters
    ----------
    embeddings:
        LangChain embedding model used for text → embedding conversion.
    collection_name:
        Name of the Chroma collection.
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    distance_metric:
        ``hnsw:space`` of a newly created collection (``cosine`` | ``l2`` | ``ip``).
    """

    def __init__(
        self,
        embeddings: Embeddings,
        collection_name: str,
        *,
        host: str = "localhost",
        port: int = 8000,
        distance_metric: str = "cosine",
    ) -> None:
        super().__init__(embeddings)
        self.collection_name = collection_name
        self._client = chromadb.HttpClient(host=host, port=port)
        self._collection = self._client.get_or_create_collection(
            name=collection_name,
            metadata={"hnsw:space": distance_metric},
        )

    # -- VectorStoreBase overrides --------------------------------------------

    def add_records(self, records: Sequence[StoredDocument]) -> None:
        if not records:
            return
        contents = [record.content for record in records]
        self._collection.upsert(
            ids=[record.id for record in records],
            embeddings=self.embeddings.embed_documents(contents),
            documents=contents,
        )

    def similarity_search(
        self,
        query_embedding: list[float],
        *,
        k: int = 4,
    ) -> list[dict[str, Any]]:
        results = self._collection.query(
            query_embeddings=[query_embedding],
            n_results=k,
            include=["documents", "distances"],
        )

        hits: list[dict[str, Any]] = []
        ids = results.get("ids", [[]])[0]
        docs = (results.get("documents") or [[]])[0]
        distances = (results.get("distances") or [[]])[0]

        for doc_id, content, dist in zip(ids, docs, distances):
            # Convert a distance into a 0-1 similarity score.
            score = 1.0 / (1.0 + dist)
            hits.append({"id": doc_id, "content": content or "", "score": score})
        return hits

    def health_check(self) -> bool:
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False
