"""
Retrieval — vector search behind a backend-agnostic interface.

Public surface
--------------
- :class:`SemanticRetriever` — main entry point for ranked retrieval.
- :class:`VectorStoreBase` — abstract backend.
- :class:`SQLVectorStore` — default backend, vectors in the ``documents`` table.
- :class:`ChromaVectorStore` — Chroma backend.
- :func:`build_vector_store` — pick a backend from settings.
"""

from rag_chat.retrieval.base import VectorStoreBase
from rag_chat.retrieval.models import RetrievalResult
from rag_chat.retrieval.retriever import SemanticRetriever, build_vector_store
from rag_chat.retrieval.sql_store import SQLVectorStore

__all__ = [
    "ChromaVectorStore",
    "RetrievalResult",
    "SQLVectorStore",
    "SemanticRetriever",
    "VectorStoreBase",
    "build_vector_store",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import ChromaVectorStore to avoid pulling in chromadb at import time."""
    if name == "ChromaVectorStore":
        from rag_chat.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
