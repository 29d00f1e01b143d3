"""FastAPI dependency providers.

Collaborators are built lazily on first use and cached for the life of
the process.  Tests replace any of them through
``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseLanguageModel

from rag_chat.config import Settings, settings as default_settings
from rag_chat.errors import IngestDisabledError
from rag_chat.retrieval.base import VectorStoreBase
from rag_chat.storage import DocumentRepository, create_tables, get_engine, get_session_factory


def get_settings() -> Settings:
    return default_settings


@lru_cache
def get_repository() -> DocumentRepository:
    """Repository over the configured database; creates the schema once."""
    engine = get_engine(default_settings.database_url)
    create_tables(engine)
    return DocumentRepository(get_session_factory(engine))


@lru_cache
def get_embeddings() -> Embeddings:
    from rag_chat.ingestion.embedder import get_embedding_function

    return get_embedding_function(default_settings)


@lru_cache
def get_vector_store() -> VectorStoreBase:
    from rag_chat.retrieval.retriever import build_vector_store

    return build_vector_store(default_settings, get_repository(), get_embeddings())


@lru_cache
def get_chat_model() -> BaseLanguageModel:
    from rag_chat.chat.llm import get_llm

    return get_llm(default_settings)


def ensure_ingest_enabled(config: Settings) -> None:
    """Raise :class:`IngestDisabledError` when demo mode is on."""
    if config.demo_mode:
        raise IngestDisabledError()
