"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

from rag_chat.retrieval.base import VectorStoreBase
from rag_chat.storage import DocumentRepository, create_tables, get_engine, get_session_factory
from rag_chat.storage.repository import StoredDocument


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


class FakeVectorStore(VectorStoreBase):
    """In-memory fake that records what it was asked and returns canned hits."""

    def __init__(self, hits: list[dict[str, Any]] | None = None) -> None:
        super().__init__(DeterministicFakeEmbedding(size=8))
        self._hits: list[dict[str, Any]] = hits or []
        self.added: list[StoredDocument] = []
        self.queries: list[str] = []

    def add_records(self, records: Sequence[StoredDocument]) -> None:
        self.added.extend(records)

    def similarity_search(self, query_embedding: list[float], *, k: int = 4) -> list[dict[str, Any]]:
        return self._hits[:k]

    def similarity_search_by_text(self, query: str, *, k: int = 4) -> list[dict[str, Any]]:
        self.queries.append(query)
        return self._hits[:k]

    def health_check(self) -> bool:
        return True


@pytest.fixture()
def repository() -> Iterator[DocumentRepository]:
    """Repository over a fresh in-memory SQLite database."""
    engine = get_engine("sqlite://")
    create_tables(engine)
    yield DocumentRepository(get_session_factory(engine))
    engine.dispose()


@pytest.fixture()
def embeddings() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=16)


@pytest.fixture()
def make_fake_store() -> type[FakeVectorStore]:
    """Return the fake store class so tests can build it with their own hits."""
    return FakeVectorStore
