"""Unit tests for the retrieval layer — SemanticRetriever and SQLVectorStore."""

from __future__ import annotations

from typing import Any

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings

from rag_chat.config import Settings
from rag_chat.retrieval.models import RetrievalResult
from rag_chat.retrieval.retriever import SemanticRetriever, build_vector_store
from rag_chat.retrieval.sql_store import SQLVectorStore
from rag_chat.storage import DocumentRepository

SAMPLE_HITS: list[dict[str, Any]] = [
    {"id": "doc-001", "content": "Chunks are stored one row each.", "score": 0.92},
    {"id": "doc-002", "content": "Vectors live next to their content.", "score": 0.87},
    {"id": "doc-003", "content": "Unrelated trivia.", "score": 0.15},
]


@pytest.fixture()
def fake_store(make_fake_store):
    return make_fake_store(hits=SAMPLE_HITS)


class SignEmbeddings(Embeddings):
    """Maps text starting with "neg" to -x and everything else to +x."""

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return [-1.0, 0.0] if text.startswith("neg") else [1.0, 0.0]


# ── SemanticRetriever ──────────────────────────────────────────────────


class TestSemanticRetriever:
    def test_search_returns_results_in_store_order(self, fake_store) -> None:
        results = SemanticRetriever(fake_store).search("how are chunks stored?")
        assert [r.document_id for r in results] == ["doc-001", "doc-002", "doc-003"]
        assert all(isinstance(r, RetrievalResult) for r in results)
        assert fake_store.queries == ["how are chunks stored?"]

    def test_search_honours_k(self, fake_store) -> None:
        results = SemanticRetriever(fake_store, default_k=5).search("q", k=1)
        assert len(results) == 1

    def test_score_threshold_discards_weak_hits(self, fake_store) -> None:
        results = SemanticRetriever(fake_store, score_threshold=0.5).search("q")
        assert [r.document_id for r in results] == ["doc-001", "doc-002"]

    def test_negative_scores_are_kept_by_default(self, repository: DocumentRepository) -> None:
        store = SQLVectorStore(repository, SignEmbeddings())
        store.add_records(repository.create_many(["neg one", "neg two"]))

        results = SemanticRetriever(store, default_k=4).search("pos query")

        assert len(results) == 2
        assert all(r.score == pytest.approx(-1.0) for r in results)

    def test_langchain_adapter_returns_documents(self, fake_store) -> None:
        lc_retriever = SemanticRetriever(fake_store).as_langchain_retriever(k=2)
        docs = lc_retriever.invoke("q")
        assert [d.page_content for d in docs] == [
            "Chunks are stored one row each.",
            "Vectors live next to their content.",
        ]
        assert docs[0].id == "doc-001"
        assert docs[0].metadata["score"] == pytest.approx(0.92)

    def test_result_str_is_compact(self) -> None:
        r = RetrievalResult(document_id="d1", content="x" * 500, score=0.5)
        assert str(r).startswith("[d1@0.500] ")
        assert len(str(r)) < 200


# ── SQLVectorStore ─────────────────────────────────────────────────────


class TestSQLVectorStore:
    def test_add_records_writes_vectors_into_rows(
        self, repository: DocumentRepository, embeddings: DeterministicFakeEmbedding
    ) -> None:
        store = SQLVectorStore(repository, embeddings)
        records = repository.create_many(["alpha", "beta"])
        store.add_records(records)

        embedded = repository.list_embedded()
        assert {doc.content for doc, _ in embedded} == {"alpha", "beta"}
        assert all(len(vector) == 16 for _, vector in embedded)

    def test_exact_text_ranks_first(
        self, repository: DocumentRepository, embeddings: DeterministicFakeEmbedding
    ) -> None:
        store = SQLVectorStore(repository, embeddings)
        store.add_records(repository.create_many(["alpha", "beta", "gamma", "delta"]))

        hits = store.similarity_search_by_text("gamma", k=2)
        assert len(hits) == 2
        assert hits[0]["content"] == "gamma"
        assert hits[0]["score"] == pytest.approx(1.0)
        assert hits[0]["score"] >= hits[1]["score"]

    def test_ranking_by_cosine_similarity(self, repository: DocumentRepository, embeddings) -> None:
        store = SQLVectorStore(repository, embeddings)
        east, north, zero = repository.create_many(["east", "north", "zero"])
        repository.set_vectors({east.id: [1.0, 0.0], north.id: [0.0, 1.0], zero.id: [0.0, 0.0]})

        hits = store.similarity_search([0.9, 0.1], k=3)
        assert [h["id"] for h in hits] == [east.id, north.id, zero.id]
        assert hits[2]["score"] == 0.0

    def test_empty_store_returns_nothing(self, repository: DocumentRepository, embeddings) -> None:
        assert SQLVectorStore(repository, embeddings).similarity_search([1.0, 0.0]) == []

    def test_records_without_vectors_are_ignored(self, repository: DocumentRepository, embeddings) -> None:
        store = SQLVectorStore(repository, embeddings)
        repository.create_many(["not yet embedded"])
        assert store.similarity_search_by_text("not yet embedded") == []

    def test_health_check(self, repository: DocumentRepository, embeddings) -> None:
        assert SQLVectorStore(repository, embeddings).health_check() is True


def test_build_vector_store_defaults_to_sql(repository: DocumentRepository, embeddings) -> None:
    store = build_vector_store(Settings(vector_backend="sql"), repository, embeddings)
    assert isinstance(store, SQLVectorStore)
