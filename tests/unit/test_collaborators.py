"""Unit tests for collaborator factories — LLM, embeddings, Chroma backend."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from rag_chat.chat.llm import get_llm
from rag_chat.config import Settings
from rag_chat.ingestion.embedder import get_embedding_function
from rag_chat.retrieval.retriever import build_vector_store
from rag_chat.storage.repository import StoredDocument


class TestSettings:
    def test_defaults_match_ingest_splitter(self) -> None:
        config = Settings()
        assert (config.chunk_size, config.chunk_overlap) == (256, 20)
        assert config.demo_mode is False

    def test_overlap_not_smaller_than_size_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="chunk_overlap"):
            Settings(chunk_size=50, chunk_overlap=50)

    def test_demo_mode_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEMO_MODE", "true")
        assert Settings().demo_mode is True


class TestGetLlm:
    def test_points_at_compatible_endpoint(self) -> None:
        config = Settings(llm_base_url="http://localhost:11434/v1", llm_model_name="llama3")
        llm = get_llm(config)
        assert llm.model_name == "llama3"
        assert llm.openai_api_base == "http://localhost:11434/v1"
        assert llm.temperature == 0.0

    def test_temperature_override(self) -> None:
        config = Settings(llm_base_url="http://localhost:11434/v1")
        assert get_llm(config, temperature=0.7).temperature == 0.7


def test_openai_embeddings_selected_by_provider() -> None:
    from langchain_openai import OpenAIEmbeddings

    config = Settings(
        embedding_provider="openai",
        embedding_model="text-embedding-3-small",
        openai_api_key="sk-test",
    )
    embedder = get_embedding_function(config)
    assert isinstance(embedder, OpenAIEmbeddings)
    assert embedder.model == "text-embedding-3-small"


class TestChromaVectorStore:
    @pytest.fixture()
    def collection(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture()
    def store(self, collection: MagicMock, repository, embeddings):
        client = MagicMock()
        client.get_or_create_collection.return_value = collection
        with patch("rag_chat.retrieval.chroma_store.chromadb.HttpClient", return_value=client):
            yield build_vector_store(
                Settings(vector_backend="chroma", chroma_collection="test"), repository, embeddings
            )

    def test_factory_builds_chroma_backend(self, store) -> None:
        from rag_chat.retrieval import ChromaVectorStore

        assert isinstance(store, ChromaVectorStore)
        assert store.collection_name == "test"

    def test_add_records_upserts_under_record_ids(self, store, collection: MagicMock) -> None:
        records = [StoredDocument(id="a", content="alpha"), StoredDocument(id="b", content="beta")]
        store.add_records(records)

        kwargs = collection.upsert.call_args.kwargs
        assert kwargs["ids"] == ["a", "b"]
        assert kwargs["documents"] == ["alpha", "beta"]
        assert len(kwargs["embeddings"]) == 2

    def test_add_records_skips_empty_batch(self, store, collection: MagicMock) -> None:
        store.add_records([])
        collection.upsert.assert_not_called()

    def test_similarity_search_converts_distances(self, store, collection: MagicMock) -> None:
        collection.query.return_value = {
            "ids": [["a", "b"]],
            "documents": [["alpha", "beta"]],
            "distances": [[0.0, 1.0]],
        }
        hits = store.similarity_search([0.1, 0.2], k=2)
        assert hits == [
            {"id": "a", "content": "alpha", "score": 1.0},
            {"id": "b", "content": "beta", "score": 0.5},
        ]
