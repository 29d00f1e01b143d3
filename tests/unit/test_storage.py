"""Unit tests for the document repository."""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from rag_chat.storage import DocumentRepository


class TestCreateMany:
    def test_returns_one_record_per_content_in_order(self, repository: DocumentRepository) -> None:
        contents = ["first chunk", "second chunk", "third chunk"]
        stored = repository.create_many(contents)

        assert [doc.content for doc in stored] == contents
        assert len({doc.id for doc in stored}) == 3
        assert repository.count() == 3

    def test_contents_are_stored_unmodified(self, repository: DocumentRepository) -> None:
        content = "  leading space, trailing newline\n"
        [doc] = repository.create_many([content])
        assert repository.get(doc.id).content == content

    def test_empty_input_writes_nothing(self, repository: DocumentRepository) -> None:
        assert repository.create_many([]) == []
        assert repository.count() == 0

    def test_failed_insert_rolls_back_every_row(self, repository: DocumentRepository) -> None:
        """A NOT NULL violation on one row must leave the table untouched."""
        with pytest.raises(IntegrityError):
            repository.create_many(["ok", None, "also ok"])  # type: ignore[list-item]
        assert repository.count() == 0

    def test_stored_documents_are_immutable(self, repository: DocumentRepository) -> None:
        [doc] = repository.create_many(["frozen"])
        with pytest.raises(ValidationError):
            doc.content = "changed"  # type: ignore[misc]


class TestVectors:
    def test_new_records_have_no_vector(self, repository: DocumentRepository) -> None:
        repository.create_many(["a", "b"])
        assert repository.list_embedded() == []

    def test_set_vectors_writes_into_same_row(self, repository: DocumentRepository) -> None:
        first, second = repository.create_many(["a", "b"])
        repository.set_vectors({first.id: [1.0, 0.0], second.id: [0.0, 1.0]})

        embedded = dict((doc.id, vector) for doc, vector in repository.list_embedded())
        assert embedded == {first.id: [1.0, 0.0], second.id: [0.0, 1.0]}
        assert repository.count() == 2

    def test_set_vectors_unknown_id_raises_and_rolls_back(self, repository: DocumentRepository) -> None:
        [doc] = repository.create_many(["a"])
        with pytest.raises(KeyError):
            repository.set_vectors({doc.id: [1.0], "missing": [2.0]})
        assert repository.list_embedded() == []

    def test_get_unknown_id_returns_none(self, repository: DocumentRepository) -> None:
        assert repository.get("nope") is None
