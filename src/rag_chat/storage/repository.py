"""Transactional access to the ``documents`` table."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict
from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker

from rag_chat.storage.models import DocumentRecord

logger = logging.getLogger(__name__)


class StoredDocument(BaseModel):
    """Detached, immutable view of one ``documents`` row."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    content: str


class DocumentRepository:
    """Create and read stored chunks.

    Every public method runs in its own transaction opened with
    ``sessionmaker.begin()``: it commits when the block exits normally and
    rolls back when anything inside raises.

    Parameters
    ----------
    session_factory:
        A :class:`~sqlalchemy.orm.sessionmaker` bound to the target engine.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def create_many(self, contents: Sequence[str]) -> list[StoredDocument]:
        """Insert one row per entry of *contents*, all or nothing.

        Returns the created documents in the same order as *contents*.
        """
        if not contents:
            return []

        records = [DocumentRecord(content=content) for content in contents]
        with self._session_factory.begin() as session:
            session.add_all(records)
            session.flush()
            stored = [StoredDocument.model_validate(record) for record in records]

        logger.info("Committed %d document record(s)", len(stored))
        return stored

    def set_vectors(self, vectors: Mapping[str, list[float]]) -> None:
        """Write each vector into the row with the matching id."""
        if not vectors:
            return

        with self._session_factory.begin() as session:
            for doc_id, vector in vectors.items():
                record = session.get(DocumentRecord, doc_id)
                if record is None:
                    raise KeyError(f"No stored document with id {doc_id!r}")
                record.vector = [float(x) for x in vector]

    def list_embedded(self) -> list[tuple[StoredDocument, list[float]]]:
        """Return every row that already carries a vector, oldest first."""
        stmt = (
            select(DocumentRecord)
            .where(DocumentRecord.vector.is_not(None))
            .order_by(DocumentRecord.created_at)
        )
        with self._session_factory() as session:
            return [
                (StoredDocument.model_validate(record), record.vector)
                for record in session.scalars(stmt)
            ]

    def get(self, doc_id: str) -> StoredDocument | None:
        with self._session_factory() as session:
            record = session.get(DocumentRecord, doc_id)
            return StoredDocument.model_validate(record) if record is not None else None

    def count(self) -> int:
        with self._session_factory() as session:
            return session.scalar(select(func.count()).select_from(DocumentRecord)) or 0
