"""Ingest pipeline: chunks in, stored and indexed records out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rag_chat.ingestion.chunker import split_text

if TYPE_CHECKING:
    from rag_chat.retrieval.base import VectorStoreBase
    from rag_chat.storage.repository import DocumentRepository, StoredDocument

logger = logging.getLogger(__name__)


def ingest_text(
    text: str,
    *,
    repository: DocumentRepository,
    vector_store: VectorStoreBase,
    chunk_size: int = 256,
    chunk_overlap: int = 20,
    language: str = "markdown",
) -> list[StoredDocument]:
    """Split *text*, store one record per chunk, then index the records.

    The inserts share one transaction, so either every chunk is stored or
    none is.  Indexing happens after the commit; a failure there leaves
    the committed rows without vectors.

    Returns
    -------
    list[StoredDocument]
        The stored records, in chunk order.
    """
    chunks = split_text(text, chunk_size=chunk_size, chunk_overlap=chunk_overlap, language=language)
    logger.info("Split %d character(s) into %d chunk(s)", len(text), len(chunks))

    records = repository.create_many([chunk.page_content for chunk in chunks])
    vector_store.add_records(records)
    logger.info("Indexed %d record(s) in %s", len(records), type(vector_store).__name__)
    return records
