"""
Storage — relational persistence for ingested chunks.

Each chunk becomes one row of the ``documents`` table.  Rows are inserted
in a single transaction per ingest request and later receive their
embedding vector in place.
"""

from rag_chat.storage.connection import create_tables, get_engine, get_session_factory
from rag_chat.storage.models import Base, DocumentRecord
from rag_chat.storage.repository import DocumentRepository, StoredDocument

__all__ = [
    "Base",
    "DocumentRecord",
    "DocumentRepository",
    "StoredDocument",
    "create_tables",
    "get_engine",
    "get_session_factory",
]
