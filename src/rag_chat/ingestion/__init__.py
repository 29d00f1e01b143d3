"""
Ingestion — chunking, persistence and embedding of raw text.

Converts a text blob into stored, embedded chunks that the retrieval
side can search.
"""

from rag_chat.ingestion.chunker import build_splitter, split_text
from rag_chat.ingestion.pipeline import ingest_text

__all__ = ["build_splitter", "ingest_text", "split_text"]
