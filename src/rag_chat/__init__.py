"""Conversational retrieval over ingested text."""

__version__ = "0.1.0"
