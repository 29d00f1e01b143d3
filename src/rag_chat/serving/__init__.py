"""
Serving — FastAPI application for ingest and conversational retrieval.

Run locally with ``uvicorn rag_chat.serving.app:app``.
"""
