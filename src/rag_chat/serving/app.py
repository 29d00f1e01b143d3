"""FastAPI application exposing ingest and conversational retrieval."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse, StreamingResponse
from langchain_core.language_models import BaseLanguageModel

from rag_chat.chat.answer import stream_answer
from rag_chat.config import Settings, settings
from rag_chat.errors import RagChatError
from rag_chat.ingestion.pipeline import ingest_text
from rag_chat.retrieval.base import VectorStoreBase
from rag_chat.retrieval.retriever import SemanticRetriever
from rag_chat.serving.dependencies import (
    get_chat_model,
    get_repository,
    get_settings,
    get_vector_store,
)
from rag_chat.serving.middleware import DemoModeGuardMiddleware
from rag_chat.serving.schemas import ChatRequest, ErrorResponse, HealthResponse, IngestRequest, IngestResponse
from rag_chat.storage.repository import DocumentRepository

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Apply the root logging level and format for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging(settings.log_level)

app = FastAPI(
    title="RAG Chat API",
    version="0.1.0",
    description="Ingest text into a vector store and chat over it with streamed answers.",
)
app.add_middleware(DemoModeGuardMiddleware)


# ── Error handlers ────────────────────────────────────────────────────
@app.exception_handler(RagChatError)
async def rag_chat_error_handler(request: Request, exc: RagChatError) -> JSONResponse:
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=exc.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse({"error": str(exc)}, status_code=500)


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
def health(vector_store: VectorStoreBase = Depends(get_vector_store)) -> HealthResponse | JSONResponse:
    """Report whether the vector store backend is reachable."""
    if vector_store.health_check():
        return HealthResponse(status="ok", vector_store=True)
    return JSONResponse({"status": "degraded", "vector_store": False}, status_code=503)


@app.post(
    "/api/retrieval/ingest",
    response_model=IngestResponse,
    responses={403: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def ingest(
    request: IngestRequest,
    config: Settings = Depends(get_settings),
    repository: DocumentRepository = Depends(get_repository),
    vector_store: VectorStoreBase = Depends(get_vector_store),
) -> IngestResponse | JSONResponse:
    """Split, store and embed the posted text."""
    try:
        ingest_text(
            request.text,
            repository=repository,
            vector_store=vector_store,
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap,
            language=config.chunk_language,
        )
    except Exception as exc:
        logger.exception("Ingest failed")
        return JSONResponse({"error": str(exc)}, status_code=500)
    return IngestResponse(ok=True)


@app.post(
    "/api/chat/retrieval",
    response_class=StreamingResponse,
    responses={500: {"model": ErrorResponse}},
)
async def chat_retrieval(
    request: ChatRequest,
    config: Settings = Depends(get_settings),
    llm: BaseLanguageModel = Depends(get_chat_model),
    vector_store: VectorStoreBase = Depends(get_vector_store),
) -> Response:
    """Answer the latest message using retrieved context, streamed as plain text."""
    try:
        retriever = SemanticRetriever(vector_store, default_k=config.retriever_k).as_langchain_retriever()
        stream = await stream_answer(request.messages, llm=llm, retriever=retriever)
    except Exception as exc:
        logger.exception("Chat retrieval failed")
        return JSONResponse({"error": str(exc)}, status_code=500)
    return StreamingResponse(stream, media_type="text/plain; charset=utf-8")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
