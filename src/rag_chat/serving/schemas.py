"""Request / response schemas for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from rag_chat.chat.state import ChatMessage


class IngestRequest(BaseModel):
    """Raw text to split, store and embed."""

    text: str


class IngestResponse(BaseModel):
    ok: bool = True


class ChatRequest(BaseModel):
    """Full conversation, latest message last."""

    messages: list[ChatMessage] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    vector_store: bool
