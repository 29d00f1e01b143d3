"""Chat pipeline state — shared across all graph nodes.

Each field is documented so that new nodes can be added without
guessing what data is available.
"""

from __future__ import annotations

from typing import TypedDict

from langchain_core.documents import Document
from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    """One turn of the conversation supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class ChatState(TypedDict, total=False):
    """Typed state that flows through the chat graph.

    Attributes
    ----------
    messages:
        Full conversation as sent by the caller, latest message last.
    question:
        Content of the latest message.
    chat_history:
        Every earlier message rendered by
        :func:`~rag_chat.chat.prompts.format_chat_history`.
    standalone_question:
        Context-free rewrite of ``question`` produced by the LLM.
    documents:
        Chunks retrieved for ``standalone_question``, best match first.
    context:
        ``documents`` joined into one prompt block.
    """

    messages: list[ChatMessage]
    question: str
    chat_history: str
    standalone_question: str
    documents: list[Document]
    context: str
