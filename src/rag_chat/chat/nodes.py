"""Graph nodes — each function is one stage of the chat pipeline.

Node contract
-------------
* Accepts the full :class:`ChatState` dict.
* Returns a *partial* dict with **only the keys that changed**.
* Collaborators (LLM, retriever) are bound by the ``make_*`` factories
  so every node can be exercised with fakes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.output_parsers import StrOutputParser

from rag_chat.chat.prompts import CONDENSE_QUESTION_PROMPT, combine_documents, format_chat_history
from rag_chat.chat.state import ChatState

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from langchain_core.language_models import BaseLanguageModel
    from langchain_core.retrievers import BaseRetriever

    AsyncNode = Callable[[ChatState], Awaitable[dict[str, Any]]]

logger = logging.getLogger(__name__)


# ── 1. SPLIT HISTORY ──────────────────────────────────────────────────


def split_history(state: ChatState) -> dict[str, Any]:
    """Separate the latest message from the history and format the history."""
    messages = state.get("messages") or []
    if not messages:
        raise ValueError("At least one message is required")

    *previous, current = messages
    logger.info("Chat request with %d previous message(s)", len(previous))
    return {
        "question": current.content,
        "chat_history": format_chat_history(previous),
    }


# ── 2. CONDENSE QUESTION ──────────────────────────────────────────────


def make_condense_node(llm: BaseLanguageModel) -> AsyncNode:
    """Bind *llm* into the node that rewrites the question as a standalone one."""
    chain = CONDENSE_QUESTION_PROMPT | llm | StrOutputParser()

    async def condense_question(state: ChatState) -> dict[str, Any]:
        standalone = await chain.ainvoke(
            {"question": state["question"], "chat_history": state["chat_history"]}
        )
        logger.debug("Standalone question: %s", standalone)
        return {"standalone_question": standalone}

    return condense_question


# ── 3. RETRIEVE DOCUMENTS ─────────────────────────────────────────────


def make_retrieve_node(retriever: BaseRetriever) -> AsyncNode:
    """Bind *retriever* into the node that fetches matching chunks."""

    async def retrieve_documents(state: ChatState) -> dict[str, Any]:
        documents = await retriever.ainvoke(state["standalone_question"])
        logger.info("Retrieved %d document(s)", len(documents))
        return {"documents": documents}

    return retrieve_documents


# ── 4. COMBINE CONTEXT ────────────────────────────────────────────────


def combine_context(state: ChatState) -> dict[str, Any]:
    """Join retrieved chunks into the prompt context block."""
    return {"context": combine_documents(state.get("documents") or [])}
