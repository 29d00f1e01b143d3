"""Prompt templates and text formatting for the chat pipeline.

Keeping prompts in one place makes them easy to audit and version.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from langchain_core.prompts import PromptTemplate

if TYPE_CHECKING:
    from langchain_core.documents import Document

    from rag_chat.chat.state import ChatMessage

# ── 1. Question condensation ──────────────────────────────────────────

CONDENSE_QUESTION_TEMPLATE = """\
Given the following conversation and a follow up question, rephrase the follow up question to be a standalone question, in its original language.

Chat History:
{chat_history}
Follow Up Input: {question}
Standalone question:"""

CONDENSE_QUESTION_PROMPT = PromptTemplate.from_template(CONDENSE_QUESTION_TEMPLATE)

# ── 2. Answer generation ──────────────────────────────────────────────

ANSWER_TEMPLATE = """\
Answer the question based only on the following context:
{context}

Question: {question}
"""

ANSWER_PROMPT = PromptTemplate.from_template(ANSWER_TEMPLATE)

# ── Formatting helpers ────────────────────────────────────────────────

ROLE_LABELS = {
    "user": "Human",
    "assistant": "Assistant",
}


def format_chat_history(messages: Sequence[ChatMessage]) -> str:
    """Render *messages* as ``"<Label>: <content>"`` lines, in order.

    ``user`` becomes ``Human`` and ``assistant`` becomes ``Assistant``;
    any other role is used verbatim.
    """
    return "\n".join(
        f"{ROLE_LABELS.get(message.role, message.role)}: {message.content}"
        for message in messages
    )


def combine_documents(documents: Sequence[Document], separator: str = "\n\n") -> str:
    """Join the page content of *documents* into one context block."""
    return separator.join(doc.page_content for doc in documents)
