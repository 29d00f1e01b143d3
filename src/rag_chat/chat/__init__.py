"""
Chat — conversational retrieval built with LangGraph and LangChain.

This module contains **zero** HTTP dependencies.  The LLM and retriever
are passed in, so the pipeline can be tested locally with fakes.

Public API
----------
- :func:`build_graph` — compile the question-preparation workflow.
- :func:`stream_answer` — run the workflow and stream the answer bytes.
- :func:`format_chat_history` — render history as ``"Label: content"`` lines.
- :class:`ChatMessage` / :class:`ChatState` — data flowing through the graph.
"""

from rag_chat.chat.answer import build_answer_chain, stream_answer
from rag_chat.chat.graph import build_graph, create_initial_state
from rag_chat.chat.prompts import combine_documents, format_chat_history
from rag_chat.chat.state import ChatMessage, ChatState

__all__ = [
    "ChatMessage",
    "ChatState",
    "build_answer_chain",
    "build_graph",
    "combine_documents",
    "create_initial_state",
    "format_chat_history",
    "stream_answer",
]
