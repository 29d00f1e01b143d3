"""LangGraph graph definition — the question-preparation workflow.

This module wires the nodes defined in :mod:`rag_chat.chat.nodes` into a
compiled :class:`StateGraph` that prepares everything the answer step
needs:

1. **Split** the conversation into the latest question and its history.
2. **Condense** both into a standalone question (LLM, non-streamed).
3. **Retrieve** the chunks that best match the standalone question.
4. **Combine** them into a single context block.

Answer generation is streamed separately (see :mod:`rag_chat.chat.answer`)
because it must reach the caller token by token.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from langgraph.graph import END, StateGraph

from rag_chat.chat.nodes import (
    combine_context,
    make_condense_node,
    make_retrieve_node,
    split_history,
)
from rag_chat.chat.state import ChatMessage, ChatState

if TYPE_CHECKING:
    from langchain_core.language_models import BaseLanguageModel
    from langchain_core.retrievers import BaseRetriever


def build_graph(llm: BaseLanguageModel, retriever: BaseRetriever) -> Any:
    """Construct and return the compiled preparation graph.

    Graph topology::

        split_history → condense_question → retrieve_documents → combine_context → END

    Returns
    -------
    CompiledStateGraph
        A compiled LangGraph workflow ready for ``.ainvoke()``.
    """
    workflow = StateGraph(ChatState)

    # -- Nodes ---------------------------------------------------------------
    workflow.add_node("split_history", split_history)
    workflow.add_node("condense_question", make_condense_node(llm))
    workflow.add_node("retrieve_documents", make_retrieve_node(retriever))
    workflow.add_node("combine_context", combine_context)

    # -- Edges ---------------------------------------------------------------
    workflow.set_entry_point("split_history")
    workflow.add_edge("split_history", "condense_question")
    workflow.add_edge("condense_question", "retrieve_documents")
    workflow.add_edge("retrieve_documents", "combine_context")
    workflow.add_edge("combine_context", END)

    return workflow.compile()


def create_initial_state(messages: Sequence[ChatMessage]) -> dict[str, Any]:
    """Build the initial state dict for ``graph.ainvoke()``."""
    return {"messages": list(messages)}
