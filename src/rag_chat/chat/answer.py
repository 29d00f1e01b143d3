"""Streamed answer generation."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from typing import TYPE_CHECKING

from langchain_core.output_parsers import StrOutputParser

from rag_chat.chat.graph import build_graph, create_initial_state
from rag_chat.chat.prompts import ANSWER_PROMPT

if TYPE_CHECKING:
    from langchain_core.language_models import BaseLanguageModel
    from langchain_core.retrievers import BaseRetriever
    from langchain_core.runnables import Runnable

    from rag_chat.chat.state import ChatMessage

logger = logging.getLogger(__name__)


def build_answer_chain(llm: BaseLanguageModel) -> Runnable:
    """Return ``ANSWER_PROMPT | llm | StrOutputParser()``.

    The chain expects ``{"context": ..., "question": ...}``.
    """
    return ANSWER_PROMPT | llm | StrOutputParser()


async def stream_answer(
    messages: Sequence[ChatMessage],
    *,
    llm: BaseLanguageModel,
    retriever: BaseRetriever,
) -> AsyncIterator[bytes]:
    """Prepare the question and start streaming the answer.

    Everything up to and including the first generated chunk runs before
    this coroutine returns, so any failure in that span raises here.  The
    returned iterator then yields the remaining UTF-8 encoded chunks as
    the model produces them.
    """
    state = await build_graph(llm, retriever).ainvoke(create_initial_state(messages))

    chunks = build_answer_chain(llm).astream(
        {"context": state["context"], "question": state["standalone_question"]}
    )
    first = await anext(chunks, None)
    return _relay(first, chunks)


async def _relay(first: str | None, rest: AsyncIterator[str]) -> AsyncIterator[bytes]:
    if first:
        yield first.encode("utf-8")
    async for chunk in rest:
        if chunk:
            yield chunk.encode("utf-8")
    logger.debug("Answer stream finished")
