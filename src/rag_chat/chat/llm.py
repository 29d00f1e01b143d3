"""LLM initialisation — single place to swap providers.

Supports two modes:

1. **OpenAI cloud** (default) — set ``OPENAI_API_KEY``.
2. **OpenAI-compatible server** — set ``LLM_BASE_URL`` to a local Ollama
   (``http://localhost:11434/v1``) or vLLM endpoint.  Both expose
   ``/v1/chat/completions``, so ``ChatOpenAI`` works unchanged.
"""

from __future__ import annotations

import logging

from langchain_openai import ChatOpenAI

from rag_chat.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def get_llm(config: Settings | None = None, temperature: float | None = None) -> ChatOpenAI:
    """Return the configured chat model.

    When ``llm_base_url`` is set the client is pointed at that server
    instead of the OpenAI cloud API.  A dummy API key (``"EMPTY"``) is
    used when none is configured because local servers do not check it.
    """
    config = config or default_settings
    kwargs: dict = {
        "model": config.llm_model_name,
        "temperature": config.llm_temperature if temperature is None else temperature,
    }

    if config.llm_base_url:
        logger.info("Using OpenAI-compatible endpoint: %s", config.llm_base_url)
        kwargs["base_url"] = config.llm_base_url
        # Local servers don't need a real key; LangChain requires a non-empty value.
        kwargs["api_key"] = config.openai_api_key or "EMPTY"
    else:
        kwargs["api_key"] = config.openai_api_key

    return ChatOpenAI(**kwargs)
