"""Embedding model selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rag_chat.config import Settings, settings as default_settings

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


def get_embedding_function(config: Settings | None = None) -> Embeddings:
    """Return the configured LangChain embedding model.

    ``embedding_provider="huggingface"`` loads a local sentence-transformer;
    ``"openai"`` uses the OpenAI embeddings API with the configured key.
    Provider packages are imported lazily so only the selected one has to
    be importable.
    """
    config = config or default_settings

    if config.embedding_provider == "openai":
        from langchain_openai import OpenAIEmbeddings

        logger.info("Using OpenAI embeddings: %s", config.embedding_model)
        return OpenAIEmbeddings(model=config.embedding_model, api_key=config.openai_api_key)

    from langchain_huggingface import HuggingFaceEmbeddings

    logger.info("Using HuggingFace embeddings: %s", config.embedding_model)
    return HuggingFaceEmbeddings(model_name=config.embedding_model)
