"""Shared configuration loaded from environment / ``.env``."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Ingest
    demo_mode: bool = Field(default=False, description="Reject ingest requests when enabled")
    chunk_size: int = Field(default=256, gt=0, description="Maximum characters per chunk")
    chunk_overlap: int = Field(default=20, ge=0, description="Characters shared by consecutive chunks")
    chunk_language: str = Field(default="markdown", description="Splitter language preset")

    # LLM
    openai_api_key: str = Field(default="", description="OpenAI API key (or dummy value for local servers)")
    llm_model_name: str = Field(default="gpt-4o-mini", description="LLM model identifier")
    llm_base_url: str = Field(
        default="",
        description=(
            "Base URL for the LLM API. Leave empty to use OpenAI cloud. "
            "Set to an OpenAI-compatible endpoint for local serving, e.g. "
            "'http://localhost:11434/v1' for Ollama"
        ),
    )
    llm_temperature: float = 0.0

    # Embedding
    embedding_provider: Literal["huggingface", "openai"] = "huggingface"
    embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"

    # Storage
    database_url: str = "sqlite:///./rag_chat.db"
    vector_backend: Literal["sql", "chroma"] = "sql"
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_collection: str = "rag_chat"

    # Retrieval
    retriever_k: int = Field(default=4, gt=0)

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @model_validator(mode="after")
    def _check_chunk_overlap(self) -> Settings:
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        return self


# Module-level instance; import `settings` wherever needed.
settings = Settings()
