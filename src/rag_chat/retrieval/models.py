"""Domain models for retrieval results."""

from __future__ import annotations

from pydantic import BaseModel


class RetrievalResult(BaseModel):
    """A single retrieved chunk with its ranking score."""

    document_id: str | None = None
    content: str
    score: float | None = None

    def __str__(self) -> str:  # noqa: D105
        score = f"{self.score:.3f}" if self.score is not None else "?"
        return f"[{self.document_id}@{score}] {self.content[:120]}…"
