"""ORM model for stored document chunks.

One row per chunk produced at ingest time.  ``vector`` stays ``NULL``
until the embedding step writes it back into the same row.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for ORM model registration."""


class DocumentRecord(Base):
    """A persisted chunk and, once embedded, its vector.

    Attributes
    ----------
    id:
        Opaque uuid4 string, generated on insert.
    content:
        The chunk text, stored unmodified.
    vector:
        Embedding as a JSON list of floats (``None`` until embedded).
    created_at:
        UTC insertion timestamp.
    """

    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    vector: Mapped[list[float] | None] = mapped_column(JSON(none_as_null=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"DocumentRecord(id={self.id!r}, content={self.content[:40]!r})"
