"""Text chunking strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from langchain_text_splitters import Language, RecursiveCharacterTextSplitter

if TYPE_CHECKING:
    from langchain_core.documents import Document


def build_splitter(
    chunk_size: int = 256,
    chunk_overlap: int = 20,
    language: str = "markdown",
) -> RecursiveCharacterTextSplitter:
    """Return a structure-aware splitter for *language*.

    Parameters
    ----------
    chunk_size:
        Maximum number of characters per chunk.
    chunk_overlap:
        Number of overlapping characters between consecutive chunks.
        Must be smaller than *chunk_size*.
    language:
        A :class:`~langchain_text_splitters.Language` value such as
        ``"markdown"``, ``"python"`` or ``"html"``; its separators decide
        where the text is preferably cut.
    """
    if chunk_overlap >= chunk_size:
        raise ValueError(
            f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
        )
    return RecursiveCharacterTextSplitter.from_language(
        Language(language),
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
    )


def split_text(
    text: str,
    chunk_size: int = 256,
    chunk_overlap: int = 20,
    language: str = "markdown",
) -> list[Document]:
    """Split *text* into ordered, overlapping chunks.

    Returns
    -------
    list[Document]
        One document per chunk, in source order.  Blank input yields an
        empty list.
    """
    splitter = build_splitter(chunk_size, chunk_overlap, language)
    return splitter.create_documents([text])
