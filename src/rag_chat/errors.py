"""Exceptions surfaced at the HTTP boundary with a fixed status code."""

from __future__ import annotations

DEMO_MODE_MESSAGE = "\n".join(
    [
        "Ingest is not supported in demo mode.",
        "Please set up your own deployment of this service to ingest documents.",
    ]
)


class RagChatError(Exception):
    """Base class for errors that map onto a specific HTTP status."""

    status_code: int = 500


class IngestDisabledError(RagChatError):
    """Raised when ingest is requested while demo mode is active."""

    status_code = 403

    def __init__(self, message: str = DEMO_MODE_MESSAGE) -> None:
        super().__init__(message)
