"""HTTP middleware for the RAG chat service."""

from __future__ import annotations

import logging

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from rag_chat.errors import IngestDisabledError
from rag_chat.serving.dependencies import ensure_ingest_enabled, get_settings

logger = logging.getLogger(__name__)

INGEST_PATH = "/api/retrieval/ingest"


class DemoModeGuardMiddleware(BaseHTTPMiddleware):
    """Refuse ingest requests in demo mode before the body is read.

    Settings are resolved through the app's dependency overrides so a test
    can switch demo mode per request, as it does for the routes.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "POST" and request.url.path == INGEST_PATH:
            provider = request.app.dependency_overrides.get(get_settings, get_settings)
            try:
                ensure_ingest_enabled(provider())
            except IngestDisabledError as exc:
                logger.warning("Rejected ingest on %s: demo mode", request.url.path)
                return JSONResponse({"error": str(exc)}, status_code=exc.status_code)
        return await call_next(request)
