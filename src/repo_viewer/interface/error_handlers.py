"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
``{"status": "error", "kind": "...", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from repo_viewer.domain.exceptions import (
    DecodeError,
    HttpStatusError,
    InvalidRequestUrlError,
    NetworkError,
    RepoViewerError,
    ResourceNotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

# Most specific first: HttpStatusError would otherwise swallow its subclasses.
_EXCEPTION_STATUS: list[tuple[type[RepoViewerError], int]] = [
    (ResourceNotFoundError, 404),
    (UnauthorizedError, 401),
    (HttpStatusError, 502),
    (InvalidRequestUrlError, 400),
    (NetworkError, 502),
    (DecodeError, 502),
]


def _error_json(status_code: int, kind: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "kind": kind, "message": message},
    )


def _status_for(exc: RepoViewerError) -> int:
    for exc_type, code in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return code
    return 500


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(RepoViewerError)
    async def domain_handler(request: Request, exc: RepoViewerError) -> JSONResponse:
        body = getattr(exc, "body", None)
        if body:
            logger.warning("%s: %s (body: %s)", type(exc).__name__, exc, body)
        else:
            logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(_status_for(exc), exc.kind.value, str(exc))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "internal", "An unexpected error occurred. Please try again later.")
