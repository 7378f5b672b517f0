"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from repo_viewer.interface.dependencies import http_client_lifespan
from repo_viewer.interface.error_handlers import register_error_handlers
from repo_viewer.interface.routes import router


def create_app() -> FastAPI:
    """Assemble the read-only repository viewer API."""
    app = FastAPI(
        title="GitHub Repo Viewer",
        version="1.0.0",
        summary="A user's public repositories, their languages and commit history.",
        lifespan=http_client_lifespan,
    )
    register_error_handlers(app)
    app.include_router(router)
    return app
