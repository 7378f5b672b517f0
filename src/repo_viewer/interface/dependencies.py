"""FastAPI dependency injection wiring."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI, Request

from repo_viewer.infrastructure.config import get_settings
from repo_viewer.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_viewer.infrastructure.log_notifier import LoggingNotifier
from repo_viewer.services.repo_browser import RepoBrowserService


@asynccontextmanager
async def http_client_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Keep one pooled ``httpx.AsyncClient`` on ``app.state`` while the app runs."""
    settings = get_settings()
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_s)) as client:
        app.state.http_client = client
        try:
            yield
        finally:
            del app.state.http_client


def get_service(request: Request) -> RepoBrowserService:
    """Build the use case around the app's shared HTTP client."""
    settings = get_settings()
    github_adapter = GitHubRestAdapter(
        client=request.app.state.http_client,
        base_url=settings.github_api_url,
        user_agent=settings.user_agent,
    )
    return RepoBrowserService(repo_source=github_adapter, notifier=LoggingNotifier())
