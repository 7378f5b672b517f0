"""Shared fixtures: an in-memory RepoSource and a mocked GitHub transport."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from repo_viewer.domain.entities import Commit, Repository
from repo_viewer.domain.exceptions import ResourceNotFoundError
from repo_viewer.infrastructure.github_rest_adapter import GitHubRestAdapter


def make_repo(repo_id: int, name: str, **overrides: Any) -> Repository:
    fields: dict[str, Any] = {
        "id": repo_id,
        "name": name,
        "html_url": f"https://github.com/octocat/{name}",
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }
    fields.update(overrides)
    return Repository(**fields)


class FakeRepoSource:
    """RepoSource double that records every call it receives."""

    def __init__(
        self,
        repositories: list[Repository] | Exception,
        languages: dict[str, dict[str, int] | Exception] | None = None,
        commits: dict[str, list[Commit] | Exception] | None = None,
    ) -> None:
        self._repositories = repositories
        self._languages = languages or {}
        self._commits = commits or {}
        self.language_calls: list[tuple[str, str]] = []
        self.commit_calls: list[tuple[str, str]] = []

    async def fetch_repositories(self, username: str) -> list[Repository]:
        if isinstance(self._repositories, Exception):
            raise self._repositories
        return list(self._repositories)

    async def fetch_languages(self, repository_name: str, username: str) -> dict[str, int]:
        self.language_calls.append((repository_name, username))
        result = self._languages.get(repository_name, {})
        if isinstance(result, Exception):
            raise result
        return dict(result)

    async def fetch_commits(self, repository_name: str, username: str) -> list[Commit]:
        self.commit_calls.append((repository_name, username))
        result = self._commits.get(repository_name)
        if result is None:
            raise ResourceNotFoundError("not found", status_code=404, body='{"message": "Not Found"}')
        if isinstance(result, Exception):
            raise result
        return list(result)


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


Handler = Callable[[httpx.Request], httpx.Response]


def json_response(status_code: int, payload: Any) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
async def make_adapter(recorded_requests: list[httpx.Request]):
    """Build a GitHubRestAdapter whose HTTP traffic is served by *routes*.

    *routes* maps a URL path to a response or to a handler callable.
    Unknown paths answer 404.
    """
    clients: list[httpx.AsyncClient] = []

    def _factory(routes: dict[str, httpx.Response | Handler]) -> GitHubRestAdapter:
        def _handle(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            route = routes.get(request.url.path)
            if route is None:
                return json_response(404, {"message": "Not Found"})
            if callable(route):
                return route(request)
            return route

        client = httpx.AsyncClient(transport=httpx.MockTransport(_handle))
        clients.append(client)
        return GitHubRestAdapter(client=client, base_url="https://api.github.test")

    yield _factory

    for client in clients:
        await client.aclose()
