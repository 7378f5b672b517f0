"""GitHub REST API adapter — implements the RepoSource port."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from repo_viewer.domain.entities import Commit, Repository
from repo_viewer.infrastructure.http_json import JsonFetcher
from repo_viewer.infrastructure.wire_models import COMMIT_LIST, LANGUAGE_MAP, REPOSITORY_LIST

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


def _seg(value: str) -> str:
    """Percent-encode one path segment so `/`, `?` and `#` stay inside it."""
    return quote(value, safe="")


class GitHubRestAdapter:
    """Concrete RepoSource backed by the GitHub v3 REST API.

    Requests are anonymous and only the first page of each listing is read.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = _GITHUB_API,
        user_agent: str = "repo-viewer/1.0",
    ) -> None:
        self._fetcher = JsonFetcher(
            client,
            base_url,
            headers={
                "Accept": "application/vnd.github.v3+json",
                "User-Agent": user_agent,
            },
        )

    async def fetch_repositories(self, username: str) -> list[Repository]:
        """GET /users/{username}/repos → [Repository]."""
        payload = await self._fetcher.fetch_json(f"/users/{_seg(username)}/repos", REPOSITORY_LIST)
        return [item.to_entity() for item in payload]

    async def fetch_languages(self, repository_name: str, username: str) -> dict[str, int]:
        """GET /repos/{username}/{repo}/languages → {lang: bytes}."""
        return await self._fetcher.fetch_json(
            f"/repos/{_seg(username)}/{_seg(repository_name)}/languages", LANGUAGE_MAP
        )

    async def fetch_commits(self, repository_name: str, username: str) -> list[Commit]:
        """GET /repos/{username}/{repo}/commits → [Commit]."""
        payload = await self._fetcher.fetch_json(
            f"/repos/{_seg(username)}/{_seg(repository_name)}/commits", COMMIT_LIST
        )
        return [item.to_entity() for item in payload]
