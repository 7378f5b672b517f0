"""Port: repository source — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_viewer.domain.entities import Commit, Repository


class RepoSource(Protocol):
    """Abstract contract for reading a user's repositories from GitHub."""

    async def fetch_repositories(self, username: str) -> list[Repository]:
        """Return the user's repositories in the order GitHub lists them."""
        ...

    async def fetch_languages(self, repository_name: str, username: str) -> dict[str, int]:
        """Return language → byte-count mapping from the GitHub Languages API."""
        ...

    async def fetch_commits(self, repository_name: str, username: str) -> list[Commit]:
        """Return the repository's commits, most recent first."""
        ...
