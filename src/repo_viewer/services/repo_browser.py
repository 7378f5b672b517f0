"""Repository browser use case — the fetch-and-aggregate pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`RepoSource` and :class:`Notifier` ports; the interface layer
injects concrete adapters at runtime.
"""

from __future__ import annotations

import asyncio
import logging

from repo_viewer.domain.entities import Commit, LanguageStatus, Repository
from repo_viewer.domain.ports.notifier import Notifier
from repo_viewer.domain.ports.repo_source import RepoSource
from repo_viewer.services.language_aggregator import LanguageAggregator

logger = logging.getLogger(__name__)


class RepoBrowserService:
    """Lists repositories (with languages), commits, and refreshes languages.

    Parameters
    ----------
    repo_source:
        Adapter that talks to the GitHub API.
    notifier:
        Receives a message after each successful repository listing.
        ``None`` disables notifications.
    """

    def __init__(self, repo_source: RepoSource, notifier: Notifier | None = None) -> None:
        self._source = repo_source
        self._languages = LanguageAggregator(repo_source)
        self._notifier = notifier

    # ── Public entry points ─────────────────────────────────────────────

    async def list_repositories(self, username: str) -> list[Repository]:
        """Return *username*'s repositories, each with its languages looked up.

        If the listing itself fails the error propagates and no language
        lookups are made.  A failed language lookup only leaves that
        repository unresolved.
        """
        logger.info("Listing repositories of %s", username)
        repositories = await self._source.fetch_repositories(username)

        resolved = await self._resolve_languages(repositories, username)
        enriched = [
            repo.with_languages(resolved[repo.id]) if repo.id in resolved else repo
            for repo in repositories
        ]

        logger.info(
            "Fetched %d repositories of %s (%d with languages resolved)",
            len(enriched),
            username,
            len(resolved),
        )
        if self._notifier is not None:
            self._notifier.notify(
                f"User {username} found. "
                "The list of repositories has been successfully fetched."
            )
        return enriched

    async def list_commits(self, repository: Repository | str, username: str) -> list[Commit]:
        """Return the commits of *repository* in GitHub's order (newest first)."""
        name = repository.name if isinstance(repository, Repository) else repository
        logger.info("Listing commits of %s/%s", username, name)
        commits = await self._source.fetch_commits(name, username)
        logger.info("Fetched %d commits of %s/%s", len(commits), username, name)
        return commits

    async def refresh_languages(
        self, repository: Repository | str, username: str
    ) -> tuple[str, LanguageStatus]:
        """Look up one repository's languages; failures propagate.

        Returns the comma-separated language names and the resulting status,
        ``EMPTY`` when the repository has no detected languages.
        """
        name = repository.name if isinstance(repository, Repository) else repository
        return await self._languages.lookup(name, username)

    # ── Fan-out / fan-in ────────────────────────────────────────────────

    async def _resolve_languages(
        self, repositories: list[Repository], username: str
    ) -> dict[int, str]:
        """Look up every repository's languages concurrently, keyed by id.

        Returns only after every lookup has settled.  Failed lookups are
        absent from the result.
        """
        if not repositories:
            return {}

        async def _lookup(repo: Repository) -> tuple[int, str | None]:
            languages = await self._languages.fetch_languages_best_effort(repo.name, username)
            return repo.id, languages

        results = await asyncio.gather(*(_lookup(repo) for repo in repositories))
        return {repo_id: languages for repo_id, languages in results if languages is not None}
