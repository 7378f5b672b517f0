"""Language aggregator — reduces a GitHub language map to a display string."""

from __future__ import annotations

import logging
from typing import Mapping

from repo_viewer.domain.entities import LanguageStatus
from repo_viewer.domain.ports.repo_source import RepoSource

logger = logging.getLogger(__name__)

LANGUAGE_SEPARATOR = ", "


def join_language_names(languages: Mapping[str, int]) -> str:
    """Join the language names of *languages*, dropping the byte counts.

    Order follows the mapping's iteration order (as decoded), not sorted.
    """
    return LANGUAGE_SEPARATOR.join(languages)


class LanguageAggregator:
    """Looks up and formats the languages of a single repository."""

    def __init__(self, repo_source: RepoSource) -> None:
        self._source = repo_source

    async def fetch_languages(self, repository_name: str, username: str) -> str:
        """Return the comma-separated language names; failures propagate."""
        languages = await self._source.fetch_languages(repository_name, username)
        return join_language_names(languages)

    async def lookup(self, repository_name: str, username: str) -> tuple[str, LanguageStatus]:
        """Return the language string together with its lookup status."""
        languages = await self.fetch_languages(repository_name, username)
        return languages, LanguageStatus.of(languages)

    async def fetch_languages_best_effort(
        self, repository_name: str, username: str
    ) -> str | None:
        """Like :meth:`fetch_languages`, but logs failures and returns ``None``."""
        try:
            return await self.fetch_languages(repository_name, username)
        except Exception:
            logger.warning(
                "Failed to fetch languages for %s/%s, leaving them unresolved",
                username,
                repository_name,
                exc_info=True,
            )
            return None
