"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum


class LanguageStatus(str, Enum):
    """Whether a repository's language string has been resolved."""

    NOT_FETCHED = "not_fetched"
    EMPTY = "empty"
    RESOLVED = "resolved"

    @classmethod
    def of(cls, languages: str) -> LanguageStatus:
        """Status of a completed lookup that produced *languages*."""
        return cls.RESOLVED if languages else cls.EMPTY


@dataclass(frozen=True, slots=True)
class Repository:
    """A repository owned by a GitHub user.

    ``languages`` is never part of the listing payload; it starts empty and is
    filled in by a separate lookup.  ``language_status`` tells an unresolved
    empty string apart from a repository that genuinely has no languages.
    """

    id: int
    name: str
    html_url: str
    created_at: str
    updated_at: str
    description: str | None = None
    languages: str = ""
    language_status: LanguageStatus = LanguageStatus.NOT_FETCHED

    def with_languages(self, languages: str) -> Repository:
        return replace(self, languages=languages, language_status=LanguageStatus.of(languages))


@dataclass(frozen=True, slots=True)
class Commit:
    """A single commit of a repository.

    ``local_id`` is regenerated on every decode and is excluded from equality;
    use ``sha`` as the key when comparing commits across fetches.
    """

    sha: str
    message: str
    date: str
    local_id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False, repr=False)
