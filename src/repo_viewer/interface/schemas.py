"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel

from repo_viewer.domain.entities import Commit, LanguageStatus, Repository


class RepositoryResponse(BaseModel):
    """One repository as returned by ``GET /users/{username}/repos``."""

    id: int
    name: str
    description: str | None
    url: str
    created_at: str
    updated_at: str
    languages: str
    language_status: LanguageStatus

    @classmethod
    def from_entity(cls, repo: Repository) -> RepositoryResponse:
        return cls(
            id=repo.id,
            name=repo.name,
            description=repo.description,
            url=repo.html_url,
            created_at=repo.created_at,
            updated_at=repo.updated_at,
            languages=repo.languages,
            language_status=repo.language_status,
        )


class CommitResponse(BaseModel):
    sha: str
    message: str
    date: str

    @classmethod
    def from_entity(cls, commit: Commit) -> CommitResponse:
        return cls(sha=commit.sha, message=commit.message, date=commit.date)


class LanguagesResponse(BaseModel):
    """Result of a standalone language refresh."""

    repository: str
    languages: str
    language_status: LanguageStatus


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    kind: str
    message: str
