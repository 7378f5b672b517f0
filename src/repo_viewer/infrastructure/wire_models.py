"""Pydantic models mirroring the GitHub REST payloads.

Field names follow the wire (``html_url``, ``created_at``...).  Unknown keys
are ignored, so the full GitHub objects validate against these slim shapes.
"""

from __future__ import annotations

from pydantic import BaseModel, TypeAdapter

from repo_viewer.domain.entities import Commit, Repository


class RepositoryPayload(BaseModel):
    """One element of ``GET /users/{username}/repos``."""

    id: int
    name: str
    description: str | None = None
    html_url: str
    created_at: str
    updated_at: str

    def to_entity(self) -> Repository:
        return Repository(
            id=self.id,
            name=self.name,
            description=self.description,
            html_url=self.html_url,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class CommitAuthorPayload(BaseModel):
    date: str


class CommitDetailPayload(BaseModel):
    author: CommitAuthorPayload
    message: str


class CommitPayload(BaseModel):
    """One element of ``GET /repos/{owner}/{repo}/commits``."""

    sha: str
    commit: CommitDetailPayload

    def to_entity(self) -> Commit:
        return Commit(
            sha=self.sha,
            message=self.commit.message,
            date=self.commit.author.date,
        )


REPOSITORY_LIST = TypeAdapter(list[RepositoryPayload])
COMMIT_LIST = TypeAdapter(list[CommitPayload])
LANGUAGE_MAP = TypeAdapter(dict[str, int])
