"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from repo_viewer.interface.dependencies import get_service
from repo_viewer.interface.schemas import (
    CommitResponse,
    ErrorResponse,
    LanguagesResponse,
    RepositoryResponse,
)
from repo_viewer.services.repo_browser import RepoBrowserService

router = APIRouter()

_ERRORS = {
    401: {"model": ErrorResponse, "description": "GitHub rejected the request"},
    404: {"model": ErrorResponse, "description": "User or repository not found"},
    502: {"model": ErrorResponse, "description": "GitHub unreachable or sent an unexpected response"},
}


@router.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/users/{username}/repos",
    response_model=list[RepositoryResponse],
    responses=_ERRORS,
)
async def list_repositories(
    username: str,
    service: RepoBrowserService = Depends(get_service),
) -> list[RepositoryResponse]:
    """List a user's repositories with their languages."""
    repositories = await service.list_repositories(username)
    return [RepositoryResponse.from_entity(repo) for repo in repositories]


@router.get(
    "/users/{username}/repos/{repository}/commits",
    response_model=list[CommitResponse],
    responses=_ERRORS,
)
async def list_commits(
    username: str,
    repository: str,
    service: RepoBrowserService = Depends(get_service),
) -> list[CommitResponse]:
    """List a repository's commits, newest first."""
    commits = await service.list_commits(repository, username)
    return [CommitResponse.from_entity(commit) for commit in commits]


@router.get(
    "/users/{username}/repos/{repository}/languages",
    response_model=LanguagesResponse,
    responses=_ERRORS,
)
async def refresh_languages(
    username: str,
    repository: str,
    service: RepoBrowserService = Depends(get_service),
) -> LanguagesResponse:
    """Look up one repository's languages."""
    languages, status = await service.refresh_languages(repository, username)
    return LanguagesResponse(repository=repository, languages=languages, language_status=status)
