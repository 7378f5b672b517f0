"""GET-and-decode primitive shared by every GitHub call."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from repo_viewer.domain.exceptions import (
    DecodeError,
    HttpStatusError,
    InvalidRequestUrlError,
    NetworkError,
    ResourceNotFoundError,
    UnauthorizedError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS_ERRORS: dict[int, type[HttpStatusError]] = {
    401: UnauthorizedError,
    404: ResourceNotFoundError,
}


class JsonFetcher:
    """Performs a GET against ``base_url`` and decodes the JSON body.

    Every failure surfaces as a :class:`~repo_viewer.domain.exceptions.RepoViewerError`
    subclass; nothing is retried.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._headers = dict(headers or {})

    async def fetch_json(self, endpoint: str, shape: TypeAdapter[T]) -> T:
        """GET ``{base_url}{endpoint}`` and validate the body against *shape*."""
        url = self._build_url(endpoint)

        try:
            resp = await self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error fetching {url}: {exc}") from exc

        logger.debug("GET %s -> %d", url, resp.status_code)

        if resp.status_code != 200:
            body = resp.text or None
            error_cls = _STATUS_ERRORS.get(resp.status_code, UnexpectedStatusError)
            raise error_cls(
                f"GitHub API returned HTTP {resp.status_code} for {url}",
                status_code=resp.status_code,
                body=body,
            )

        if not resp.content:
            raise DecodeError(f"Empty response body from {url}")

        try:
            return shape.validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(f"Unexpected payload from {url}: {exc}") from exc

    def _build_url(self, endpoint: str) -> httpx.URL:
        raw = f"{self._base_url}{endpoint}"
        try:
            return httpx.URL(raw)
        except httpx.InvalidURL as exc:
            raise InvalidRequestUrlError(f"Invalid request URL: '{raw}'") from exc
