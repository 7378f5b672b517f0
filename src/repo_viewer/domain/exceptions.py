"""Domain exception hierarchy.

Every failure carries a :class:`FailureKind` tag so callers can branch on the
category without knowing the concrete class.  The interface layer translates
these into HTTP responses.
"""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Category of a failed fetch."""

    MALFORMED_REQUEST = "malformed_request"
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


class RepoViewerError(Exception):
    """Base exception for the entire application."""

    kind: FailureKind


# ── Request construction ────────────────────────────────────────────────────


class InvalidRequestUrlError(RepoViewerError):
    """The request URL could not be built from the given input."""

    kind = FailureKind.MALFORMED_REQUEST


# ── Transport ───────────────────────────────────────────────────────────────


class NetworkError(RepoViewerError):
    """The HTTP request did not complete (connection, DNS, timeout...)."""

    kind = FailureKind.NETWORK


# ── GitHub API status errors ────────────────────────────────────────────────


class HttpStatusError(RepoViewerError):
    """GitHub answered with a status other than 200."""

    kind = FailureKind.HTTP_STATUS

    def __init__(self, message: str, status_code: int, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UnauthorizedError(HttpStatusError):
    """GitHub rejected the request as unauthenticated (401)."""


class ResourceNotFoundError(HttpStatusError):
    """The user or repository does not exist (404)."""


class UnexpectedStatusError(HttpStatusError):
    """Any other non-200 status."""


# ── Payload decoding ────────────────────────────────────────────────────────


class DecodeError(RepoViewerError):
    """The response body is empty or does not match the expected shape."""

    kind = FailureKind.DECODE
