"""Tests for domain entities and the language reduction."""

from __future__ import annotations

from conftest import make_repo
from repo_viewer.domain.entities import Commit, LanguageStatus
from repo_viewer.services.language_aggregator import join_language_names


def test_repository_defaults_to_unfetched_languages():
    repo = make_repo(1, "hello")

    assert repo.languages == ""
    assert repo.language_status is LanguageStatus.NOT_FETCHED


def test_with_languages_distinguishes_empty_from_resolved():
    repo = make_repo(1, "hello")

    assert repo.with_languages("").language_status is LanguageStatus.EMPTY
    resolved = repo.with_languages("Go")
    assert resolved.language_status is LanguageStatus.RESOLVED
    assert resolved.languages == "Go"
    assert resolved.id == repo.id


def test_commit_identity_is_the_sha():
    first = Commit(sha="abc123", message="init", date="2024-01-01T00:00:00Z")
    refetched = Commit(sha="abc123", message="init", date="2024-01-01T00:00:00Z")

    assert first.local_id != refetched.local_id
    assert first == refetched
    assert hash(first) == hash(refetched)


def test_join_language_names_drops_byte_counts():
    joined = join_language_names({"Go": 120, "Swift": 80})

    assert joined in ("Go, Swift", "Swift, Go")
    assert "120" not in joined


def test_join_language_names_empty_map():
    assert join_language_names({}) == ""
