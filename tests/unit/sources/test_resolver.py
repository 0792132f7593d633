"""Tests for source resolution."""

from pathlib import Path

import pytest

from agent_share.errors import FetchError, InvalidReferenceError
from agent_share.gateway.repo_fetcher.fake import FakeRepoFetcher
from agent_share.sources.resolver import resolve_source

MAIN_URL = "https://github.com/acme/tools/archive/main.tar.gz"
MASTER_URL = "https://github.com/acme/tools/archive/master.tar.gz"
SKILL = {"skills/foo/SKILL.md": "---\nname: Foo\n---\n"}


def test_no_source_resolves_to_cwd(tmp_path: Path) -> None:
    fetcher = FakeRepoFetcher(archives={})

    result = resolve_source(None, cwd=tmp_path, fetcher=fetcher, temp_root=tmp_path / "tmp")

    assert result == tmp_path
    assert fetcher.requested_urls == []


def test_existing_relative_path(tmp_path: Path) -> None:
    (tmp_path / "vendor" / "kit").mkdir(parents=True)
    fetcher = FakeRepoFetcher(archives={})

    result = resolve_source("vendor/kit", cwd=tmp_path, fetcher=fetcher, temp_root=tmp_path)

    assert result == (tmp_path / "vendor" / "kit").resolve()
    assert fetcher.requested_urls == []


def test_remote_reference_is_downloaded_and_extracted(tmp_path: Path) -> None:
    fetcher = FakeRepoFetcher(archives={MAIN_URL: SKILL})

    result = resolve_source("acme/tools", cwd=tmp_path, fetcher=fetcher, temp_root=tmp_path / "tmp")

    assert result.parent == (tmp_path / "tmp" / "agent-share").resolve()
    assert result.name.startswith("acme-tools-")
    assert (result / "skills" / "foo" / "SKILL.md").exists()
    assert not (result / "repo.tar.gz").exists()
    assert fetcher.requested_urls == [MAIN_URL]


def test_remote_reference_falls_back_to_master(tmp_path: Path) -> None:
    fetcher = FakeRepoFetcher(archives={MASTER_URL: SKILL})

    result = resolve_source(
        "https://github.com/acme/tools", cwd=tmp_path, fetcher=fetcher, temp_root=tmp_path
    )

    assert fetcher.requested_urls == [MAIN_URL, MASTER_URL]
    assert (result / "skills" / "foo" / "SKILL.md").exists()


def test_explicit_branch_has_no_fallback(tmp_path: Path) -> None:
    fetcher = FakeRepoFetcher(archives={MASTER_URL: SKILL})

    with pytest.raises(FetchError):
        resolve_source("acme/tools/dev", cwd=tmp_path, fetcher=fetcher, temp_root=tmp_path)

    assert fetcher.requested_urls == ["https://github.com/acme/tools/archive/dev.tar.gz"]


def test_unreachable_repository(tmp_path: Path) -> None:
    fetcher = FakeRepoFetcher(archives={})

    with pytest.raises(FetchError, match="Repository not found or not accessible"):
        resolve_source("acme/tools", cwd=tmp_path, fetcher=fetcher, temp_root=tmp_path)


def test_empty_source_is_not_cwd(tmp_path: Path) -> None:
    fetcher = FakeRepoFetcher(archives={})

    with pytest.raises(InvalidReferenceError):
        resolve_source("", cwd=tmp_path, fetcher=fetcher, temp_root=tmp_path)
