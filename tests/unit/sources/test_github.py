"""Tests for GitHub reference parsing."""

import pytest

from agent_share.errors import InvalidReferenceError
from agent_share.sources.github import GitHubReference, parse_github_reference


def test_parse_full_url() -> None:
    assert parse_github_reference("https://github.com/acme/tools") == GitHubReference(
        owner="acme", repo="tools", branch="main", subpath=None
    )


def test_parse_url_strips_git_suffix() -> None:
    reference = parse_github_reference("https://github.com/acme/tools.git")

    assert reference.repo == "tools"


def test_parse_url_with_branch_and_subpath() -> None:
    reference = parse_github_reference("https://github.com/acme/tools/tree/dev/skills/foo")

    assert reference.branch == "dev"
    assert reference.subpath == "skills/foo"


def test_parse_http_url() -> None:
    assert parse_github_reference("http://github.com/acme/tools").owner == "acme"


def test_parse_shorthand() -> None:
    assert parse_github_reference("acme/tools") == GitHubReference(
        owner="acme", repo="tools", branch="main", subpath=None
    )


def test_parse_shorthand_third_segment_is_branch() -> None:
    """owner/repo/x treats x as a branch, never as a subpath."""
    reference = parse_github_reference("acme/tools/release/v2")

    assert reference.branch == "release/v2"
    assert reference.subpath is None


@pytest.mark.parametrize("text", ["tools", "", "https://gitlab.com/acme/tools", "/abs"])
def test_parse_invalid_reference(text: str) -> None:
    """Invalid input is echoed verbatim in the error."""
    with pytest.raises(InvalidReferenceError) as exc_info:
        parse_github_reference(text)

    assert exc_info.value.reference == text
    assert str(exc_info.value) == f"Invalid GitHub URL: {text}"


def test_candidate_branches_fall_back_to_master() -> None:
    assert parse_github_reference("acme/tools").candidate_branches() == ["main", "master"]
    assert parse_github_reference("acme/tools/dev").candidate_branches() == ["dev"]


def test_archive_url() -> None:
    reference = parse_github_reference("acme/tools")

    assert reference.archive_url("main") == "https://github.com/acme/tools/archive/main.tar.gz"
