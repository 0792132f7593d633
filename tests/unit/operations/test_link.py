"""Tests for link_or_copy."""

from pathlib import Path

import pytest

from agent_share.operations import link
from agent_share.operations.link import TARGET_EXISTS_ERROR, link_or_copy


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    source = tmp_path / "source" / "foo"
    source.mkdir(parents=True)
    (source / "SKILL.md").write_text("---\nname: Foo\n---\n", encoding="utf-8")
    return source


def test_copy_into_missing_parent(tmp_path: Path, source_dir: Path) -> None:
    target = tmp_path / "project" / ".claude" / "skills" / "foo"

    result = link_or_copy(source_dir, target, method="copy", force=False)

    assert result.success
    assert result.method == "copy"
    assert result.error is None
    assert not target.is_symlink()
    assert (target / "SKILL.md").read_text() == (source_dir / "SKILL.md").read_text()


def test_symlink_points_at_source(tmp_path: Path, source_dir: Path) -> None:
    target = tmp_path / "skills" / "foo"

    result = link_or_copy(source_dir, target, method="symlink", force=False)

    assert result.success
    assert result.method == "symlink"
    assert target.is_symlink()
    assert target.resolve() == source_dir.resolve()


def test_existing_target_without_force_is_untouched(tmp_path: Path, source_dir: Path) -> None:
    """A second call without force fails and leaves the first result in place."""
    target = tmp_path / "skills" / "foo"
    link_or_copy(source_dir, target, method="copy", force=False)
    (target / "local.txt").write_text("keep me", encoding="utf-8")

    result = link_or_copy(source_dir, target, method="copy", force=False)

    assert not result.success
    assert result.error == TARGET_EXISTS_ERROR
    assert (target / "local.txt").read_text() == "keep me"


def test_force_replaces_existing_directory(tmp_path: Path, source_dir: Path) -> None:
    target = tmp_path / "skills" / "foo"
    target.mkdir(parents=True)
    (target / "stale.txt").write_text("old", encoding="utf-8")

    result = link_or_copy(source_dir, target, method="copy", force=True)

    assert result.success
    assert not (target / "stale.txt").exists()
    assert (target / "SKILL.md").exists()


def test_force_replaces_existing_symlink(tmp_path: Path, source_dir: Path) -> None:
    other = tmp_path / "other"
    other.mkdir()
    target = tmp_path / "skills" / "foo"
    target.parent.mkdir(parents=True)
    target.symlink_to(other, target_is_directory=True)

    result = link_or_copy(source_dir, target, method="symlink", force=True)

    assert result.success
    assert target.resolve() == source_dir.resolve()
    assert other.exists()


def test_force_replaces_dangling_symlink(tmp_path: Path, source_dir: Path) -> None:
    target = tmp_path / "skills" / "foo"
    target.parent.mkdir(parents=True)
    target.symlink_to(tmp_path / "gone")

    result = link_or_copy(source_dir, target, method="copy", force=True)

    assert result.success
    assert (target / "SKILL.md").exists()


def test_symlink_failure_falls_back_to_copy(
    tmp_path: Path, source_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _refuse(self: Path, target: Path, target_is_directory: bool = False) -> None:
        raise OSError("symlinks not permitted")

    monkeypatch.setattr(Path, "symlink_to", _refuse)
    target = tmp_path / "skills" / "foo"

    result = link_or_copy(source_dir, target, method="symlink", force=False)

    assert result.success
    assert result.method == "copy"
    assert not target.is_symlink()
    assert (target / "SKILL.md").exists()


def test_windows_always_copies(
    tmp_path: Path, source_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(link, "_is_windows", lambda: True)
    target = tmp_path / "skills" / "foo"

    result = link_or_copy(source_dir, target, method="symlink", force=False)

    assert result.method == "copy"
    assert not target.is_symlink()


def test_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        link_or_copy(tmp_path / "nope", tmp_path / "target", method="copy", force=False)
