"""Tests for the existence matrix."""

from pathlib import Path

from agent_share.artifacts.models import Rule
from agent_share.operations.existence import (
    build_existence_matrix,
    exists_count,
    exists_in_any,
    path_present,
)


def _rule(rule_id: str, tmp_path: Path) -> Rule:
    return Rule(
        id=rule_id,
        description="",
        path=tmp_path / "src" / "rules" / f"{rule_id}.md",
        always_apply=False,
        globs=[],
        tags=[],
    )


def test_matrix_covers_every_item_and_target(tmp_path: Path) -> None:
    first = tmp_path / "one"
    second = tmp_path / "two"
    (first / "style").mkdir(parents=True)
    second.mkdir()

    matrix = build_existence_matrix([_rule("style", tmp_path), _rule("web", tmp_path)], [first, second])

    assert matrix == {
        "style": {first: True, second: False},
        "web": {first: False, second: False},
    }
    assert exists_in_any(matrix, "style")
    assert not exists_in_any(matrix, "web")
    assert exists_count(matrix, "style") == 1
    assert exists_count(matrix, "unknown") == 0


def test_missing_target_directory_reads_as_absent(tmp_path: Path) -> None:
    matrix = build_existence_matrix([_rule("style", tmp_path)], [tmp_path / "nowhere"])

    assert matrix == {"style": {tmp_path / "nowhere": False}}


def test_dangling_symlink_counts_as_present(tmp_path: Path) -> None:
    link = tmp_path / "link"
    link.symlink_to(tmp_path / "gone")

    assert path_present(link)
    assert not path_present(tmp_path / "other")
