"""Tests for item selection."""

from pathlib import Path

import pytest

from agent_share.artifacts.models import Skill
from agent_share.errors import SelectionCancelled
from agent_share.gateway.prompter.fake import FakePrompter
from agent_share.operations.selection import item_label, select_items


def _skill(skill_id: str, description: str = "") -> Skill:
    return Skill(
        id=skill_id,
        name=skill_id,
        description=description,
        path=Path("/src/skills") / skill_id / "SKILL.md",
        lines=1,
        has_references=False,
    )


@pytest.fixture
def targets(tmp_path: Path) -> list[Path]:
    first = tmp_path / "one"
    second = tmp_path / "two"
    (first / "old").mkdir(parents=True)
    second.mkdir()
    return [first, second]


def test_select_all_install_drops_items_present_anywhere(targets: list[Path]) -> None:
    """An item in one target is excluded for all targets in install mode."""
    items = [_skill("old"), _skill("new")]
    prompter = FakePrompter()

    result = select_items(
        items,
        artifact_type="skills",
        mode="install",
        target_dirs=targets,
        select_all=True,
        prompter=prompter,
    )

    assert [item.id for item in result.selected] == ["new"]
    assert result.existence["old"] == {targets[0]: True, targets[1]: False}
    assert prompter.item_prompts == []


def test_select_all_update_keeps_everything(targets: list[Path]) -> None:
    items = [_skill("old"), _skill("new")]

    result = select_items(
        items,
        artifact_type="skills",
        mode="update",
        target_dirs=targets,
        select_all=True,
        prompter=FakePrompter(),
    )

    assert [item.id for item in result.selected] == ["old", "new"]


def test_interactive_selection_keeps_scan_order(targets: list[Path]) -> None:
    items = [_skill("old", "Existing skill"), _skill("new"), _skill("other")]
    prompter = FakePrompter(item_selections={"skills": ["other", "old"]})

    result = select_items(
        items,
        artifact_type="skills",
        mode="install",
        target_dirs=targets,
        select_all=False,
        prompter=prompter,
    )

    assert [item.id for item in result.selected] == ["old", "other"]
    [(artifact_type, choices)] = prompter.item_prompts
    assert artifact_type == "skills"
    assert [(c.value, c.hint) for c in choices] == [
        ("old", "exists in 1/2 targets"),
        ("new", "new"),
        ("other", "new"),
    ]
    assert choices[0].label == "old - Existing skill"


def test_interactive_selection_may_be_empty(targets: list[Path]) -> None:
    result = select_items(
        [_skill("new")],
        artifact_type="skills",
        mode="install",
        target_dirs=targets,
        select_all=False,
        prompter=FakePrompter(item_selections={"skills": []}),
    )

    assert result.selected == []


def test_cancelled_prompt_propagates(targets: list[Path]) -> None:
    with pytest.raises(SelectionCancelled):
        select_items(
            [_skill("new")],
            artifact_type="skills",
            mode="install",
            target_dirs=targets,
            select_all=False,
            prompter=FakePrompter(cancel=True),
        )


def test_item_label_truncates_long_descriptions() -> None:
    label = item_label(_skill("long", "x" * 40))

    assert label == "long - " + "x" * 35 + "..."
