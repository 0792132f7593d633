"""Narrow discovered items down to the working set for one artifact type."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from agent_share.artifacts.models import Artifact, ArtifactType, InstallMode
from agent_share.gateway.prompter.abc import ItemChoice, Prompter
from agent_share.operations.existence import (
    ExistenceMap,
    build_existence_matrix,
    exists_count,
    exists_in_any,
)

DESCRIPTION_PREVIEW_LENGTH = 35


@dataclass(frozen=True)
class SelectionResult:
    """Items picked for one artifact type plus the matrix they were judged on."""

    selected: list[Artifact]
    existence: ExistenceMap


def item_hint(existence: ExistenceMap, item_id: str, *, target_count: int) -> str:
    if exists_in_any(existence, item_id):
        return f"exists in {exists_count(existence, item_id)}/{target_count} targets"
    return "new"


def item_label(item: Artifact) -> str:
    description = item.description
    preview = description[:DESCRIPTION_PREVIEW_LENGTH]
    if len(description) > DESCRIPTION_PREVIEW_LENGTH:
        preview += "..."
    return f"{item.id} - {preview}"


def select_items(
    items: Sequence[Artifact],
    *,
    artifact_type: ArtifactType,
    mode: InstallMode,
    target_dirs: Sequence[Path],
    select_all: bool,
    prompter: Prompter,
) -> SelectionResult:
    """Build the existence matrix, then pick items automatically or interactively.

    With ``select_all`` in install mode, an item present in any target is
    dropped for every target, even those where it is missing. In update mode
    ``select_all`` keeps everything.

    Raises:
        SelectionCancelled: If the user aborts the prompt.
    """
    existence = build_existence_matrix(items, target_dirs)

    if select_all:
        if mode == "install":
            fresh = [item for item in items if not exists_in_any(existence, item.id)]
            return SelectionResult(selected=fresh, existence=existence)
        return SelectionResult(selected=list(items), existence=existence)

    choices = [
        ItemChoice(
            value=item.id,
            label=item_label(item),
            hint=item_hint(existence, item.id, target_count=len(target_dirs)),
        )
        for item in items
    ]
    picked = set(prompter.select_items(artifact_type=artifact_type, mode=mode, choices=choices))
    selected = [item for item in items if item.id in picked]
    return SelectionResult(selected=selected, existence=existence)
