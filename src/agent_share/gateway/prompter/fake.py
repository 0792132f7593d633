"""Fake Prompter for testing."""

from collections.abc import Sequence

from agent_share.artifacts.models import ArtifactType, InstallMode
from agent_share.errors import SelectionCancelled
from agent_share.gateway.prompter.abc import ItemChoice, Prompter


class FakePrompter(Prompter):
    """Replays canned answers and records the questions asked.

    This class has NO public setup methods. All answers are provided via
    constructor. Item selections are keyed by artifact type; a type with no
    entry answers with every offered choice.
    """

    def __init__(
        self,
        *,
        artifact_types: list[ArtifactType] | None = None,
        targets: list[str] | None = None,
        item_selections: dict[ArtifactType, list[str]] | None = None,
        confirm_answer: bool = True,
        cancel: bool = False,
    ) -> None:
        self._artifact_types = artifact_types if artifact_types is not None else ["skills"]
        self._targets = targets if targets is not None else [".claude"]
        self._item_selections = item_selections if item_selections is not None else {}
        self._confirm_answer = confirm_answer
        self._cancel = cancel
        self._item_prompts: list[tuple[ArtifactType, list[ItemChoice]]] = []
        self._confirm_messages: list[str] = []

    @property
    def item_prompts(self) -> list[tuple[ArtifactType, list[ItemChoice]]]:
        return list(self._item_prompts)

    @property
    def confirm_messages(self) -> list[str]:
        return list(self._confirm_messages)

    def _check_cancel(self) -> None:
        if self._cancel:
            raise SelectionCancelled()

    def select_artifact_types(self) -> list[ArtifactType]:
        self._check_cancel()
        return list(self._artifact_types)

    def select_targets(self) -> list[str]:
        self._check_cancel()
        return list(self._targets)

    def select_items(
        self,
        *,
        artifact_type: ArtifactType,
        mode: InstallMode,
        choices: Sequence[ItemChoice],
    ) -> list[str]:
        self._check_cancel()
        self._item_prompts.append((artifact_type, list(choices)))
        if artifact_type not in self._item_selections:
            return [choice.value for choice in choices]
        return list(self._item_selections[artifact_type])

    def confirm(self, message: str) -> bool:
        self._check_cancel()
        self._confirm_messages.append(message)
        return self._confirm_answer
