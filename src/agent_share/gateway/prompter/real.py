"""Terminal prompts built on questionary and click."""

from collections.abc import Sequence
from typing import TypeVar

import click
import questionary

from agent_share.artifacts.models import ArtifactType, InstallMode
from agent_share.errors import SelectionCancelled
from agent_share.gateway.prompter.abc import ItemChoice, Prompter

T = TypeVar("T")

_TYPE_CHOICES: list[tuple[ArtifactType, str, str]] = [
    ("skills", "Skills", "Slash commands and automations"),
    ("rules", "Rules", "Context rules and guidelines"),
    ("commands", "Commands", "Custom CLI commands"),
    ("agents", "Agents", "Agent configurations"),
]

_TARGET_CHOICES: list[tuple[str, str]] = [
    (".claude", "Claude Code"),
    (".cursor", "Cursor IDE"),
    (".agents", "Shared"),
]


def _answered(answer: T | None) -> T:
    # questionary returns None when the prompt is interrupted
    if answer is None:
        raise SelectionCancelled()
    return answer


def _at_least_one(answers: list[str]) -> bool | str:
    if answers:
        return True
    return "Select at least one option"


class InteractivePrompter(Prompter):
    """Production prompter reading from the user's terminal."""

    def select_artifact_types(self) -> list[ArtifactType]:
        choices = [
            questionary.Choice(title=f"{label} ({hint})", value=value, checked=value == "skills")
            for value, label, hint in _TYPE_CHOICES
        ]
        answer = questionary.checkbox(
            "What would you like to install?", choices=choices, validate=_at_least_one
        ).ask()
        return _answered(answer)

    def select_targets(self) -> list[str]:
        choices = [
            questionary.Choice(title=f"{label} ({key}/)", value=key, checked=key == ".claude")
            for key, label in _TARGET_CHOICES
        ]
        targets: list[str] = _answered(
            questionary.checkbox("Where to install?", choices=choices, validate=_at_least_one).ask()
        )

        add_custom = _answered(questionary.confirm("Add a custom path?", default=False).ask())
        if not add_custom:
            return targets

        custom_path = _answered(
            questionary.text(
                "Enter custom path:",
                validate=lambda value: True if value else "Path is required",
            ).ask()
        )
        return [*targets, custom_path]

    def select_items(
        self,
        *,
        artifact_type: ArtifactType,
        mode: InstallMode,
        choices: Sequence[ItemChoice],
    ) -> list[str]:
        verb = "install" if mode == "install" else "update"
        answer = questionary.checkbox(
            f"Select {artifact_type} to {verb}:",
            choices=[
                questionary.Choice(title=f"{choice.label} [{choice.hint}]", value=choice.value)
                for choice in choices
            ],
        ).ask()
        return _answered(answer)

    def confirm(self, message: str) -> bool:
        try:
            return click.confirm(message, default=True)
        except click.Abort as e:
            raise SelectionCancelled() from e
