"""Abstract base class for interactive user prompts.

The install flow asks questions through this gateway so that selection logic
stays testable without a terminal.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from agent_share.artifacts.models import ArtifactType, InstallMode


@dataclass(frozen=True)
class ItemChoice:
    """One entry of an item multi-select.

    Attributes:
        value: Artifact id returned when the entry is picked
        label: Id plus truncated description
        hint: "new" or "exists in k/n targets"
    """

    value: str
    label: str
    hint: str


class Prompter(ABC):
    """Abstract interface for interactive prompts.

    Every method raises SelectionCancelled when the user aborts the prompt.
    """

    @abstractmethod
    def select_artifact_types(self) -> list[ArtifactType]:
        """Ask which artifact types to work on (at least one)."""
        ...

    @abstractmethod
    def select_targets(self) -> list[str]:
        """Ask for target keys: built-ins plus an optional custom path."""
        ...

    @abstractmethod
    def select_items(
        self,
        *,
        artifact_type: ArtifactType,
        mode: InstallMode,
        choices: Sequence[ItemChoice],
    ) -> list[str]:
        """Ask which items to process.

        Returns:
            Picked artifact ids; an empty list is a valid answer
        """
        ...

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question defaulting to yes."""
        ...
