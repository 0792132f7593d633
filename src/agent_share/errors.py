"""Domain exceptions raised by agent-share operations.

Commands translate these into user-facing CLI errors at the command boundary.
Per-item install failures are not exceptions; they are counted in summaries.
"""

from pathlib import Path


class AgentShareError(Exception):
    """Base class for errors that abort a whole command."""


class InvalidReferenceError(AgentShareError):
    """Raised when a source string is neither a local path nor a GitHub reference."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"Invalid GitHub URL: {reference}")
        self.reference = reference


class FetchError(AgentShareError):
    """Raised when no candidate branch of a remote repository could be downloaded."""


class FrontmatterError(AgentShareError):
    """Raised when an artifact file carries frontmatter that is not valid YAML."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid frontmatter in {path}: {reason}")
        self.path = path
        self.reason = reason


class SelectionCancelled(AgentShareError):
    """Raised when the user aborts an interactive prompt."""
