"""Abstract base class for the user configuration file."""

from abc import ABC, abstractmethod
from pathlib import Path

from agent_share.core.config import AgentShareConfig


class ConfigStore(ABC):
    """Abstract interface for reading and writing ~/.config/agent-share/config.json.

    This gateway keeps tests away from the real home directory. There is no
    locking; concurrent invocations may overwrite each other.
    """

    @abstractmethod
    def path(self) -> Path:
        """Location of the configuration file."""
        ...

    @abstractmethod
    def load(self) -> AgentShareConfig:
        """Load the configuration.

        Returns:
            The stored configuration, or an empty one if the file is missing
            or unreadable
        """
        ...

    @abstractmethod
    def save(self, config: AgentShareConfig) -> None:
        """Persist the configuration, keeping unrelated keys already in the file."""
        ...
