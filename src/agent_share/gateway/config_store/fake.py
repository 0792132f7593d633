"""Fake ConfigStore for testing."""

from pathlib import Path

from agent_share.core.config import AgentShareConfig
from agent_share.gateway.config_store.abc import ConfigStore


class FakeConfigStore(ConfigStore):
    """In-memory storage that never touches the real filesystem.

    Usage:
        store = FakeConfigStore(config=AgentShareConfig.empty())
        store.save(new_config)
        assert store.saved == [new_config]
    """

    def __init__(self, *, config: AgentShareConfig | None = None) -> None:
        self._config = config if config is not None else AgentShareConfig.empty()
        self._saved: list[AgentShareConfig] = []

    @property
    def saved(self) -> list[AgentShareConfig]:
        return list(self._saved)

    def path(self) -> Path:
        return Path("/fake/.config/agent-share/config.json")

    def load(self) -> AgentShareConfig:
        return self._config

    def save(self, config: AgentShareConfig) -> None:
        self._config = config
        self._saved.append(config)
