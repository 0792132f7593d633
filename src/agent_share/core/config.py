"""Persisted user preferences."""

from dataclasses import dataclass, replace

from agent_share.artifacts.models import LinkMethod


@dataclass(frozen=True)
class AgentShareConfig:
    """Immutable user configuration.

    Loaded once at CLI entry point and stored in AgentShareContext.
    Stored as JSON with the keys ``defaultTarget`` and ``linkMethod``.
    """

    default_target: str | None
    link_method: LinkMethod | None

    @staticmethod
    def empty() -> "AgentShareConfig":
        return AgentShareConfig(default_target=None, link_method=None)

    def merged_with(
        self, *, default_target: str | None, link_method: LinkMethod | None
    ) -> "AgentShareConfig":
        """Return a copy with every non-None argument applied."""
        updated = self
        if default_target is not None:
            updated = replace(updated, default_target=default_target)
        if link_method is not None:
            updated = replace(updated, link_method=link_method)
        return updated
