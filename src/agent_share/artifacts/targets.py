"""Installation targets and the directory layout each one uses."""

from dataclasses import dataclass

from agent_share.artifacts.models import ArtifactType


@dataclass(frozen=True)
class TargetConfig:
    """Relative subdirectory per artifact type, plus a display name."""

    name: str
    skills: str
    rules: str
    commands: str
    agents: str
    settings: str

    def subdir(self, artifact_type: ArtifactType) -> str:
        """Return the relative directory that holds artifacts of the given type."""
        return getattr(self, artifact_type)


TARGETS: dict[str, TargetConfig] = {
    ".claude": TargetConfig(
        name="Claude Code",
        skills=".claude/skills",
        rules=".claude/rules",
        commands=".claude/commands",
        agents=".claude/agents",
        settings=".claude",
    ),
    ".cursor": TargetConfig(
        name="Cursor",
        skills=".cursor/skills",
        rules=".cursor/rules",
        commands=".cursor/commands",
        agents=".cursor/agents",
        settings=".cursor",
    ),
    ".agents": TargetConfig(
        name="Shared Agents",
        skills=".agents/skills",
        rules=".agents/rules",
        commands=".agents/commands",
        agents=".agents",
        settings=".agents",
    ),
}


def get_target_config(key: str) -> TargetConfig:
    """Look up a built-in target, synthesizing a default layout for unknown keys.

    Unknown keys (custom paths such as ``./my-config``) need no registration:
    they get ``<key>/skills``, ``<key>/rules`` and so on.
    """
    if key in TARGETS:
        return TARGETS[key]
    return TargetConfig(
        name=key,
        skills=f"{key}/skills",
        rules=f"{key}/rules",
        commands=f"{key}/commands",
        agents=f"{key}/agents",
        settings=key,
    )


@dataclass(frozen=True)
class Target:
    """A named installation destination."""

    key: str
    config: TargetConfig

    @staticmethod
    def from_key(key: str) -> "Target":
        return Target(key=key, config=get_target_config(key))

    @property
    def display_name(self) -> str:
        if self.key in TARGETS:
            return TARGETS[self.key].name
        return self.key

    def subdir(self, artifact_type: ArtifactType) -> str:
        return self.config.subdir(artifact_type)
