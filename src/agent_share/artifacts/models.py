"""Data models for discovered artifacts."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

# Artifact kinds, named after the directory each one lives in
ArtifactType = Literal["skills", "rules", "commands", "agents"]

ARTIFACT_TYPES: tuple[ArtifactType, ...] = ("skills", "rules", "commands", "agents")

LinkMethod = Literal["symlink", "copy"]

LINK_METHODS: tuple[LinkMethod, ...] = ("symlink", "copy")

InstallMode = Literal["install", "update"]


@dataclass(frozen=True)
class Skill:
    """A skill directory identified by its SKILL.md entry point."""

    id: str
    name: str
    description: str
    path: Path
    lines: int
    has_references: bool
    metadata: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class Rule:
    """A context rule markdown file."""

    id: str
    description: str
    path: Path
    always_apply: bool
    globs: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Command:
    """A slash-command definition markdown file."""

    id: str
    name: str
    description: str
    path: Path
    # Free-form frontmatter, no schema beyond id/name/description
    metadata: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class Agent:
    """An agent configuration markdown file."""

    id: str
    name: str
    description: str
    path: Path
    metadata: dict[str, object] = field(default_factory=dict)


Artifact = Skill | Rule | Command | Agent
