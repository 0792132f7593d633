"""Discover skills, rules, commands and agents inside a source directory.

Each scanner globs a fixed set of patterns relative to the base path, parses
the frontmatter of every match and emits one record per file. Results keep
pattern order; matches within a pattern are sorted. Records with the same id
coming from different files are all returned.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from agent_share.artifacts.models import Agent, Artifact, ArtifactType, Command, Rule, Skill
from agent_share.core.frontmatter import FrontmatterParseResult, parse_markdown_frontmatter
from agent_share.errors import FrontmatterError

logger = logging.getLogger(__name__)

SKILL_PATTERNS = ("skills/**/SKILL.md", "SKILL.md")
RULE_PATTERNS = ("rules/**/*.md", ".cursor/rules/**/*.md", ".claude/rules/**/*.md")
COMMAND_PATTERNS = ("commands/**/*.md", ".claude/commands/**/*.md", ".cursor/commands/**/*.md")
AGENT_PATTERNS = ("agents/**/*.md", ".claude/agents/**/*.md", ".agents/**/*.md")


def _glob_files(base_path: Path, patterns: Sequence[str]) -> Iterator[Path]:
    for pattern in patterns:
        for match in sorted(base_path.glob(pattern)):
            if match.is_file():
                yield match.absolute()


def _parse_files(
    base_path: Path, patterns: Sequence[str]
) -> Iterator[tuple[Path, FrontmatterParseResult]]:
    """Yield each matched file with its parsed frontmatter.

    Raises:
        FrontmatterError: If a file's frontmatter is not valid YAML. This aborts
            the whole scan rather than skipping the file.
    """
    for file_path in _glob_files(base_path, patterns):
        # Undecodable bytes become U+FFFD instead of failing the scan
        content = file_path.read_text(encoding="utf-8", errors="replace")
        parsed = parse_markdown_frontmatter(content)
        if not parsed.is_valid:
            assert parsed.error is not None
            raise FrontmatterError(file_path, parsed.error)
        yield file_path, parsed


def _text_field(metadata: dict[str, object], key: str, default: str) -> str:
    value = metadata.get(key)
    if value is None or value == "":
        return default
    return str(value)


def _list_field(metadata: dict[str, object], key: str) -> list[str]:
    value = metadata.get(key)
    if isinstance(value, list):
        return [str(entry) for entry in value]
    # Cursor writes single globs as a bare string
    if isinstance(value, str) and value:
        return [value]
    return []


def scan_skills(base_path: Path) -> list[Skill]:
    """Scan for skills: ``skills/**/SKILL.md`` plus a root ``SKILL.md``.

    The skill id is the name of the directory holding SKILL.md. ``lines``
    counts the body after python-frontmatter strips leading and trailing
    blank lines, so it can be smaller than a raw line count of the body.
    """
    skills: list[Skill] = []
    for file_path, parsed in _parse_files(base_path, SKILL_PATTERNS):
        skill_dir = file_path.parent
        skills.append(
            Skill(
                id=skill_dir.name,
                name=_text_field(parsed.metadata, "name", skill_dir.name),
                description=_text_field(parsed.metadata, "description", ""),
                path=file_path,
                lines=len(parsed.body.split("\n")),
                has_references=(skill_dir / "references").exists(),
                metadata=parsed.metadata,
            )
        )
    logger.debug("found %d skills under %s", len(skills), base_path)
    return skills


def scan_rules(base_path: Path) -> list[Rule]:
    """Scan for rules in ``rules/``, ``.cursor/rules/`` and ``.claude/rules/``."""
    rules: list[Rule] = []
    for file_path, parsed in _parse_files(base_path, RULE_PATTERNS):
        rules.append(
            Rule(
                id=file_path.stem,
                description=_text_field(parsed.metadata, "description", ""),
                path=file_path,
                always_apply=bool(parsed.metadata.get("alwaysApply", False)),
                globs=_list_field(parsed.metadata, "globs"),
                tags=_list_field(parsed.metadata, "tags"),
            )
        )
    logger.debug("found %d rules under %s", len(rules), base_path)
    return rules


def scan_commands(base_path: Path) -> list[Command]:
    """Scan for commands in ``commands/``, ``.claude/commands/`` and ``.cursor/commands/``."""
    commands: list[Command] = []
    for file_path, parsed in _parse_files(base_path, COMMAND_PATTERNS):
        commands.append(
            Command(
                id=file_path.stem,
                name=_text_field(parsed.metadata, "name", file_path.stem),
                description=_text_field(parsed.metadata, "description", ""),
                path=file_path,
                metadata=parsed.metadata,
            )
        )
    logger.debug("found %d commands under %s", len(commands), base_path)
    return commands


def scan_agents(base_path: Path) -> list[Agent]:
    """Scan for agents in ``agents/``, ``.claude/agents/`` and ``.agents/``."""
    agents: list[Agent] = []
    for file_path, parsed in _parse_files(base_path, AGENT_PATTERNS):
        agents.append(
            Agent(
                id=file_path.stem,
                name=_text_field(parsed.metadata, "name", file_path.stem),
                description=_text_field(parsed.metadata, "description", ""),
                path=file_path,
                metadata=parsed.metadata,
            )
        )
    logger.debug("found %d agents under %s", len(agents), base_path)
    return agents


SCANNERS: dict[ArtifactType, Callable[[Path], Sequence[Artifact]]] = {
    "skills": scan_skills,
    "rules": scan_rules,
    "commands": scan_commands,
    "agents": scan_agents,
}
