"""Rich rendering for listings, install summaries and completion panels."""

from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from agent_share.artifacts.models import Artifact, ArtifactType, InstallMode
from agent_share.artifacts.targets import Target
from agent_share.operations.install import TargetSummary

SECTION_TITLES: dict[ArtifactType, str] = {
    "skills": "Skills",
    "rules": "Rules",
    "commands": "Commands",
    "agents": "Agents",
}


def _console() -> Console:
    return Console(stderr=True, force_terminal=True)


def format_summary_line(summary: TargetSummary) -> Text:
    """Render ``<target>: X installed, Y skipped, Z failed``, omitting zero counts."""
    parts: list[Text] = []
    if summary.installed > 0:
        parts.append(Text(f"{summary.installed} installed", style="green"))
    if summary.skipped > 0:
        parts.append(Text(f"{summary.skipped} skipped", style="yellow"))
    if summary.failed > 0:
        parts.append(Text(f"{summary.failed} failed", style="red"))

    line = Text(summary.target_name, style="bold")
    line.append(": ")
    if parts:
        line.append_text(Text(", ").join(parts))
    else:
        line.append("none")
    return line


def render_completion_panel(summaries: Sequence[TargetSummary], *, mode: InstallMode) -> None:
    """Print the final per-target panel. The border turns yellow if anything failed."""
    title = "Installation Complete" if mode == "install" else "Update Complete"
    all_ok = all(summary.failed == 0 for summary in summaries)
    body = Text("\n").join(format_summary_line(summary) for summary in summaries)
    _console().print(
        Panel(
            body,
            title=title,
            border_style="green" if all_ok else "yellow",
            padding=1,
            expand=False,
        )
    )


def render_plan_panel(
    selected: Mapping[ArtifactType, Sequence[Artifact]],
    targets: Sequence[Target],
    *,
    mode: InstallMode,
) -> None:
    """Print item counts per type and the target names before confirmation."""
    body = Text()
    for artifact_type, items in selected.items():
        if not items:
            continue
        body.append(str(len(items)), style="green")
        body.append(f" {artifact_type}\n")
    body.append("\nTargets: ", style="dim")
    body.append(", ".join(target.display_name for target in targets))

    title = "Install Summary" if mode == "install" else "Update Summary"
    _console().print(Panel(body, title=title, expand=False))


def render_note(message: str, *, title: str) -> None:
    _console().print(Panel(Text(message), title=title, expand=False))


def render_listing(
    sections: Sequence[tuple[ArtifactType, Sequence[Artifact]]],
    *,
    installed_in: Mapping[str, Sequence[str]] | None,
) -> None:
    """Print every non-empty section inside an "Available Items" panel.

    Args:
        sections: Artifact type and its discovered items, in display order
        installed_in: When given, maps an item id to the names of the targets
            that already contain it; those names are shown after the item.
    """
    blocks: list[Text] = []
    for artifact_type, items in sections:
        if not items:
            continue
        block = Text()
        block.append(SECTION_TITLES[artifact_type], style="bold underline")
        block.append(f" ({len(items)})")
        for item in items:
            block.append("\n  ")
            block.append(item.id, style="cyan")
            block.append(" - ", style="dim")
            if item.description:
                block.append(item.description)
            else:
                block.append("No description", style="dim")
            if installed_in is not None and installed_in.get(item.id):
                block.append(f"  [installed: {', '.join(installed_in[item.id])}]", style="green")
        blocks.append(block)

    _console().print(
        Panel(
            Text("\n\n").join(blocks),
            title="Available Items",
            border_style="cyan",
            padding=1,
            expand=False,
        )
    )
