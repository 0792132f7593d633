"""List artifacts available in a source."""

import click

from agent_share.artifacts.models import Artifact, ArtifactType
from agent_share.artifacts.scanners import SCANNERS
from agent_share.artifacts.targets import TARGETS, Target
from agent_share.cli.commands.install import flagged_types
from agent_share.cli.ensure import UserFacingCliError
from agent_share.cli.output import user_output
from agent_share.cli.render import render_listing, render_note
from agent_share.core.context import AgentShareContext
from agent_share.errors import AgentShareError
from agent_share.operations.existence import build_existence_matrix
from agent_share.operations.install import target_dirs_for
from agent_share.sources.resolver import resolve_source


def _installed_targets(
    ctx: AgentShareContext,
    sections: list[tuple[ArtifactType, list[Artifact]]],
    target: str | None,
) -> dict[str, list[str]]:
    """Map each listed item id to the display names of targets that contain it."""
    if target is not None:
        keys = [target]
    elif ctx.config.default_target is not None:
        keys = [ctx.config.default_target]
    else:
        keys = list(TARGETS)
    targets = [Target.from_key(key) for key in keys]

    installed: dict[str, list[str]] = {}
    for artifact_type, items in sections:
        target_dirs = target_dirs_for(targets, artifact_type, cwd=ctx.cwd)
        matrix = build_existence_matrix(items, target_dirs)
        for item in items:
            names = [
                t.display_name
                for t, target_dir in zip(targets, target_dirs, strict=True)
                if matrix[item.id][target_dir]
            ]
            installed.setdefault(item.id, [])
            for name in names:
                if name not in installed[item.id]:
                    installed[item.id].append(name)
    return installed


@click.command("list")
@click.argument("source", required=False)
@click.option("--skills", is_flag=True, help="List skills only")
@click.option("--rules", is_flag=True, help="List rules only")
@click.option("--commands", is_flag=True, help="List commands only")
@click.option("--agents", is_flag=True, help="List agents only")
@click.option("--installed", is_flag=True, help="Show which targets already contain each item")
@click.option("--target", help="Target to check with --installed (default: configured or all)")
@click.pass_obj
def list_cmd(
    ctx: AgentShareContext,
    source: str | None,
    skills: bool,
    rules: bool,
    commands: bool,
    agents: bool,
    installed: bool,
    target: str | None,
) -> None:
    """List items available in SOURCE (default: current directory)."""
    types = flagged_types(skills=skills, rules=rules, commands=commands, agents=agents)
    if not types:
        types = list(SCANNERS)

    try:
        repo_path = resolve_source(
            source, cwd=ctx.cwd, fetcher=ctx.fetcher, temp_root=ctx.temp_root
        )
        user_output(f"Source: {click.style(str(repo_path), fg='cyan')}")
        sections = [
            (artifact_type, list(SCANNERS[artifact_type](repo_path))) for artifact_type in types
        ]
    except AgentShareError as e:
        raise UserFacingCliError(str(e)) from e

    if not any(items for _, items in sections):
        render_note("No items found in source.", title="Empty")
        return

    installed_in = _installed_targets(ctx, sections, target) if installed else None
    render_listing(sections, installed_in=installed_in)
