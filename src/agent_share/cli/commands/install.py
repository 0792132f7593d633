"""Install and update commands.

Both commands share one flow; ``install`` skips items already present in a
target while ``update`` overwrites them.
"""

import logging
from collections.abc import Callable
from typing import Any

import click

from agent_share.artifacts.models import (
    ARTIFACT_TYPES,
    LINK_METHODS,
    Artifact,
    ArtifactType,
    InstallMode,
    LinkMethod,
)
from agent_share.artifacts.scanners import SCANNERS
from agent_share.artifacts.targets import Target
from agent_share.cli.ensure import UserFacingCliError
from agent_share.cli.output import user_output
from agent_share.cli.render import render_completion_panel, render_note, render_plan_panel
from agent_share.core.context import AgentShareContext
from agent_share.errors import AgentShareError, SelectionCancelled
from agent_share.operations.existence import ExistenceMap
from agent_share.operations.install import (
    ProgressEvent,
    install_artifacts,
    resolve_method,
    resolve_target_keys,
    target_dirs_for,
)
from agent_share.operations.selection import select_items
from agent_share.sources.resolver import resolve_source

logger = logging.getLogger(__name__)


def _flow_options(verb: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Options shared by install and update; ``verb`` only changes help text."""

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        options = [
            click.argument("source", required=False),
            click.option("--skills", is_flag=True, help=f"{verb} skills only"),
            click.option("--rules", is_flag=True, help=f"{verb} rules only"),
            click.option("--commands", is_flag=True, help=f"{verb} commands only"),
            click.option("--agents", is_flag=True, help=f"{verb} agents only"),
            click.option("--all", "select_all", is_flag=True, help="Select all items in each category"),
            click.option("--target", help="Target directory (.claude, .cursor, .agents or a path)"),
            click.option(
                "--method",
                type=click.Choice(LINK_METHODS),
                help="Link method (default: configured method, then symlink)",
            ),
        ]
        for option in reversed(options):
            f = option(f)
        return f

    return decorator


def flagged_types(*, skills: bool, rules: bool, commands: bool, agents: bool) -> list[ArtifactType]:
    flags = {"skills": skills, "rules": rules, "commands": commands, "agents": agents}
    return [artifact_type for artifact_type in ARTIFACT_TYPES if flags[artifact_type]]


class _ProgressPrinter:
    """Prints a header per target and one line per processed item."""

    def __init__(self) -> None:
        self._current_target: str | None = None

    def __call__(self, event: ProgressEvent) -> None:
        if event.target.key != self._current_target:
            self._current_target = event.target.key
            user_output(f"Installing to {click.style(event.target.display_name, fg='cyan')}...")
        if event.outcome == "installed":
            user_output(f"  {click.style('✓', fg='green')} {event.item_id}")
        elif event.outcome == "failed":
            user_output(f"  {click.style('✗', fg='red')} {event.item_id}: {event.error}")
        else:
            logger.debug("skipped %s in %s", event.item_id, event.target.key)


def run_install_flow(
    ctx: AgentShareContext,
    *,
    source: str | None,
    mode: InstallMode,
    types: list[ArtifactType],
    select_all: bool,
    target: str | None,
    method: LinkMethod | None,
) -> None:
    """Resolve, scan, select, confirm, execute and summarize.

    Raises:
        AgentShareError: If the source cannot be resolved or scanned.
    """
    repo_path = resolve_source(
        source, cwd=ctx.cwd, fetcher=ctx.fetcher, temp_root=ctx.temp_root
    )
    user_output(f"Source: {click.style(str(repo_path), fg='cyan')}")

    target_keys = resolve_target_keys(target, ctx.config, ctx.prompter)
    targets = [Target.from_key(key) for key in target_keys]

    if not types:
        types = ctx.prompter.select_artifact_types()

    available: dict[ArtifactType, list[Artifact]] = {}
    for artifact_type in types:
        available[artifact_type] = list(SCANNERS[artifact_type](repo_path))
        user_output(f"Found {click.style(str(len(available[artifact_type])), fg='cyan')} {artifact_type}")

    selected: dict[ArtifactType, list[Artifact]] = {}
    existence: dict[ArtifactType, ExistenceMap] = {}
    for artifact_type, items in available.items():
        if not items:
            continue
        result = select_items(
            items,
            artifact_type=artifact_type,
            mode=mode,
            target_dirs=target_dirs_for(targets, artifact_type, cwd=ctx.cwd),
            select_all=select_all,
            prompter=ctx.prompter,
        )
        selected[artifact_type] = result.selected
        existence[artifact_type] = result.existence

    total = sum(len(items) for items in selected.values())
    if total == 0:
        if mode == "install":
            message = 'All selected items already exist.\nUse "agent-share update" to overwrite.'
        else:
            message = "No items selected."
        render_note(message, title="Nothing to do")
        return

    render_plan_panel(selected, targets, mode=mode)
    verb = "Install" if mode == "install" else "Update"
    if not ctx.prompter.confirm(f"{verb} {total} item(s) to {len(targets)} target(s)?"):
        user_output("Cancelled.")
        return

    summaries = install_artifacts(
        selected,
        existence,
        targets=targets,
        cwd=ctx.cwd,
        mode=mode,
        method=resolve_method(method, ctx.config),
        on_progress=_ProgressPrinter(),
    )
    render_completion_panel(summaries, mode=mode)


def _invoke_flow(ctx: AgentShareContext, *, mode: InstallMode, **kwargs: Any) -> None:
    try:
        run_install_flow(ctx, mode=mode, **kwargs)
    except SelectionCancelled:
        user_output("Operation cancelled.")
    except AgentShareError as e:
        raise UserFacingCliError(str(e)) from e


@click.command("install")
@_flow_options("Install")
@click.pass_obj
def install_cmd(
    ctx: AgentShareContext,
    source: str | None,
    skills: bool,
    rules: bool,
    commands: bool,
    agents: bool,
    select_all: bool,
    target: str | None,
    method: LinkMethod | None,
) -> None:
    """Install NEW items from SOURCE (skips existing).

    SOURCE is a local directory, a GitHub URL or owner/repo shorthand.
    Defaults to the current directory.
    """
    _invoke_flow(
        ctx,
        mode="install",
        source=source,
        types=flagged_types(skills=skills, rules=rules, commands=commands, agents=agents),
        select_all=select_all,
        target=target,
        method=method,
    )


@click.command("update")
@_flow_options("Update")
@click.pass_obj
def update_cmd(
    ctx: AgentShareContext,
    source: str | None,
    skills: bool,
    rules: bool,
    commands: bool,
    agents: bool,
    select_all: bool,
    target: str | None,
    method: LinkMethod | None,
) -> None:
    """Update EXISTING items from SOURCE (overwrites)."""
    _invoke_flow(
        ctx,
        mode="update",
        source=source,
        types=flagged_types(skills=skills, rules=rules, commands=commands, agents=agents),
        select_all=select_all,
        target=target,
        method=method,
    )
