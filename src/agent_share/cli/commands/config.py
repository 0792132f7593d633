"""Show or change persisted defaults."""

from typing import cast

import click

from agent_share.artifacts.models import LINK_METHODS, LinkMethod
from agent_share.cli.ensure import Ensure
from agent_share.cli.output import user_output
from agent_share.core.context import AgentShareContext


def _show(ctx: AgentShareContext) -> None:
    config = ctx.config_store.load()
    not_set = click.style("(not set)", dim=True)
    user_output(click.style("Current configuration:", bold=True))
    user_output(f"  Default target: {config.default_target or not_set}")
    user_output(f"  Link method: {config.link_method or not_set}")


@click.command("config")
@click.option("--target", help="Set default target directory")
@click.option("--method", help="Set default link method (symlink or copy)")
@click.option("--show", is_flag=True, help="Show current configuration")
@click.pass_obj
def config_cmd(
    ctx: AgentShareContext, target: str | None, method: str | None, show: bool
) -> None:
    """Manage configuration.

    With no options, shows the current configuration.
    """
    if show or (not target and not method):
        _show(ctx)
        return

    link_method: LinkMethod | None = None
    if method:
        Ensure.invariant(method in LINK_METHODS, 'Invalid method. Use "symlink" or "copy".')
        link_method = cast(LinkMethod, method)

    updated = ctx.config_store.load().merged_with(
        default_target=target or None, link_method=link_method
    )
    ctx.config_store.save(updated)

    if target:
        user_output(click.style(f"✓ Default target set to: {target}", fg="green"))
    if link_method:
        user_output(click.style(f"✓ Link method set to: {link_method}", fg="green"))
