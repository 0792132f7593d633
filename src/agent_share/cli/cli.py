import logging

import click

from agent_share.cli.commands.config import config_cmd
from agent_share.cli.commands.install import install_cmd, update_cmd
from agent_share.cli.commands.list_cmd import list_cmd
from agent_share.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="agent-share")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Install and share AI skills, rules, commands and agents."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(install_cmd)
cli.add_command(update_cmd)
cli.add_command(list_cmd)
cli.add_command(config_cmd)


def main() -> None:
    """CLI entry point used by the `agent-share` console script."""
    cli()
