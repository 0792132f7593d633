"""Output helpers for user-facing messages."""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a message for the user.

    Messages go to stderr so that stdout stays free for machine-readable output.
    """
    click.echo(message, err=True, nl=nl)
