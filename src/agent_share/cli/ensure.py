"""CLI error handling for invariant checks and command-boundary failures."""

from typing import IO, Any

import click

from agent_share.cli.output import user_output


class UserFacingCliError(click.ClickException):
    """Error shown to the user as ``Error: <message>`` with exit code 1."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def show(self, file: IO[Any] | None = None) -> None:
        user_output(click.style("Error: ", fg="red") + self.message)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure a condition holds, otherwise abort with a user-facing error.

        Raises:
            UserFacingCliError: If condition is False
        """
        if not condition:
            raise UserFacingCliError(error_message)
