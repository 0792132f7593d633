"""Application context with dependency injection."""

import tempfile
from dataclasses import dataclass
from pathlib import Path

import click

from agent_share.cli.output import user_output
from agent_share.core.config import AgentShareConfig
from agent_share.gateway.config_store.abc import ConfigStore
from agent_share.gateway.config_store.real import RealConfigStore
from agent_share.gateway.prompter.abc import Prompter
from agent_share.gateway.prompter.real import InteractivePrompter
from agent_share.gateway.repo_fetcher.abc import RepoFetcher
from agent_share.gateway.repo_fetcher.real import RealRepoFetcher


@dataclass(frozen=True)
class AgentShareContext:
    """Immutable context holding all dependencies for agent-share commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    cwd: Path
    config: AgentShareConfig
    config_store: ConfigStore
    prompter: Prompter
    fetcher: RepoFetcher
    temp_root: Path

    @staticmethod
    def for_test(
        *,
        cwd: Path,
        config: AgentShareConfig | None = None,
        config_store: ConfigStore | None = None,
        prompter: Prompter | None = None,
        fetcher: RepoFetcher | None = None,
        temp_root: Path | None = None,
    ) -> "AgentShareContext":
        """Create a context backed by fakes for any unspecified dependency.

        Args:
            cwd: Directory the command runs from (normally pytest's tmp_path)
            config: Loaded configuration. If None, uses the config_store's,
                or an empty config when no store is given.
            config_store: If None, creates FakeConfigStore holding ``config``.
            prompter: If None, creates FakePrompter with its defaults.
            fetcher: If None, creates FakeRepoFetcher with no archives.
            temp_root: Where remote sources are extracted. If None, uses
                ``cwd / "tmp"``.

        Example:
            >>> ctx = AgentShareContext.for_test(cwd=tmp_path)
            >>> result = runner.invoke(cli, ["list"], obj=ctx)
        """
        from agent_share.gateway.config_store.fake import FakeConfigStore
        from agent_share.gateway.prompter.fake import FakePrompter
        from agent_share.gateway.repo_fetcher.fake import FakeRepoFetcher

        if config_store is None:
            config_store = FakeConfigStore(config=config)
        if config is None:
            config = config_store.load()

        return AgentShareContext(
            cwd=cwd,
            config=config,
            config_store=config_store,
            prompter=prompter if prompter is not None else FakePrompter(),
            fetcher=fetcher if fetcher is not None else FakeRepoFetcher(archives={}),
            temp_root=temp_root if temp_root is not None else cwd / "tmp",
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists.

    Returns:
        (path, None) on success, (None, error_message) if the directory is gone
    """
    try:
        return (Path.cwd(), None)
    except OSError:
        return (None, "Current working directory no longer exists")


def create_context() -> AgentShareContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    cwd, error_msg = safe_cwd()
    if cwd is None:
        assert error_msg is not None
        user_output(click.style("Error: ", fg="red") + error_msg)
        raise SystemExit(1)

    config_store = RealConfigStore()
    return AgentShareContext(
        cwd=cwd,
        config=config_store.load(),
        config_store=config_store,
        prompter=InteractivePrompter(),
        fetcher=RealRepoFetcher(),
        temp_root=Path(tempfile.gettempdir()),
    )
