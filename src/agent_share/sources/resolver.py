"""Resolve a user-supplied source into a local directory."""

import logging
import time
from pathlib import Path

from agent_share.errors import FetchError
from agent_share.gateway.repo_fetcher.abc import RepoFetcher
from agent_share.sources.github import parse_github_reference

logger = logging.getLogger(__name__)

ARCHIVE_NAME = "repo.tar.gz"


def resolve_source(
    source: str | None,
    *,
    cwd: Path,
    fetcher: RepoFetcher,
    temp_root: Path,
) -> Path:
    """Return the local directory to scan for a source argument.

    - No source: the current working directory.
    - An existing path (relative to cwd or absolute): that path, resolved.
    - Anything else is parsed as a GitHub reference and downloaded into a
      fresh directory under ``temp_root/agent-share``. The extracted tree is
      left in place for the OS to clean up; only the archive is removed.

    Raises:
        InvalidReferenceError: If the source is neither a path nor a reference.
        FetchError: If no candidate branch could be downloaded.
    """
    if source is None:
        return cwd

    # An empty string must not collapse to cwd; it falls through to parsing
    local = cwd / source
    if source and local.exists():
        logger.debug("using local source %s", local)
        return local.resolve()

    reference = parse_github_reference(source)
    millis = time.time_ns() // 1_000_000
    destination = temp_root / "agent-share" / f"{reference.owner}-{reference.repo}-{millis}"
    destination.mkdir(parents=True, exist_ok=True)

    archive: bytes | None = None
    for branch in reference.candidate_branches():
        archive = fetcher.download(reference.archive_url(branch))
        if archive is not None:
            logger.debug("fetched %s/%s@%s", reference.owner, reference.repo, branch)
            break

    if archive is None:
        raise FetchError("Failed to fetch: Repository not found or not accessible")

    archive_path = destination / ARCHIVE_NAME
    archive_path.write_bytes(archive)
    fetcher.extract(archive_path, destination)
    archive_path.unlink()
    return destination.resolve()
