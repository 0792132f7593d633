"""Production RepoFetcher using urllib and tarfile."""

import http.client
import logging
import tarfile
import urllib.error
import urllib.request
from collections.abc import Iterator
from pathlib import Path

from agent_share.gateway.repo_fetcher.abc import RepoFetcher

logger = logging.getLogger(__name__)


def _strip_leading_component(archive: tarfile.TarFile) -> Iterator[tarfile.TarInfo]:
    """Yield members with their first path component removed.

    GitHub archives wrap everything in ``<repo>-<branch>/``; the wrapper entry
    itself is dropped.
    """
    for member in archive.getmembers():
        parts = member.name.split("/", 1)
        if len(parts) < 2 or not parts[1]:
            continue
        member.name = parts[1]
        if member.islnk():
            link_parts = member.linkname.split("/", 1)
            member.linkname = link_parts[1] if len(link_parts) == 2 else member.linkname
        yield member


def _skip_unsafe_members(member: tarfile.TarInfo, dest_path: str) -> tarfile.TarInfo | None:
    """Apply the tarfile data filter, dropping members it rejects.

    Absolute paths, links pointing outside the destination and similar members
    are skipped so one such entry does not abort the whole extraction.
    """
    try:
        return tarfile.data_filter(member, dest_path)
    except tarfile.FilterError as e:
        logger.debug("skipping archive member %s: %s", member.name, e)
        return None


class RealRepoFetcher(RepoFetcher):
    """Production implementation that talks to the network."""

    def download(self, url: str) -> bytes | None:
        logger.debug("downloading %s", url)
        try:
            with urllib.request.urlopen(url) as response:
                return response.read()
        except urllib.error.HTTPError as e:
            logger.debug("download of %s failed with HTTP %s", url, e.code)
            return None
        except (OSError, http.client.HTTPException) as e:
            logger.debug("download of %s failed: %s", url, e)
            return None

    def extract(self, archive_path: Path, destination: Path) -> None:
        with tarfile.open(archive_path, mode="r:gz") as archive:
            archive.extractall(
                destination,
                members=_strip_leading_component(archive),
                filter=_skip_unsafe_members,
            )
