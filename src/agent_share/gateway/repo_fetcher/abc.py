"""Abstract base class for downloading and unpacking repository archives."""

from abc import ABC, abstractmethod
from pathlib import Path


class RepoFetcher(ABC):
    """Abstract interface for remote repository archive operations.

    Two implementations:
    - RealRepoFetcher: Production - HTTP download and tar.gz extraction
    - FakeRepoFetcher: Testing - serves in-memory directory trees, no network
    """

    @abstractmethod
    def download(self, url: str) -> bytes | None:
        """Download an archive.

        Args:
            url: Archive URL

        Returns:
            Archive bytes, or None if the server answered with a non-success
            status or the request failed at the network level
        """
        ...

    @abstractmethod
    def extract(self, archive_path: Path, destination: Path) -> None:
        """Unpack a tar.gz archive, dropping its single top-level directory.

        Args:
            archive_path: Path to the downloaded archive
            destination: Directory receiving the archive contents
        """
        ...
