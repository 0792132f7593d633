"""Fake RepoFetcher for testing."""

from pathlib import Path

from agent_share.gateway.repo_fetcher.abc import RepoFetcher


class FakeRepoFetcher(RepoFetcher):
    """In-memory fake serving canned archives.

    ``archives`` maps a URL to a directory tree (relative path -> file content).
    ``download`` returns placeholder bytes for known URLs and None otherwise;
    ``extract`` writes the tree belonging to the last downloaded URL.

    Usage:
        fetcher = FakeRepoFetcher(
            archives={
                "https://github.com/o/r/archive/main.tar.gz": {
                    "skills/foo/SKILL.md": "---\\nname: Foo\\n---\\n",
                },
            }
        )
        ...
        assert fetcher.requested_urls == ["https://github.com/o/r/archive/main.tar.gz"]
    """

    def __init__(self, *, archives: dict[str, dict[str, str]]) -> None:
        self._archives = archives
        self._requested_urls: list[str] = []
        self._last_tree: dict[str, str] | None = None

    @property
    def requested_urls(self) -> list[str]:
        return list(self._requested_urls)

    def download(self, url: str) -> bytes | None:
        self._requested_urls.append(url)
        if url not in self._archives:
            return None
        self._last_tree = self._archives[url]
        return url.encode("utf-8")

    def extract(self, archive_path: Path, destination: Path) -> None:
        if self._last_tree is None:
            raise AssertionError("extract() called before a successful download()")
        for relative_path, content in self._last_tree.items():
            target = destination / relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
