"""Parse GitHub repository references.

Accepted forms:

    owner/repo
    owner/repo/branch
    https://github.com/owner/repo
    https://github.com/owner/repo/tree/branch
    https://github.com/owner/repo/tree/branch/sub/path

In the shorthand form everything after ``owner/repo/`` is a branch name, never
a subpath, unlike the URL form where the segment after the branch is a subpath.
"""

import re
from dataclasses import dataclass

from agent_share.errors import InvalidReferenceError

DEFAULT_BRANCH = "main"
FALLBACK_BRANCH = "master"

_URL_PATTERN = re.compile(r"https?://github\.com/([^/]+)/([^/]+)(?:/tree/([^/]+))?(?:/(.+))?")
_SHORTHAND_PATTERN = re.compile(r"([^/]+)/([^/]+)(?:/(.+))?")


@dataclass(frozen=True)
class GitHubReference:
    """A repository coordinate extracted from a user-supplied reference."""

    owner: str
    repo: str
    branch: str
    subpath: str | None

    def candidate_branches(self) -> list[str]:
        """Branches to try in order; the default branch falls back to master."""
        if self.branch == DEFAULT_BRANCH:
            return [DEFAULT_BRANCH, FALLBACK_BRANCH]
        return [self.branch]

    def archive_url(self, branch: str) -> str:
        return f"https://github.com/{self.owner}/{self.repo}/archive/{branch}.tar.gz"


def parse_github_reference(text: str) -> GitHubReference:
    """Parse a GitHub URL or ``owner/repo[/branch]`` shorthand.

    Raises:
        InvalidReferenceError: If the text matches neither form.
    """
    for pattern in (_URL_PATTERN, _SHORTHAND_PATTERN):
        match = pattern.fullmatch(text)
        if match is None:
            continue
        owner, repo, branch = match.group(1), match.group(2), match.group(3)
        subpath = match.group(4) if pattern is _URL_PATTERN else None
        return GitHubReference(
            owner=owner,
            repo=repo.replace(".git", "", 1),
            branch=branch if branch else DEFAULT_BRANCH,
            subpath=subpath,
        )
    raise InvalidReferenceError(text)
