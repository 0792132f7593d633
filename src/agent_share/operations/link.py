"""Place an artifact directory into a target by symlink, falling back to copy."""

import logging
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from agent_share.artifacts.models import LinkMethod
from agent_share.operations.existence import path_present

logger = logging.getLogger(__name__)

TARGET_EXISTS_ERROR = "Target already exists"


@dataclass(frozen=True)
class LinkResult:
    """Outcome of a single link-or-copy operation.

    ``method`` is the method actually used, which differs from the requested
    one after a symlink fallback or on Windows.
    """

    method: LinkMethod
    source: Path
    target: Path
    success: bool
    error: str | None


def _is_windows() -> bool:
    return sys.platform == "win32"


def _remove_path(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
    else:
        shutil.rmtree(path)


def link_or_copy(source: Path, target: Path, *, method: LinkMethod, force: bool) -> LinkResult:
    """Symlink or copy ``source`` to ``target``.

    With ``force`` an existing target is removed first. Without it an existing
    target yields an unsuccessful result and nothing is touched. Symlink
    failures fall back to a recursive copy; Windows always copies.

    Raises:
        OSError: If removal or the copy itself fails.
    """
    if force and path_present(target):
        logger.debug("removing existing %s", target)
        _remove_path(target)

    if path_present(target):
        return LinkResult(
            method=method, source=source, target=target, success=False, error=TARGET_EXISTS_ERROR
        )

    target.parent.mkdir(parents=True, exist_ok=True)

    if method == "symlink" and not _is_windows():
        try:
            target.symlink_to(source, target_is_directory=True)
        except OSError as e:
            logger.warning("Symlink failed, falling back to copy: %s", e)
        else:
            logger.debug("linked %s -> %s", target, source)
            return LinkResult(
                method="symlink", source=source, target=target, success=True, error=None
            )

    shutil.copytree(source, target)
    logger.debug("copied %s -> %s", source, target)
    return LinkResult(method="copy", source=source, target=target, success=True, error=None)
