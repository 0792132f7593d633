"""Per-item, per-target presence lookup computed before any mutation."""

import logging
from collections.abc import Sequence
from pathlib import Path

from agent_share.artifacts.models import Artifact

logger = logging.getLogger(__name__)

# item id -> (absolute target directory -> entry present)
ExistenceMap = dict[str, dict[Path, bool]]


def path_present(path: Path) -> bool:
    """Check for any filesystem entry at path, dangling symlinks included."""
    return path.exists() or path.is_symlink()


def build_existence_matrix(items: Sequence[Artifact], target_dirs: Sequence[Path]) -> ExistenceMap:
    """Probe ``<target_dir>/<item.id>`` for every item and every target directory.

    Every pair is checked, one probe at a time. The matrix reflects the state
    of the filesystem before the install loop starts and is not updated as
    items get installed.
    """
    matrix: ExistenceMap = {}
    for item in items:
        row: dict[Path, bool] = {}
        for target_dir in target_dirs:
            row[target_dir] = path_present(target_dir / item.id)
        matrix[item.id] = row
    logger.debug("existence matrix: %d items x %d targets", len(items), len(target_dirs))
    return matrix


def exists_in_any(matrix: ExistenceMap, item_id: str) -> bool:
    return any(matrix.get(item_id, {}).values())


def exists_count(matrix: ExistenceMap, item_id: str) -> int:
    return sum(1 for present in matrix.get(item_id, {}).values() if present)
