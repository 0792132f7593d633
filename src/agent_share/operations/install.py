"""Install or update selected artifacts into every target and tally the outcomes."""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from agent_share.artifacts.models import Artifact, ArtifactType, InstallMode, LinkMethod
from agent_share.artifacts.targets import Target
from agent_share.core.config import AgentShareConfig
from agent_share.gateway.prompter.abc import Prompter
from agent_share.operations.existence import ExistenceMap
from agent_share.operations.link import link_or_copy

logger = logging.getLogger(__name__)

DEFAULT_LINK_METHOD: LinkMethod = "symlink"

Outcome = Literal["installed", "skipped", "failed"]


@dataclass(frozen=True)
class ProgressEvent:
    """Outcome of one (item, target) pair, reported as the loop advances."""

    target: Target
    artifact_type: ArtifactType
    item_id: str
    outcome: Outcome
    method: LinkMethod | None
    error: str | None


@dataclass(frozen=True)
class TargetSummary:
    """Per-target counters accumulated during one install/update run."""

    target: str
    target_name: str
    installed: int
    skipped: int
    failed: int


def resolve_method(option: LinkMethod | None, config: AgentShareConfig) -> LinkMethod:
    """Pick the link method: command option, then config, then symlink."""
    if option is not None:
        return option
    if config.link_method is not None:
        return config.link_method
    return DEFAULT_LINK_METHOD


def resolve_target_keys(
    option: str | None, config: AgentShareConfig, prompter: Prompter
) -> list[str]:
    """Pick target keys: command option, then configured default, then a prompt."""
    if option is not None:
        return [option]
    if config.default_target is not None:
        return [config.default_target]
    return prompter.select_targets()


def target_dirs_for(
    targets: Sequence[Target], artifact_type: ArtifactType, *, cwd: Path
) -> list[Path]:
    return [cwd / target.subdir(artifact_type) for target in targets]


def install_artifacts(
    selected: Mapping[ArtifactType, Sequence[Artifact]],
    existence: Mapping[ArtifactType, ExistenceMap],
    *,
    targets: Sequence[Target],
    cwd: Path,
    mode: InstallMode,
    method: LinkMethod,
    on_progress: Callable[[ProgressEvent], None],
) -> list[TargetSummary]:
    """Apply link-or-copy for every selected item in every target.

    In install mode an item the existence matrix shows as present in a given
    target is skipped for that target only. Update mode always forces, so an
    existing entry is removed and replaced. A failure for one (item, target)
    pair is counted and the loop moves on.
    """
    force = mode == "update"
    summaries: list[TargetSummary] = []

    for target in targets:
        installed = skipped = failed = 0

        for artifact_type, items in selected.items():
            target_dir = cwd / target.subdir(artifact_type)
            matrix = existence.get(artifact_type, {})

            for item in items:
                if mode == "install" and matrix.get(item.id, {}).get(target_dir, False):
                    skipped += 1
                    on_progress(
                        ProgressEvent(
                            target=target,
                            artifact_type=artifact_type,
                            item_id=item.id,
                            outcome="skipped",
                            method=None,
                            error=None,
                        )
                    )
                    continue

                target_path = target_dir / item.id
                try:
                    result = link_or_copy(
                        item.path.parent, target_path, method=method, force=force
                    )
                except Exception as e:
                    logger.debug(
                        "install of %s into %s raised", item.id, target_path, exc_info=True
                    )
                    outcome: Outcome = "failed"
                    used_method: LinkMethod | None = None
                    error: str | None = str(e)
                else:
                    outcome = "installed" if result.success else "failed"
                    used_method = result.method if result.success else None
                    error = result.error

                if outcome == "installed":
                    installed += 1
                else:
                    failed += 1
                on_progress(
                    ProgressEvent(
                        target=target,
                        artifact_type=artifact_type,
                        item_id=item.id,
                        outcome=outcome,
                        method=used_method,
                        error=error,
                    )
                )

        summaries.append(
            TargetSummary(
                target=target.key,
                target_name=target.display_name,
                installed=installed,
                skipped=skipped,
                failed=failed,
            )
        )

    return summaries
