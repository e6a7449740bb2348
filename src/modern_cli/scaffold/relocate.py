"""Rename a project directory to match its new project name."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class RelocationOutcome(str, Enum):
    """What happened to the project directory."""

    renamed = "renamed"
    inside_target = "inside_target"
    destination_exists = "destination_exists"
    unchanged = "unchanged"


@dataclass(frozen=True)
class RelocationResult:
    outcome: RelocationOutcome
    source: Path
    destination: Path

    @property
    def moved(self) -> bool:
        return self.outcome is RelocationOutcome.renamed


def _is_within(path: Path, directory: Path) -> bool:
    return path == directory or directory in path.parents


def relocate_project(
    target_dir: Path, new_name: str, cwd: Path | None = None
) -> RelocationResult:
    """Move target_dir to a sibling directory named new_name.

    The move is skipped when the working directory is target_dir or
    inside it, or when the sibling already exists.

    Args:
        target_dir: The project directory.
        new_name: Name for the directory.
        cwd: Working directory of the caller. Defaults to Path.cwd().

    Returns:
        RelocationResult with the outcome and both paths.

    Raises:
        OSError: If the rename itself fails.
    """
    source = target_dir.resolve()
    destination = source.parent / new_name
    current = (cwd or Path.cwd()).resolve()

    if source.name == new_name:
        return RelocationResult(RelocationOutcome.unchanged, source, destination)
    if _is_within(current, source):
        logger.info("Not moving %s: working directory is inside it", source)
        return RelocationResult(RelocationOutcome.inside_target, source, destination)
    if destination.exists():
        logger.info("Not moving %s: %s already exists", source, destination)
        return RelocationResult(RelocationOutcome.destination_exists, source, destination)

    source.rename(destination)
    logger.info("Moved %s to %s", source, destination)
    return RelocationResult(RelocationOutcome.renamed, source, destination)
