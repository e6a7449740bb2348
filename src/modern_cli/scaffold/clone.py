"""Materialize a fresh project from the boilerplate repository."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class CloneError(Exception):
    """Raised when a git step of project creation fails."""

    def __init__(self, message: str, stderr: str = "") -> None:
        self.stderr = stderr.strip()
        detail = f": {self.stderr}" if self.stderr else ""
        super().__init__(f"{message}{detail}")


def _run_git(args: list[str], cwd: Path | None = None) -> None:
    try:
        subprocess.run(
            ["git", *args],
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise CloneError("git executable not found") from exc
    except subprocess.CalledProcessError as exc:
        raise CloneError(f"git {args[0]} failed", exc.stderr or "") from exc


def clone_boilerplate(repo_url: str, target: Path) -> None:
    """Clone repo_url into target.

    Raises:
        CloneError: If git is missing or the clone fails.
    """
    logger.info("Cloning %s into %s", repo_url, target)
    _run_git(["clone", repo_url, str(target)])


def reset_history(target: Path) -> None:
    """Drop the cloned history and start a fresh repository.

    Raises:
        CloneError: If the .git directory cannot be removed or
            git init fails.
    """
    git_dir = target / ".git"
    try:
        if git_dir.exists():
            shutil.rmtree(git_dir)
    except OSError as exc:
        raise CloneError(f"could not remove {git_dir}", str(exc)) from exc
    _run_git(["init"], cwd=target)
    logger.info("Initialized new repository in %s", target)
