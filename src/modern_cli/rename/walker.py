"""Recursive file listing for the Renamer.

Walks a directory tree with an explicit worklist instead of recursion.
Entries of one directory are stat'ed concurrently and joined before the
walk moves on. Directories are identified by (st_dev, st_ino) so a
symlink loop is visited once and the walk terminates.
"""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


async def _stat_entry(path: Path) -> os.stat_result | None:
    """Stat path following symlinks. Returns None for dangling links."""
    try:
        return await asyncio.to_thread(os.stat, path)
    except FileNotFoundError:
        logger.debug("Skipping dangling entry %s", path)
        return None


async def list_files(directory: str | Path) -> list[Path]:
    """List every regular file anywhere below directory.

    Args:
        directory: Root of the walk. A missing directory yields [].

    Returns:
        Sorted absolute paths of regular files. Directories are
        expanded, never included themselves.
    """
    root = Path(directory).absolute()
    try:
        root_stat = await asyncio.to_thread(os.stat, root)
    except FileNotFoundError:
        return []
    if not stat.S_ISDIR(root_stat.st_mode):
        return []

    seen: set[tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}
    pending: list[Path] = [root]
    files: list[Path] = []

    while pending:
        current = pending.pop()
        names = sorted(await asyncio.to_thread(os.listdir, current))
        entries = [current / name for name in names]
        stats = await asyncio.gather(*(_stat_entry(entry) for entry in entries))

        for entry, entry_stat in zip(entries, stats):
            if entry_stat is None:
                continue
            if stat.S_ISDIR(entry_stat.st_mode):
                key = (entry_stat.st_dev, entry_stat.st_ino)
                if key in seen:
                    logger.debug("Skipping already visited directory %s", entry)
                    continue
                seen.add(key)
                pending.append(entry)
            elif stat.S_ISREG(entry_stat.st_mode):
                files.append(entry)

    return sorted(files)
