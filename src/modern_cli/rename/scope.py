"""Detection of the package scope a project currently uses."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from modern_cli.rename.manifest import ManifestError, read_manifest

logger = logging.getLogger(__name__)


async def list_package_dirs(packages_dir: Path) -> list[Path]:
    """Return sub-package directories in lexicographic order."""
    if not await asyncio.to_thread(packages_dir.is_dir):
        return []
    entries = sorted(await asyncio.to_thread(lambda: list(packages_dir.iterdir())))
    dirs: list[Path] = []
    for entry in entries:
        if await asyncio.to_thread(entry.is_dir):
            dirs.append(entry)
    return dirs


def scope_of(package_name: object) -> str | None:
    """Return ``@scope`` for a scoped package name, else None."""
    if not isinstance(package_name, str):
        return None
    if package_name.startswith("@") and "/" in package_name:
        return package_name.split("/", 1)[0]
    return None


async def detect_scope(
    packages_dir: Path, manifest_name: str, fallback_scope: str
) -> tuple[str, bool]:
    """Find the scope of the first scoped sub-package.

    Args:
        packages_dir: Directory holding one directory per sub-package.
        manifest_name: Manifest filename inside each sub-package.
        fallback_scope: Scope used when no sub-package is scoped.

    Returns:
        (scope, detected) where scope has no trailing slash, e.g.
        ``@my-app``, and detected is False when the fallback was used.
    """
    for package_dir in await list_package_dirs(packages_dir):
        manifest_path = package_dir / manifest_name
        if not await asyncio.to_thread(manifest_path.is_file):
            continue
        try:
            data = await read_manifest(manifest_path)
        except ManifestError as exc:
            logger.debug("Ignoring %s during scope detection: %s", manifest_path, exc.reason)
            continue
        scope = scope_of(data.get("name"))
        if scope is not None:
            logger.debug("Detected scope %s from %s", scope, manifest_path)
            return scope, True

    logger.debug("No scoped package found, using fallback %s", fallback_scope)
    return fallback_scope, False
