"""Renamer: rewrite a boilerplate-derived project to a new name.

Rewrites the root manifest, every sub-package manifest, scoped imports
in package sources, and the boilerplate name in documentation. Steps
run sequentially; a broken sub-package is reported on the RenameReport
and skipped while the others continue. Nothing is rolled back.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from modern_cli.models.config import RenamerConfig
from modern_cli.models.report import RenameReport
from modern_cli.naming import scope_token, title_case
from modern_cli.rename.manifest import ManifestError, read_manifest, write_manifest
from modern_cli.rename.scope import detect_scope, list_package_dirs
from modern_cli.rename.walker import list_files

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    """Decode path as UTF-8 without translating line endings."""
    return path.read_bytes().decode("utf-8")


def _write_text(path: Path, content: str) -> None:
    path.write_bytes(content.encode("utf-8"))


@dataclass(frozen=True)
class RenameTarget:
    """The identity a project is renamed to."""

    name: str

    @property
    def scope_token(self) -> str:
        return scope_token(self.name)

    @property
    def display_name(self) -> str:
        return title_case(self.name)


def _rekey(mapping: dict[str, Any], old_token: str, new_token: str) -> dict[str, Any]:
    """Return mapping with keys under old_token moved to new_token.

    Values and key order are preserved.
    """
    rekeyed: dict[str, Any] = {}
    for key, value in mapping.items():
        if key.startswith(old_token):
            key = new_token + key[len(old_token):]
        rekeyed[key] = value
    return rekeyed


def rewrite_package_manifest(
    data: dict[str, Any], old_token: str, new_token: str
) -> dict[str, Any]:
    """Apply the scope change to a sub-package manifest in place."""
    name = data.get("name")
    if isinstance(name, str) and name.startswith(old_token):
        data["name"] = new_token + name[len(old_token):]

    for section in ("dependencies", "devDependencies"):
        deps = data.get(section)
        if isinstance(deps, dict):
            data[section] = _rekey(deps, old_token, new_token)

    return data


def rewrite_source_text(
    content: str, old_token: str, new_token: str, boilerplate_name: str, new_name: str
) -> str:
    """Replace the scope token and the boilerplate name in source text."""
    if old_token in content:
        content = content.replace(old_token, new_token)
    if boilerplate_name in content:
        content = content.replace(boilerplate_name, new_name)
    return content


def rewrite_doc_text(
    content: str, display_name: str, boilerplate_name: str, target: RenameTarget
) -> str:
    """Replace the display phrase and the boilerplate name in docs."""
    content = content.replace(display_name, target.display_name)
    return content.replace(boilerplate_name, target.name)


class Renamer:
    """Rename a project tree in place.

    The caller is responsible for validating the new name against
    NAME_PATTERN; the Renamer trusts what it is given.
    """

    def __init__(self, config: RenamerConfig | None = None) -> None:
        self._config = config or RenamerConfig()

    async def rename(self, root_dir: str | Path, new_name: str) -> RenameReport:
        """Rewrite the project at root_dir to carry new_name.

        Args:
            root_dir: Project root containing package.json and packages/.
            new_name: The new project name.

        Returns:
            RenameReport describing what was written and skipped.

        Raises:
            ManifestError: If the root manifest cannot be parsed.
        """
        config = self._config
        root = Path(root_dir).resolve()
        target = RenameTarget(new_name)
        packages_dir = root / config.packages_dir

        scope, detected = await detect_scope(
            packages_dir, config.manifest_name, config.fallback_scope
        )
        old_token = f"{scope}/"
        report = RenameReport(
            root_dir=str(root),
            new_name=new_name,
            old_scope=old_token,
            new_scope=target.scope_token,
            scope_detected=detected,
        )
        logger.info("Renaming %s: %s -> %s", root, old_token, target.scope_token)

        await self._update_root_manifest(root, target, report)

        for package_dir in await list_package_dirs(packages_dir):
            await self._update_package(package_dir, old_token, target, report)

        await self._update_docs(root, target, report)
        return report

    async def _update_root_manifest(
        self, root: Path, target: RenameTarget, report: RenameReport
    ) -> None:
        manifest_path = root / self._config.manifest_name
        if not await asyncio.to_thread(manifest_path.is_file):
            return
        data = await read_manifest(manifest_path)
        data["name"] = target.name
        await write_manifest(manifest_path, data)
        report.root_manifest_updated = True

    async def _update_package(
        self,
        package_dir: Path,
        old_token: str,
        target: RenameTarget,
        report: RenameReport,
    ) -> None:
        config = self._config
        manifest_path = package_dir / config.manifest_name
        if not await asyncio.to_thread(manifest_path.is_file):
            return

        try:
            data = await read_manifest(manifest_path)
        except ManifestError as exc:
            logger.warning("Skipping package %s: %s", package_dir.name, exc.reason)
            report.add_warning(str(manifest_path), exc.reason)
            return

        rewrite_package_manifest(data, old_token, target.scope_token)
        await write_manifest(manifest_path, data)
        report.packages_updated.append(str(manifest_path))

        extensions = tuple(config.source_extensions)
        for path in await list_files(package_dir / config.source_dir):
            if not path.name.endswith(extensions):
                continue
            await self._rewrite_source(path, old_token, target, report)

    async def _rewrite_source(
        self, path: Path, old_token: str, target: RenameTarget, report: RenameReport
    ) -> None:
        try:
            content = await asyncio.to_thread(_read_text, path)
        except UnicodeDecodeError:
            logger.warning("Skipping %s: not valid UTF-8", path)
            report.add_warning(str(path), "not valid UTF-8")
            return

        updated = rewrite_source_text(
            content,
            old_token,
            target.scope_token,
            self._config.boilerplate_name,
            target.name,
        )
        if updated != content:
            await asyncio.to_thread(_write_text, path, updated)
            report.source_files_rewritten.append(str(path))
            logger.debug("Rewrote %s", path)

    async def _update_docs(
        self, root: Path, target: RenameTarget, report: RenameReport
    ) -> None:
        config = self._config
        for relative in config.doc_files:
            path = root / relative
            if not await asyncio.to_thread(path.is_file):
                continue
            content = await asyncio.to_thread(_read_text, path)
            updated = rewrite_doc_text(
                content, config.display_name, config.boilerplate_name, target
            )
            if updated != content:
                await asyncio.to_thread(_write_text, path, updated)
                report.doc_files_rewritten.append(str(path))
                logger.debug("Rewrote %s", path)


def rename_project(
    root_dir: str | Path, new_name: str, config: RenamerConfig | None = None
) -> RenameReport:
    """Sync entry point -- runs Renamer.rename() in a fresh event loop."""
    return asyncio.run(Renamer(config).rename(root_dir, new_name))
