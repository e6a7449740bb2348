"""Reading and writing package.json manifests.

Manifests are validated against PackageManifest but rewritten from the
raw mapping, so key order and unknown fields survive a rename. Writes
are atomic (write to .tmp, then rename) and use 2-space indentation.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Raised when a manifest cannot be read as a package manifest."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest {path}: {reason}")


class PackageManifest(BaseModel):
    """The fields of package.json the Renamer reads."""

    model_config = {"extra": "allow"}

    name: str | None = None
    dependencies: dict[str, str] | None = None
    devDependencies: dict[str, str] | None = None


def parse_manifest(path: Path, text: str) -> dict[str, Any]:
    """Parse manifest text and validate its shape.

    Raises:
        ManifestError: If the text is not a JSON object matching
            PackageManifest.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(path, f"not valid JSON ({exc.msg} at line {exc.lineno})") from exc
    if not isinstance(data, dict):
        raise ManifestError(path, "expected a JSON object")
    try:
        PackageManifest.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ManifestError(path, f"{field}: {first['msg']}") from exc
    return data


def dump_manifest(data: dict[str, Any]) -> str:
    """Serialize a manifest with 2-space indentation and a final newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


async def read_manifest(path: Path) -> dict[str, Any]:
    """Read and validate the manifest at path."""
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ManifestError(path, "not valid UTF-8") from exc
    return parse_manifest(path, text)


async def write_manifest(path: Path, data: dict[str, Any]) -> None:
    """Atomically write data to path."""
    content = dump_manifest(data)
    tmp_path = path.with_name(f"{path.name}.tmp")
    await asyncio.to_thread(tmp_path.write_text, content, encoding="utf-8")
    await asyncio.to_thread(tmp_path.replace, path)
    logger.debug("Wrote manifest %s", path)
