"""Rename outcome models.

A RenameReport records every file the Renamer touched and every
problem it stepped over, so partial failures are visible to callers.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PackageWarning(BaseModel):
    """A non-fatal problem encountered while renaming."""

    model_config = {"extra": "forbid"}

    path: str
    message: str


class RenameReport(BaseModel):
    """Result of a single rename operation."""

    model_config = {"extra": "forbid"}

    root_dir: str
    new_name: str
    old_scope: str
    new_scope: str
    scope_detected: bool = False
    root_manifest_updated: bool = False
    packages_updated: list[str] = Field(default_factory=list)
    source_files_rewritten: list[str] = Field(default_factory=list)
    doc_files_rewritten: list[str] = Field(default_factory=list)
    warnings: list[PackageWarning] = Field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True if any source or documentation text was rewritten.

        Manifests are always written back, so they are not counted.
        """
        return bool(self.source_files_rewritten or self.doc_files_rewritten)

    def add_warning(self, path: str, message: str) -> None:
        self.warnings.append(PackageWarning(path=path, message=message))
