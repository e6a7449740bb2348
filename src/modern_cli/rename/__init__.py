"""Project rename engine."""

from modern_cli.rename.manifest import ManifestError
from modern_cli.rename.renamer import Renamer, RenameTarget, rename_project
from modern_cli.rename.walker import list_files

__all__ = [
    "ManifestError",
    "RenameTarget",
    "Renamer",
    "list_files",
    "rename_project",
]
