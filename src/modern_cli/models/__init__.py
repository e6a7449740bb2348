"""modern-cli data models - re-exports all public model classes."""

from modern_cli.models.config import CliConfig, RenamerConfig, load_cli_config
from modern_cli.models.report import PackageWarning, RenameReport

__all__ = [
    "CliConfig",
    "PackageWarning",
    "RenameReport",
    "RenamerConfig",
    "load_cli_config",
]
