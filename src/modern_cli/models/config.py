"""Configuration models for modern-cli.

Captures modern-cli.yaml fields with defaults matching the
modern-fullstack-boilerplate repository layout.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = "modern-cli.yaml"
CONFIG_ENV_VAR = "MODERN_CLI_CONFIG"

DEFAULT_REPO_URL = (
    "https://github.com/alexandermarquesm/modern-fullstack-boilerplate.git"
)


class RenamerConfig(BaseModel):
    """Identity of the boilerplate and where the Renamer looks for it.

    The fallback scope is used when no sub-package manifest exposes a
    scoped name.
    """

    model_config = {"extra": "forbid"}

    fallback_scope: str = "@repo"
    boilerplate_name: str = "modern-fullstack-boilerplate"
    display_name: str = "Modern Fullstack Boilerplate"
    packages_dir: str = "packages"
    manifest_name: str = "package.json"
    source_dir: str = "src"
    source_extensions: list[str] = Field(
        default_factory=lambda: [".ts", ".tsx", ".js", ".jsx"]
    )
    doc_files: list[str] = Field(
        default_factory=lambda: ["README.md", "packages/frontend/index.html"]
    )

    @field_validator("fallback_scope")
    @classmethod
    def _check_scope(cls, value: str) -> str:
        if not value.startswith("@") or "/" in value or len(value) < 2:
            raise ValueError("fallback_scope must look like '@name'")
        return value

    @field_validator("source_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]


class CliConfig(BaseModel):
    """Top-level configuration loaded from modern-cli.yaml."""

    model_config = {"extra": "forbid"}

    repo_url: str = DEFAULT_REPO_URL
    install_command: list[str] | None = None
    renamer: RenamerConfig = Field(default_factory=RenamerConfig)


def find_config_file(path: Path | None = None) -> Path | None:
    """Locate the configuration file to use, if any.

    Order: explicit path, the MODERN_CLI_CONFIG environment variable,
    then modern-cli.yaml in the current directory.
    """
    if path is not None:
        return path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    candidate = Path.cwd() / CONFIG_FILENAME
    if candidate.exists():
        return candidate
    return None


def load_cli_config(path: Path | None = None) -> CliConfig:
    """Load CliConfig from YAML. Returns defaults if no file is found.

    Args:
        path: Explicit configuration file. Must exist when given.

    Returns:
        Validated CliConfig instance.

    Raises:
        FileNotFoundError: If an explicitly requested file is missing.
    """
    config_path = find_config_file(path)
    if config_path is None:
        return CliConfig()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return CliConfig()
    return CliConfig.model_validate(raw)


def config_from_context(ctx: object) -> CliConfig:
    """Return the CliConfig a CLI callback stored on ctx.obj, or defaults."""
    obj = getattr(ctx, "obj", None)
    if isinstance(obj, CliConfig):
        return obj
    return CliConfig()
