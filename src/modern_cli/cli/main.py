"""modern-cli CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from modern_cli import __version__
from modern_cli.cli.create_cmd import create
from modern_cli.cli.install_cmd import install
from modern_cli.cli.rename_cmd import rename
from modern_cli.models.config import load_cli_config

app = typer.Typer(
    name="modern-cli",
    help="CLI for creating and renaming Modern Fullstack projects",
    no_args_is_help=True,
    epilog=(
        "Examples: modern-cli create my-new-app | "
        "modern-cli rename ~/projects/old-app new-app | "
        "modern-cli install"
    ),
)

# Register subcommands
app.command()(create)
app.command()(rename)
app.command()(install)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"modern-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging."),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a modern-cli.yaml configuration file.",
    ),
) -> None:
    """CLI for creating and renaming Modern Fullstack projects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = load_cli_config(config)
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as exc:
        typer.echo(f"Error: Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1)
