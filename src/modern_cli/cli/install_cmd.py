"""modern-cli install -- put the CLI on the user's PATH."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from modern_cli.cli.output import fail, spinner, succeed
from modern_cli.models.config import config_from_context


def _project_checkout() -> Path | None:
    """Return the source checkout this package runs from, if there is one.

    A wheel install lands in site-packages, where the directory three
    levels up holds no pyproject.toml.
    """
    candidate = Path(__file__).resolve().parents[3]
    if (candidate / "pyproject.toml").is_file():
        return candidate
    return None


def _in_virtualenv() -> bool:
    return sys.prefix != sys.base_prefix


def default_install_command() -> list[str] | None:
    """An editable install of this checkout with the current interpreter.

    pip refuses --user inside a virtualenv, so it is only added outside one.
    Returns None when there is no checkout to install from.
    """
    checkout = _project_checkout()
    if checkout is None:
        return None
    command = [sys.executable, "-m", "pip", "install"]
    if not _in_virtualenv():
        command.append("--user")
    command.extend(["--editable", str(checkout)])
    return command


def _print_pipx_hint(console: Console) -> None:
    checkout = _project_checkout()
    target = escape(str(checkout)) if checkout else "<path-to-modern-cli-checkout>"
    console.print("\n[yellow]Try installing it in an isolated environment instead:[/yellow]")
    console.print(f"[cyan]pipx install {target}[/cyan]")


def install(ctx: typer.Context) -> None:
    """Install the CLI globally on your system."""
    config = config_from_context(ctx)
    command = config.install_command or default_install_command()
    console = Console(soft_wrap=True)

    if command is None:
        fail(console, "No source checkout found to install from.")
        _print_pipx_hint(console)
        raise typer.Exit(code=1)

    try:
        with spinner(console, "Installing modern-cli globally..."):
            subprocess.run(command, check=True, capture_output=True, text=True)
    except (subprocess.CalledProcessError, FileNotFoundError) as exc:
        fail(console, "Failed to install globally.")
        console.print("\n[red]Error details:[/red]")
        details = getattr(exc, "stderr", None) or str(exc)
        console.print(escape(details.strip()))
        _print_pipx_hint(console)
        raise typer.Exit(code=1)

    succeed(console, "Success! You can now use 'modern-cli' from any folder.")
    console.print(
        "[dim]You might need to restart your terminal if it doesn't appear immediately.[/dim]"
    )
