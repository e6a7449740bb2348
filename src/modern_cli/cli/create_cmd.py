"""modern-cli create -- start a new project from the boilerplate.

Clones the boilerplate repository, replaces its git history with a
fresh repository, and renames the result to the chosen project name.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from modern_cli.cli.output import fail, render_report, spinner, succeed, warn
from modern_cli.models.config import config_from_context
from modern_cli.naming import INVALID_NAME_MESSAGE, is_valid_project_name
from modern_cli.rename.renamer import rename_project
from modern_cli.scaffold.clone import CloneError, clone_boilerplate, reset_history


def prompt_project_name() -> str:
    """Ask for a project name until a valid one is entered."""
    while True:
        name = typer.prompt("What is the name of your new project?").strip()
        if is_valid_project_name(name):
            return name
        typer.echo(INVALID_NAME_MESSAGE, err=True)


def create(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Name of the new project"),
) -> None:
    """Create a new project from the boilerplate."""
    config = config_from_context(ctx)
    console = Console(soft_wrap=True)

    project_name = name if name is not None else prompt_project_name()
    if not is_valid_project_name(project_name):
        console.print(f"[bold red]✗ Invalid name. {INVALID_NAME_MESSAGE}[/bold red]")
        raise typer.Exit(code=1)

    target_dir = (Path.cwd() / project_name).resolve()
    if target_dir.exists():
        console.print(f"[bold red]✗ Directory {escape(project_name)} already exists.[/bold red]")
        raise typer.Exit(code=1)

    try:
        with spinner(console, f"Cloning boilerplate into {project_name}..."):
            clone_boilerplate(config.repo_url, target_dir)
    except CloneError as exc:
        fail(console, "Failed to clone repository.")
        console.print(escape(exc.stderr or str(exc)))
        raise typer.Exit(code=1)
    succeed(console, "Cloned repository.")

    try:
        with spinner(console, "Cleaning up git history..."):
            reset_history(target_dir)
    except CloneError:
        warn(console, "Failed to reset git history.")
    else:
        succeed(console, "Initialized new git repository.")

    try:
        with spinner(console, "Renaming project files..."):
            report = rename_project(target_dir, project_name, config.renamer)
    except Exception as exc:
        fail(console, "Failed to rename project.")
        console.print(escape(str(exc)))
    else:
        succeed(console, "Project renamed successfully.")
        render_report(report, console)

    console.print(f"\n[green]✓ Project {escape(project_name)} created successfully![/green]")
    console.print(f"\nTo get started:\n  cd {escape(project_name)}\n  pnpm install\n  pnpm dev")
