"""modern-cli rename -- rewrite an existing project to a new name.

Validates the inputs, runs the Renamer once, reports per-package
warnings, then tries to move the folder to a sibling named after the
new project.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from modern_cli.cli.output import fail, output_json, render_report, spinner, succeed, warn
from modern_cli.models.config import config_from_context
from modern_cli.naming import INVALID_NAME_MESSAGE, is_valid_project_name
from modern_cli.rename.renamer import rename_project
from modern_cli.scaffold.relocate import RelocationOutcome, relocate_project


def rename(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to the project folder"),
    new_name: str = typer.Argument(..., metavar="NEW_NAME", help="New project name"),
    format_json: bool = typer.Option(False, "--json", help="Output the rename report as JSON"),
) -> None:
    """Rename an existing project folder."""
    config = config_from_context(ctx)
    console = Console(stderr=format_json, soft_wrap=True)
    cwd = Path.cwd()
    target_dir = (cwd / path).resolve()

    if not target_dir.is_dir():
        console.print(f"[bold red]✗ Directory {escape(str(target_dir))} does not exist.[/bold red]")
        raise typer.Exit(code=1)

    if not is_valid_project_name(new_name):
        console.print(f"[bold red]✗ Invalid name. {INVALID_NAME_MESSAGE}[/bold red]")
        raise typer.Exit(code=1)

    try:
        with spinner(console, f"Renaming project at {target_dir} to {new_name}..."):
            report = rename_project(target_dir, new_name, config.renamer)
    except Exception as exc:
        fail(console, "Failed to rename project.")
        console.print(escape(str(exc)))
        return

    succeed(console, "Project renamed successfully.")
    render_report(report, console)
    if format_json:
        output_json(report)

    try:
        result = relocate_project(target_dir, new_name, cwd=cwd)
    except OSError as exc:
        fail(console, f"Failed to rename folder: {exc}")
        return

    if result.outcome is RelocationOutcome.renamed:
        succeed(console, f"Folder renamed to: {new_name}")
    elif result.outcome is RelocationOutcome.destination_exists:
        warn(console, f'Cannot rename folder: Directory "{new_name}" already exists.')
    elif result.outcome is RelocationOutcome.inside_target:
        warn(
            console,
            "Note: The folder name itself was not changed because you are currently inside it.",
        )
    elif result.outcome is RelocationOutcome.unchanged:
        warn(console, f'Note: The folder is already named "{new_name}".')
