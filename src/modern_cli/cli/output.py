"""Rich terminal output layer for modern-cli commands.

Provides a transient spinner for long-running phases, coloured status
lines, and JSON output for RenameReport.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

if TYPE_CHECKING:
    from modern_cli.models.report import RenameReport


# Status styling map: status -> (symbol, Rich markup style)
_STATUS_STYLES: dict[str, tuple[str, str]] = {
    "success": ("✓", "bold green"),
    "warning": ("!", "bold yellow"),
    "failure": ("✗", "bold red"),
}


def create_spinner(console: Console) -> Progress | None:
    """Create a transient spinner for a CLI phase.

    Returns None if the console is not a terminal (CI/pipe mode),
    so the caller can skip the animation.
    """
    if not console.is_terminal:
        return None

    return Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        console=console,
        transient=True,
    )


@contextmanager
def spinner(console: Console, description: str) -> Iterator[None]:
    """Show a spinner with description while the block runs."""
    progress = create_spinner(console)
    if progress is None:
        yield
        return
    with progress:
        progress.add_task(description, total=None)
        yield


def print_status(console: Console, status: str, message: str) -> None:
    """Print a single status line such as ``✓ Cloned repository.``."""
    symbol, style = _STATUS_STYLES[status]
    console.print(f"[{style}]{symbol}[/{style}] {escape(message)}")


def succeed(console: Console, message: str) -> None:
    print_status(console, "success", message)


def warn(console: Console, message: str) -> None:
    print_status(console, "warning", message)


def fail(console: Console, message: str) -> None:
    print_status(console, "failure", message)


def render_report(report: RenameReport, console: Console) -> None:
    """Summarize a rename: scope change, counts, and any warnings."""
    console.print(
        f"  Scope: [cyan]{escape(report.old_scope)}[/cyan] -> "
        f"[green]{escape(report.new_scope)}[/green]"
        + ("" if report.scope_detected else " [dim](fallback)[/dim]")
    )
    console.print(
        f"  Updated {len(report.packages_updated)} package manifest(s), "
        f"{len(report.source_files_rewritten)} source file(s), "
        f"{len(report.doc_files_rewritten)} doc file(s)"
    )
    for warning in report.warnings:
        warn(console, f"Skipped {warning.path}: {warning.message}")


def output_json(report: RenameReport) -> None:
    """Write the rename report as pure JSON to stdout."""
    sys.stdout.write(report.model_dump_json(indent=2))
    sys.stdout.write("\n")
