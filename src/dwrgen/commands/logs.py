"""Log commands for dwrgen."""

import typer
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from typing import Optional

from ..logging import parse_log_file, WARNING, ERROR, COMMAND

app = typer.Typer(help="Show dwrgen run logs.")
console = Console()

LEVEL_STYLES = {WARNING: "yellow", ERROR: "bold red", COMMAND: "green"}


@app.command("show")
def logs_show(
    lines: int = typer.Option(50, "--lines", "-n", help="Number of recent lines to show"),
    level: Optional[str] = typer.Option(None, "--level", "-l", help="Only show entries of this level"),
    base: Path = typer.Option(Path("."), "--base", "-b", help="Project root"),
):
    """Show recent log entries."""
    entries = parse_log_file(base)

    if level:
        entries = [e for e in entries if e.level == level.upper()]

    if not entries:
        console.print("[yellow]No log entries found.[/yellow]")
        return

    for entry in entries[-lines:]:
        ts = entry.timestamp[:19]  # Trim microseconds
        style = LEVEL_STYLES.get(entry.level, "dim")
        console.print(f"[dim]{ts}[/] [{style}]{entry.level}[/] {escape(entry.message)}")
