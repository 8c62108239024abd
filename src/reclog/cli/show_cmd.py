"""reclog show -- display the operations stored in a recording.

Renders one table row per operation with its command, the output form
(plain or escaped) and the recorded output.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reclog.errors import GrammarError
from reclog.loader.errors import ErrorFormatter
from reclog.recording.files import open_recorder

# Longest output shown per row before eliding
_MAX_OUTPUT_CHARS = 500


def show(
    recording: str = typer.Argument(..., help="Recording file to display"),
) -> None:
    """Show the operations of a recording without replaying them."""
    console = Console()
    path = Path(recording)
    if not path.is_file():
        console.print(f"[bold red]Error:[/bold red] Recording not found: {escape(recording)}")
        raise typer.Exit(code=1)

    table = Table(box=box.SIMPLE, title=escape(str(path)), title_justify="left")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Command", style="bold")
    table.add_column("Form")
    table.add_column("Output")

    count = 0
    with open_recorder(path) as recorder:
        try:
            for op in recorder.operations():
                count += 1
                output = op.output
                if len(output) > _MAX_OUTPUT_CHARS:
                    output = output[:_MAX_OUTPUT_CHARS] + "..."
                form = "escaped" if op.needs_escape else "plain"
                table.add_row(
                    str(count), escape(op.command), form, escape(output.rstrip("\n")), end_section=True
                )
        except GrammarError as exc:
            source = path.read_text(encoding="utf-8")
            console.print(table)
            typer.echo(ErrorFormatter().format_error(exc, source.splitlines()), err=True)
            raise typer.Exit(code=1)

    if count == 0:
        console.print("[dim]No operations recorded.[/dim]")
        return

    console.print(table)
    console.print(f"[dim]{count} operation(s)[/dim]")
