"""reclog CLI entry point."""

from typing import Optional

import typer

from reclog import __version__
from reclog.cli.check_cmd import check
from reclog.cli.fmt_cmd import fmt
from reclog.cli.glob_cmd import glob_cmd
from reclog.cli.show_cmd import show
from reclog.logging_utils import setup_logging
from reclog.models.config import load_project_config

app = typer.Typer(
    name="reclog",
    help="Record side effects to a text log and replay them later",
    no_args_is_help=True,
)

# Register subcommands
app.command()(check)
app.command()(fmt)
app.command(name="glob")(glob_cmd)
app.command()(show)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"reclog {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="DEBUG, INFO, WARNING or ERROR (default: from reclog.yaml).",
    ),
) -> None:
    """Record side effects to a text log and replay them later."""
    setup_logging(log_level or load_project_config().log_level)
