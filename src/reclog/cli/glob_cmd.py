"""reclog glob -- record or replay a filesystem glob.

Demonstrates a component wired through a Recorder: with --record the
filesystem is listed and the result written to the recording, otherwise
the result is served from the recording.
"""

from __future__ import annotations

from pathlib import Path

import typer

from reclog.errors import RecorderError
from reclog.example.globber import Globber
from reclog.models.config import load_project_config, record_requested
from reclog.recording.files import open_recorder


def glob_cmd(
    pattern: str = typer.Argument(..., help="Glob pattern, e.g. 'testdata/files/*'"),
    recording: str = typer.Option(..., "--recording", "-r", help="Recording file"),
    record: bool = typer.Option(
        False,
        "--record",
        help="Do the real glob and rewrite the recording (also: RECLOG_RECORD=1)",
    ),
) -> None:
    """Glob files, recording the result or replaying it from a recording."""
    record = record or record_requested(load_project_config())
    try:
        with open_recorder(Path(recording), record=record) as recorder:
            matches = Globber(recorder).glob(pattern)
    except RecorderError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    for match in matches:
        typer.echo(match)
