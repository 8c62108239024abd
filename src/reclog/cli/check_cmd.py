"""reclog check CLI command for recording validation.

Parses every operation of each recording and verifies that each one
survives a write/read round trip unchanged. Reports all broken files at
once, with rich or CI-friendly diagnostics.
"""

from __future__ import annotations

import io
from pathlib import Path

import typer

from reclog.errors import GrammarError, RecordingIOError
from reclog.loader.errors import ErrorFormatter
from reclog.models.operation import Operation
from reclog.recording.recorder import Recorder


def _round_trips(op: Operation) -> bool:
    """Whether ``op`` reads back unchanged and re-serializes identically."""
    replayer = Recorder.for_replay(io.StringIO(op.serialize()), "<round-trip>")
    reparsed = replayer.step()
    return reparsed == op and reparsed.serialize() == op.serialize()


def check_recording(path: Path, formatter: ErrorFormatter) -> bool:
    """Check one recording, echoing diagnostics. Returns True if it is sound."""
    source = path.read_text(encoding="utf-8")
    recorder = Recorder.for_replay(io.StringIO(source), str(path))

    count = 0
    try:
        for op in recorder.operations():
            count += 1
            if not _round_trips(op):
                typer.echo(
                    f"{path}: operation {count} ({op.command!r}) does not round-trip",
                    err=not formatter.ci_mode,
                )
                return False
    except GrammarError as exc:
        typer.echo(formatter.format_error(exc, source.splitlines()), err=not formatter.ci_mode)
        return False

    formatter.print_success(str(path), count)
    return True


def check(
    recordings: list[str] = typer.Argument(..., help="Recording files to check"),
    ci: bool = typer.Option(False, "--ci", help="CI-friendly concise output"),
) -> None:
    """Check recordings against the operation grammar.

    Exits with code 0 if every recording parses and round-trips, 1 otherwise.
    """
    formatter = ErrorFormatter(ci_mode=ci)

    files: list[Path] = []
    for r in recordings:
        p = Path(r)
        if not p.is_file():
            typer.echo(f"Error: File not found: {r}", err=True)
            raise typer.Exit(code=1)
        files.append(p)

    sound = 0
    for path in files:
        try:
            ok = check_recording(path, formatter)
        except (OSError, UnicodeDecodeError, RecordingIOError) as exc:
            typer.echo(f"Error: cannot read {path}: {exc}", err=True)
            ok = False
        if ok:
            sound += 1

    typer.echo(f"\n{sound}/{len(files)} recordings valid")

    if sound != len(files):
        raise typer.Exit(code=1)
