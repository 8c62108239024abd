"""reclog fmt -- rewrite recordings in canonical form.

Canonical form is what the Recorder itself writes: one serialized
operation after another, each followed by a blank line. Comments are
not carried over.
"""

from __future__ import annotations

import io
from pathlib import Path

import typer

from reclog.errors import GrammarError
from reclog.loader.errors import ErrorFormatter
from reclog.recording.recorder import Recorder


def canonical_form(source: str, name: str) -> str:
    """Re-serialize every operation of ``source``.

    Raises:
        GrammarError: If ``source`` is not a well-formed recording.
    """
    recorder = Recorder.for_replay(io.StringIO(source), name)
    return "".join(op.serialize() for op in recorder.operations())


def fmt(
    recordings: list[str] = typer.Argument(..., help="Recording files to rewrite"),
    check: bool = typer.Option(
        False,
        "--check",
        help="Only report files that are not in canonical form",
    ),
) -> None:
    """Rewrite recordings in the form the recorder writes them.

    With --check nothing is written and the command exits with code 1
    if any file would change.
    """
    formatter = ErrorFormatter()
    changed = 0
    failed = 0

    for r in recordings:
        path = Path(r)
        if not path.is_file():
            typer.echo(f"Error: File not found: {r}", err=True)
            raise typer.Exit(code=1)

        source = path.read_text(encoding="utf-8")
        try:
            formatted = canonical_form(source, str(path))
        except GrammarError as exc:
            typer.echo(formatter.format_error(exc, source.splitlines()), err=True)
            failed += 1
            continue

        if formatted == source:
            continue
        changed += 1
        if check:
            typer.echo(f"would reformat {path}")
        else:
            path.write_text(formatted, encoding="utf-8")
            typer.echo(f"reformatted {path}")

    if failed or (check and changed):
        raise typer.Exit(code=1)
