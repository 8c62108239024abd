"""Error formatter with dual-mode output (rich human and CI concise).

Produces annotated diagnostics pointing at the offending line of a
recording in human mode, and concise ``file:line -- message`` lines in
CI mode.
"""

from __future__ import annotations

import os

from reclog.errors import CommandMismatchError, GrammarError, RecordingNotFoundError

# Human-readable descriptions for diagnostic codes
ERROR_DESCRIPTIONS: dict[str, str] = {
    "R001": "separator expected",
    "R002": "missing closing separators",
    "R003": "non-blank line after escaped output",
    "R004": "command mismatch",
    "R005": "recording exhausted",
}

# Hints shown under rich diagnostics
ERROR_HELP: dict[str, str] = {
    "R001": "every command line must be followed by a '----' line",
    "R002": "escaped output blocks end with two successive '----' lines",
    "R003": "leave a blank line after the closing '----' pair",
    "R004": "re-record the recording if the code under test changed on purpose",
    "R005": "re-record the recording if new commands were added",
}

Diagnostic = GrammarError | CommandMismatchError | RecordingNotFoundError


def _split_position(position: str) -> tuple[str, int | None]:
    """Split ``name:line`` into its parts; the name itself may contain colons."""
    name, sep, line = position.rpartition(":")
    if sep and line.isdigit():
        return name, int(line)
    return position, None


class ErrorFormatter:
    """Formats recording diagnostics for human or CI consumption.

    Args:
        ci_mode: If True, use CI-friendly concise output. If None,
            auto-detect from the CI environment variable.
    """

    def __init__(self, ci_mode: bool | None = None) -> None:
        if ci_mode is None:
            self.ci_mode = os.environ.get("CI", "").lower() in ("true", "1", "yes")
        else:
            self.ci_mode = ci_mode

    def _describe(self, code: str) -> str:
        return ERROR_DESCRIPTIONS.get(code, "invalid recording")

    def format_error(self, error: Diagnostic, source_lines: list[str]) -> str:
        """Format a single error for display.

        Args:
            error: The error raised while parsing or replaying.
            source_lines: Lines of the recording the error points into.

        Returns:
            Formatted error string.
        """
        filename, line = _split_position(error.position)
        if self.ci_mode:
            return f"{filename}:{line or 0} -- {error.message}"
        return self._format_rich(error, source_lines, filename, line)

    def _format_rich(
        self,
        error: Diagnostic,
        source_lines: list[str],
        filename: str,
        line: int | None,
    ) -> str:
        """Format error in Rust/Elm-style rich format.

        Produces output like:
            error[R001]: separator expected
              --> testdata/recording:2
               |
             2 | output
               | expected to find separator after command, found 'output' instead
               |
               = help: every command line must be followed by a '----' line
        """
        code = getattr(error, "code", "R999")
        lines = [f"error[{code}]: {self._describe(code)}"]

        if line is not None and 0 < line <= len(source_lines):
            line_num_str = str(line)
            padding = " " * len(line_num_str)
            lines.append(f"  --> {filename}:{line}")
            lines.append("   |")
            lines.append(f" {line_num_str} | {source_lines[line - 1].rstrip()}")
            lines.append(f" {padding} | {error.message}")
        else:
            lines.append(f"  --> {error.position}")
            lines.append("   |")
            lines.append(f"   | {error.message}")
        lines.append("   |")

        hint = ERROR_HELP.get(code)
        if hint:
            lines.append(f"   = help: {hint}")

        return "\n".join(lines)

    def print_success(self, filename: str, count: int) -> None:
        print(f"  {filename} ... ok ({count} operations)")
