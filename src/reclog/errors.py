"""Exception hierarchy shared by the scanner, parser and recorder.

Every failure is raised to the immediate caller. Grammar, mismatch and
not-found errors carry the recording position (``name:line``) so that a
corrupt or drifted recording can be located without re-reading it.
"""

from __future__ import annotations


class RecorderError(Exception):
    """Base class for all reclog errors."""


class MisconfiguredRecorderError(RecorderError):
    """Raised when a record-only call reaches a replaying recorder, or vice versa."""


class RecordingIOError(RecorderError):
    """Raised when reading from or writing to the recording stream fails."""


class GrammarError(RecorderError):
    """Raised when a recording does not follow the operation grammar.

    Attributes:
        message: Human-readable description of the problem.
        name: Diagnostic name of the recording (usually its path).
        line: 1-indexed line number at which the problem was detected.
        code: Short diagnostic code used by the error formatter.
    """

    def __init__(self, message: str, name: str, line: int, code: str = "R999") -> None:
        self.message = message
        self.name = name
        self.line = line
        self.code = code
        super().__init__(f"{self.position}: {message}")

    @property
    def position(self) -> str:
        return f"{self.name}:{self.line}"


class CommandMismatchError(RecorderError):
    """Raised during replay when the recorded command differs from the requested one.

    Usually means the code under test changed since the recording was made.
    """

    code = "R004"

    def __init__(self, expected: str, found: str, position: str) -> None:
        self.expected = expected
        self.found = found
        self.position = position
        self.message = f"expected command {expected!r}, found {found!r} in recording"
        super().__init__(f"{position}: {self.message}")


class RecordingNotFoundError(RecorderError):
    """Raised during replay when the recording ends before the requested command."""

    code = "R005"

    def __init__(self, command: str, position: str) -> None:
        self.command = command
        self.position = position
        self.message = f"recording for command {command!r} not found"
        super().__init__(f"{position}: {self.message}")
