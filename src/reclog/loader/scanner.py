"""Line scanner over a recording stream.

Yields one line at a time and remembers where it is, so that the parser
can point at the exact line of a malformed recording.
"""

from __future__ import annotations

from typing import IO, AnyStr

from reclog.errors import RecordingIOError


class LineScanner:
    """Read a text or binary stream one line at a time.

    Usage:
        scanner = LineScanner(stream, "testdata/recording")
        while scanner.scan():
            handle(scanner.text())

    Attributes:
        name: Diagnostic name rendered in positions, typically a file path.
        line_number: 1-indexed number of the current line (0 before the
            first scan).
    """

    def __init__(self, stream: IO[AnyStr], name: str = "<recording>") -> None:
        self._stream = stream
        self.name = name
        self.line_number = 0
        self._text = ""
        self._exhausted = False

    def scan(self) -> bool:
        """Advance to the next line. Returns False at end of stream."""
        if self._exhausted:
            return False
        try:
            raw = self._stream.readline()
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RecordingIOError(f"{self.position()}: failed to read recording: {exc}") from exc

        if not raw:
            self._exhausted = True
            self._text = ""
            return False

        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        self._text = raw
        self.line_number += 1
        return True

    def text(self) -> str:
        """Current line without its line terminator."""
        return self._text

    def position(self) -> str:
        return f"{self.name}:{self.line_number}"
