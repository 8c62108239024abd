"""Parser for the operation grammar.

A small state machine over a LineScanner. Each call to
``OperationParser.try_next`` walks SEEK_COMMAND -> EXPECT_SEPARATOR ->
READ_OUTPUT -> DONE and returns a freshly built Operation, or None once
the recording is exhausted. Any grammar violation moves the parser into
the absorbing ERROR state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from pydantic import ValidationError

from reclog.errors import GrammarError
from reclog.loader.scanner import LineScanner
from reclog.models.operation import SEPARATOR, Operation

logger = logging.getLogger(__name__)

# Diagnostic codes understood by reclog.loader.errors.ErrorFormatter
SEPARATOR_EXPECTED = "R001"
MISSING_CLOSING_SEPARATORS = "R002"
NON_BLANK_TRAILER = "R003"
INVALID_OPERATION = "R999"


class ParseState(str, Enum):
    SEEK_COMMAND = "seek_command"
    EXPECT_SEPARATOR = "expect_separator"
    READ_OUTPUT = "read_output"
    DONE = "done"
    ERROR = "error"


class OperationParser:
    """Pull Operations out of a recording, one at a time.

    Args:
        scanner: Scanner positioned anywhere before the next operation.
    """

    def __init__(self, scanner: LineScanner) -> None:
        self.scanner = scanner
        self.state = ParseState.SEEK_COMMAND
        self._error: GrammarError | None = None

    def try_next(self) -> Operation | None:
        """Parse the next Operation.

        Returns:
            The parsed Operation, or None when no further command exists.

        Raises:
            GrammarError: If the recording is malformed. The parser stays
                in the ERROR state and re-raises on every later call.
        """
        if self._error is not None:
            raise self._error

        self.state = ParseState.SEEK_COMMAND
        try:
            command = self._seek_command()
            if command is None:
                return None

            self.state = ParseState.EXPECT_SEPARATOR
            self._expect_separator()

            self.state = ParseState.READ_OUTPUT
            op = self._build(command, self._read_output())
        except GrammarError as exc:
            self.state = ParseState.ERROR
            self._error = exc
            raise

        self.state = ParseState.DONE
        logger.debug("%s: parsed operation %r", self.scanner.position(), op.command)
        return op

    def __iter__(self) -> Iterator[Operation]:
        while True:
            op = self.try_next()
            if op is None:
                return
            yield op

    def _seek_command(self) -> str | None:
        """Find the next command line, joining continuations."""
        scanner = self.scanner
        while scanner.scan():
            line = scanner.text().strip()
            if not line or line.startswith("#"):
                continue

            # Support wrapping command lines using "\".
            while line.endswith("\\") and scanner.scan():
                head = line[:-1].strip()
                line = f"{head} {scanner.text().strip()}"

            return line
        return None

    def _error_here(self, message: str, code: str) -> GrammarError:
        return GrammarError(message, self.scanner.name, self.scanner.line_number, code=code)

    def _build(self, command: str, output: str) -> Operation:
        try:
            return Operation(command=command, output=output)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"].removeprefix("Value error, ")
            raise self._error_here(f"invalid operation {command!r}: {reason}", INVALID_OPERATION) from exc

    def _expect_separator(self) -> None:
        """Consume a '----' line or raise."""
        if not self.scanner.scan():
            raise self._error_here(
                "expected to find separator after command, found end of recording",
                SEPARATOR_EXPECTED,
            )
        line = self.scanner.text()
        if line != SEPARATOR:
            raise self._error_here(
                f"expected to find separator after command, found {line!r} instead",
                SEPARATOR_EXPECTED,
            )

    def _read_output(self) -> str:
        scanner = self.scanner
        if not scanner.scan():
            return ""

        first = scanner.text()
        if first == SEPARATOR:
            return self._read_escaped_output()
        return self._read_plain_output(first)

    def _read_plain_output(self, line: str) -> str:
        """Accumulate lines up to the first blank line (consumed) or the end."""
        buf: list[str] = []
        while line.strip():
            buf.append(line + "\n")
            if not self.scanner.scan():
                break
            line = self.scanner.text()
        return "".join(buf)

    def _read_escaped_output(self) -> str:
        """Accumulate lines until two successive separators close the block."""
        scanner = self.scanner
        buf: list[str] = []
        while scanner.scan():
            line = scanner.text()
            if line != SEPARATOR:
                buf.append(line + "\n")
                continue

            # Either output content or the first of the closing pair; only a
            # second separator right after it closes the block.
            if not scanner.scan():
                break
            second = scanner.text()
            if second == SEPARATOR:
                if scanner.scan() and scanner.text().strip():
                    raise self._error_here(
                        "non-blank line after end of double ---- separator section",
                        NON_BLANK_TRAILER,
                    )
                return "".join(buf)

            buf.append(line + "\n")
            buf.append(second + "\n")

        raise self._error_here(
            "missing closing separators for escaped output block",
            MISSING_CLOSING_SEPARATORS,
        )
