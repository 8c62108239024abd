"""Recorder: record side effects to a text log, or replay them from one.

A Recorder is embedded into whatever component performs the I/O one
wants to mock out. While recording it does the real thing and appends
each (command, output) pair to a sink; while replaying it serves the
outputs back from an earlier recording instead, checking that the
commands arrive in the recorded order. A disabled Recorder simply does
the real thing.

    class Globber:
        def __init__(self, recorder: Recorder) -> None:
            self.recorder = recorder

        def glob(self, pattern: str) -> list[str]:
            output = self.recorder.next(pattern, lambda: "\\n".join(glob.glob(pattern)))
            return output.split()

The stream handed to a Recorder is owned by the caller; the Recorder
never opens or closes it.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator
from enum import Enum
from typing import IO, Any

from reclog.errors import (
    CommandMismatchError,
    MisconfiguredRecorderError,
    RecordingIOError,
    RecordingNotFoundError,
)
from reclog.loader.parser import OperationParser
from reclog.loader.scanner import LineScanner
from reclog.models.operation import Operation

logger = logging.getLogger(__name__)


class RecorderMode(str, Enum):
    DISABLED = "disabled"
    RECORDING = "recording"
    REPLAYING = "replaying"


def _is_binary(stream: IO[Any]) -> bool:
    return isinstance(stream, (io.RawIOBase, io.BufferedIOBase))


class Recorder:
    """Records operations to a sink, replays them from a source, or passes through.

    Prefer the constructors:
        Recorder.disabled()
        Recorder.for_recording(sink)
        Recorder.for_replay(source, name)

    Args:
        sink: Writable text or binary stream to record into.
        source: Readable text or binary stream to replay from.
        name: Diagnostic name for the source, typically its file path.

    Raises:
        ValueError: If both a sink and a source are given.
    """

    def __init__(
        self,
        sink: IO[Any] | None = None,
        source: IO[Any] | None = None,
        name: str = "<recording>",
    ) -> None:
        if sink is not None and source is not None:
            raise ValueError("a recorder either records or replays, not both")

        self._sink = sink
        self._parser: OperationParser | None = None
        if source is not None:
            self._parser = OperationParser(LineScanner(source, name))

        if sink is not None:
            self._mode = RecorderMode.RECORDING
        elif source is not None:
            self._mode = RecorderMode.REPLAYING
        else:
            self._mode = RecorderMode.DISABLED
        logger.debug("recorder configured: %s", self._mode.value)

    @classmethod
    def disabled(cls) -> "Recorder":
        """A recorder that always does the real thing."""
        return cls()

    @classmethod
    def for_recording(cls, sink: IO[Any]) -> "Recorder":
        """A recorder appending every operation to ``sink``."""
        return cls(sink=sink)

    @classmethod
    def for_replay(cls, source: IO[Any], name: str = "<recording>") -> "Recorder":
        """A recorder playing back from ``source``; ``name`` is for diagnostics only."""
        return cls(source=source, name=name)

    @property
    def mode(self) -> RecorderMode:
        return self._mode

    @property
    def recording(self) -> bool:
        return self._mode is RecorderMode.RECORDING

    @property
    def replaying(self) -> bool:
        return self._mode is RecorderMode.REPLAYING

    @property
    def enabled(self) -> bool:
        return self._mode is not RecorderMode.DISABLED

    def next(self, command: str, produce: Callable[[], str]) -> str:
        """Run, record, or replay one unit of work.

        Args:
            command: Identifies the unit of work, e.g. a glob pattern.
            produce: Does the real thing and returns its output. Not
                called while replaying.

        Returns:
            The produced output, or the recorded one while replaying.

        Raises:
            RecordingNotFoundError: Replay reached the end of the recording.
            CommandMismatchError: The next recorded command is a different one.
            GrammarError: The recording is malformed.
            RecordingIOError: Reading or writing the stream failed.
        """
        if self._mode is RecorderMode.DISABLED:
            return produce()

        if self._mode is RecorderMode.RECORDING:
            op = Operation(command=command, output=produce())
            self.record(op)
            return op.output

        op = self.step()
        position = self._parser.scanner.position()
        if op is None:
            raise RecordingNotFoundError(command, position)
        if op.command != command.strip():
            raise CommandMismatchError(command.strip(), op.command, position)
        logger.debug("%s: replayed %r", position, op.command)
        return op.output

    def record(self, op: Operation) -> None:
        """Append ``op`` to the sink.

        Raises:
            MisconfiguredRecorderError: If the recorder is not recording.
            RecordingIOError: If the write fails.
        """
        if not self.recording:
            raise MisconfiguredRecorderError("misconfigured recorder; not set to record")

        text = op.serialize()
        try:
            if _is_binary(self._sink):
                self._sink.write(text.encode("utf-8"))
            else:
                self._sink.write(text)
        except OSError as exc:
            raise RecordingIOError(f"failed to write recording: {exc}") from exc
        logger.debug("recorded %r", op.command)

    def step(self) -> Operation | None:
        """Return the next recorded operation, or None at the end of the recording.

        Raises:
            MisconfiguredRecorderError: If the recorder is not replaying.
            GrammarError: If the recording is malformed.
        """
        if not self.replaying:
            raise MisconfiguredRecorderError("misconfigured recorder; not set to replay")
        return self._parser.try_next()

    def operations(self) -> Iterator[Operation]:
        """Iterate over every remaining recorded operation."""
        while True:
            op = self.step()
            if op is None:
                return
            yield op
