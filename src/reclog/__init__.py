"""reclog - record side effects to a text log and replay them later."""

from reclog.errors import (
    CommandMismatchError,
    GrammarError,
    MisconfiguredRecorderError,
    RecorderError,
    RecordingIOError,
    RecordingNotFoundError,
)
from reclog.loader.parser import OperationParser
from reclog.loader.scanner import LineScanner
from reclog.models.operation import Operation
from reclog.recording.recorder import Recorder, RecorderMode

__version__ = "0.1.0"

__all__ = [
    "CommandMismatchError",
    "GrammarError",
    "LineScanner",
    "MisconfiguredRecorderError",
    "Operation",
    "OperationParser",
    "Recorder",
    "RecorderError",
    "RecorderMode",
    "RecordingIOError",
    "RecordingNotFoundError",
]
