"""Recording subpackage: the Recorder facade and recording file helpers.

Provides the Recorder with its three modes (disabled, recording,
replaying) and context managers that bind a Recorder to a file.
"""

from reclog.recording.files import open_recorder, recording_path
from reclog.recording.recorder import Recorder, RecorderMode

__all__ = [
    "Recorder",
    "RecorderMode",
    "open_recorder",
    "recording_path",
]
