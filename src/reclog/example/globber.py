"""A globber whose filesystem listing can be recorded and replayed."""

from __future__ import annotations

import glob

from reclog.recording.recorder import Recorder


class Globber:
    """Returns the file names matching a pattern, through a Recorder.

    With a disabled recorder this is plain ``glob.glob``; with a
    replaying one the filesystem is never touched.
    """

    def __init__(self, recorder: Recorder | None = None) -> None:
        self.recorder = recorder or Recorder.disabled()

    def glob(self, pattern: str) -> list[str]:
        """Sorted names of all files matching ``pattern``."""

        def do_glob() -> str:
            matches = sorted(glob.glob(pattern))
            return "".join(f"{m}\n" for m in matches)

        output = self.recorder.next(pattern, do_glob)
        return output.splitlines()
