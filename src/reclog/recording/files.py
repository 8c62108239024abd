"""Recording files on disk.

The Recorder itself never opens or closes streams; these helpers do it
for the common case of one recording file per test or per tool run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from reclog.errors import RecordingIOError
from reclog.models.config import ProjectConfig
from reclog.recording.recorder import Recorder

logger = logging.getLogger(__name__)


def recording_path(
    name: str,
    project_root: Path,
    config: ProjectConfig | None = None,
) -> Path:
    """Resolve the file holding the recording called ``name``.

    Args:
        name: Recording name, e.g. a test id. May contain '/' to nest.
        project_root: Directory the configured recordings_dir is relative to.
        config: Project configuration; defaults are used when None.

    Returns:
        ``<project_root>/<recordings_dir>/<name><suffix>``.
    """
    config = config or ProjectConfig()
    return project_root / config.recordings_dir / f"{name}{config.suffix}"


@contextmanager
def open_recorder(path: Path, record: bool = False) -> Iterator[Recorder]:
    """Open ``path`` and yield a Recorder bound to it.

    With ``record=True`` the file is (re)created, along with its parent
    directories, and the Recorder records into it. Otherwise the file is
    replayed from. The file is closed when the block exits.

    Raises:
        RecordingIOError: If the file cannot be opened.
    """
    path = Path(path)
    try:
        if record:
            path.parent.mkdir(parents=True, exist_ok=True)
            f = open(path, "w", encoding="utf-8", newline="\n")
        else:
            f = open(path, "r", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise RecordingIOError(f"cannot open recording {path}: {exc}") from exc

    logger.debug("%s %s", "recording to" if record else "replaying from", path)
    with f:
        if record:
            yield Recorder.for_recording(f)
        else:
            yield Recorder.for_replay(f, str(path))
