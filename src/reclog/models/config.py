"""Project configuration model for reclog.

Captures reclog.yaml fields with sensible defaults for where recordings
live, whether to re-record them, and how chatty logging is.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

CONFIG_FILENAME = "reclog.yaml"

# Environment variable that switches callers into recording mode
RECORD_ENV_VAR = "RECLOG_RECORD"


class ProjectConfig(BaseModel):
    """Project-level configuration loaded from reclog.yaml."""

    model_config = {"extra": "forbid"}

    recordings_dir: str = "testdata/recordings"
    suffix: str = ".rec"
    record: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from start (default: cwd) looking for reclog.yaml.

    Args:
        start: Starting path (file or directory). Defaults to cwd.

    Returns:
        Path to the directory containing reclog.yaml, or cwd if none
        is found.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while current != current.parent:
        if (current / CONFIG_FILENAME).exists():
            return current
        current = current.parent
    return Path.cwd()


def load_project_config(project_root: Path | None = None) -> ProjectConfig:
    """Load ProjectConfig from reclog.yaml. Returns defaults if not found.

    Args:
        project_root: Path to the project root directory. If None,
            uses find_project_root() to locate it.

    Returns:
        Validated ProjectConfig instance.
    """
    if project_root is None:
        project_root = find_project_root()
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return ProjectConfig()
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return ProjectConfig()
    return ProjectConfig.model_validate(raw)


def record_requested(config: ProjectConfig | None = None) -> bool:
    """Whether recordings should be (re)written rather than replayed.

    True when the config enables recording or RECLOG_RECORD is set to a
    truthy value.
    """
    if config is not None and config.record:
        return True
    return os.environ.get(RECORD_ENV_VAR, "").lower() in ("true", "1", "yes")
