"""Logging setup for reclog.

Example:
    from reclog.logging_utils import setup_logging

    setup_logging("DEBUG")
    logging.getLogger("reclog").debug("replaying from %s", path)
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Diagnostics go to stderr so they never mix with command output
console = Console(stderr=True)

_handler: RichHandler | None = None


def setup_logging(level: str = "WARNING", show_path: bool = False) -> None:
    """Attach a rich handler to the ``reclog`` logger and set its level.

    Calling it again only changes the level; the handler is installed once.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        show_path: Show the emitting file path in log output.
    """
    global _handler

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("reclog")

    if _handler is None:
        _handler = RichHandler(
            console=console,
            show_time=False,
            show_path=show_path,
            rich_tracebacks=True,
            markup=False,
        )
        _handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(_handler)
        logger.propagate = False

    logger.setLevel(numeric_level)
