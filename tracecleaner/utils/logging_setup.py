"""Logging setup for the ``tracecleaner`` logger hierarchy."""

import logging
import sys
from pathlib import Path


# Every module logs through a child of this logger (``logging.getLogger(__name__)``).
logger = logging.getLogger("tracecleaner")


def setup_logging(debug_mode: bool = False, log_file_path: str | Path | None = None) -> None:
    """
    Configure the application logger.

    Logs go to stderr, or to ``log_file_path`` when given (always at DEBUG
    level). Calling this again once handlers exist does nothing.

    Args:
        debug_mode: Log DEBUG messages to the console instead of INFO
        log_file_path: Write logs to this file instead of the console
    """
    if logger.handlers:
        return

    if log_file_path:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.setLevel(logging.DEBUG)
        handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    else:
        level = logging.DEBUG if debug_mode else logging.INFO
        logger.setLevel(level)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        if debug_mode:
            handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        else:
            handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logger.addHandler(handler)
