"""Debug logging configuration for suite contexts."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logger(debug_file: Path, verbose: bool = False, logger_name: str = "ctest") -> logging.Logger:
    """
    Attach a debug log for suite context events.

    ctest.context logs each context creation, every recorded outcome
    ("<name>: passed|failed (<file>:<line>)") and each release with its final
    counts, all at DEBUG. Those records propagate into the logger configured
    here, which always writes them to debug_file and, with verbose=True, also
    to stderr next to the failure lines.

    Args:
        debug_file: Path to debug log file (always created)
        verbose: If True, also log to stderr. If False, only log to file.
        logger_name: Name of the logger instance

    Returns:
        Configured logger instance.

    Raises:
        RuntimeError: if the logger already has handlers attached.
    """
    logger = logging.getLogger(logger_name)

    if logger.handlers:
        raise RuntimeError(
            f"Logger '{logger_name}' already exists with handlers attached"
        )

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S"
    )

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(debug_file, mode='a')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
