"""loguru configuration for the command line entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_LEVELS: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"

_configured_with: Optional[tuple[str, Optional[str]]] = None


def setup_logging(level: str = "WARNING", log_file: Optional[str | Path] = None) -> None:
    """Route loguru output to stderr and, optionally, a rotating log file.

    Calling again with the same arguments is a no-op; different arguments
    replace the previous sinks.
    """

    global _configured_with

    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: '{level}'. Must be one of: {', '.join(LOG_LEVELS)}")

    key = (level, str(log_file) if log_file else None)
    if _configured_with == key:
        return

    logger.remove()
    logger.enable("usbdetector")
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=level,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )

    _configured_with = key
