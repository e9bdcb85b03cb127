from __future__ import annotations

from .logging_setup import LOG_LEVELS, setup_logging

__all__ = [
    "LOG_LEVELS",
    "setup_logging",
]
