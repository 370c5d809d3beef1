"""Centralized logging helpers.

Provides the one-time handler setup used by the CLI plus small helpers for
structured DEBUG traces. Library modules only call ``logging.getLogger`` and
never install handlers themselves.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from constants import Constants

_HANDLER_MARK = "_npm_package_handler"


def configure_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger for CLI usage.

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to Constants.DEFAULT_LOG_LEVEL.
        logfile: Optional path; when set, records go to the file instead of stderr.
    """
    level_name = str(level or Constants.DEFAULT_LOG_LEVEL).upper()
    level_value = getattr(logging, level_name, logging.WARNING)

    root = logging.getLogger()
    # Replace only handlers installed by an earlier call
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            root.removeHandler(existing)
            existing.close()

    if logfile:
        handler: logging.Handler = logging.FileHandler(logfile, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    setattr(handler, _HANDLER_MARK, True)
    root.addHandler(handler)
    root.setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from this logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra`` mapping for structured log records.

    None values are dropped so records only carry the fields that were set.
    """
    return {key: value for key, value in fields.items() if value is not None}


class Timer:
    """Context manager measuring wall-clock duration in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> float:
        """Elapsed milliseconds; live while the block is still running."""
        end = self._end if self._end is not None else time.perf_counter()
        return round((end - self._start) * 1000.0, 3)
