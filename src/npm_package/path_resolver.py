"""Existence-checked path joining against the resolution base directory."""

from __future__ import annotations

import functools
import logging
import os
from pathlib import Path
from typing import Optional

from common.logging_utils import extra_context, is_debug_enabled

from .errors import PathNotFoundError
from .models import Options

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def working_directory() -> Path:
    """Snapshot of the process working directory, taken on first use."""
    return Path.cwd()


def base_directory(options: Optional[Options] = None) -> Path:
    """Return the directory module ids are resolved against."""
    if options is not None and options.cwd is not None:
        return Path(options.cwd)
    return working_directory()


def resolve(module_id: str, options: Optional[Options] = None) -> Path:
    """Join ``module_id`` onto the base directory and confirm it exists.

    Files and directories both count. No symlink resolution, extension
    probing or ancestor-directory walk is attempted.

    Raises:
        PathNotFoundError: when the candidate path does not exist.
    """
    candidate = base_directory(options) / module_id
    # os.path.exists reports False for unreadable parents instead of raising
    found = os.path.exists(candidate)
    if is_debug_enabled(logger):
        logger.debug(
            "Path probe",
            extra=extra_context(
                event="fs_probe",
                component="path_resolver",
                action="resolve",
                outcome="found" if found else "missing",
                target=str(candidate),
            ),
        )
    if not found:
        raise PathNotFoundError(module_id, str(candidate))
    return candidate
