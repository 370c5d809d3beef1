"""Entry-point selection for a decoded manifest.

Precedence, first match wins:

1. ``type == "module"`` with a ``module`` field,
2. the root export (``exports["."]``, or ``exports`` itself when it is a
   string, an array or a map naming ``import``/``require``), preferring
   ``import`` over ``require``,
3. ``main``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants, EntrySource

from .errors import UnresolvableEntryError
from .models import Manifest

logger = logging.getLogger(__name__)

_MISSING = object()


def root_export(exports: Any) -> Any:
    """Return the root export of an ``exports`` field, or a missing marker.

    ``"./x"``, ``["./x", ...]`` and ``{"import": ..., "require": ...}`` are
    shorthand for ``{".": "./x"}``, ``{".": [...]}`` and ``{".": {...}}``.
    A subpath-free map only counts as root conditions when it names
    ``import`` or ``require``; anything else falls through to ``main``.
    """
    if exports is None:
        return _MISSING
    if isinstance(exports, (str, list)):
        return exports
    if isinstance(exports, dict):
        if Constants.ROOT_EXPORT in exports:
            return exports[Constants.ROOT_EXPORT]
        if not any(key.startswith(".") for key in exports) and (
            Constants.CONDITION_IMPORT in exports or Constants.CONDITION_REQUIRE in exports
        ):
            return exports
    return _MISSING


def _condition_target(conditions: dict, package_name: Optional[str]) -> str:
    for condition in (Constants.CONDITION_IMPORT, Constants.CONDITION_REQUIRE):
        if condition in conditions:
            target = conditions[condition]
            if not isinstance(target, str):
                raise UnresolvableEntryError(
                    f"Root export condition '{condition}' is not a path string",
                    package_name,
                )
            return target
    raise UnresolvableEntryError(
        "Root export conditions define neither 'import' nor 'require'",
        package_name,
    )


def select_entry(manifest: Manifest) -> Tuple[EntrySource, str]:
    """Pick the manifest field and relative path that make up the entry.

    Raises:
        UnresolvableEntryError: no rule yields a path.
    """
    if manifest.type == Constants.MODULE_TYPE_ESM and manifest.module is not None:
        return EntrySource.MODULE, manifest.module

    root = root_export(manifest.exports)
    if root is not _MISSING:
        if isinstance(root, str):
            return EntrySource.EXPORTS, root
        if isinstance(root, dict):
            return EntrySource.EXPORTS, _condition_target(root, manifest.name)
        raise UnresolvableEntryError(
            f"Unsupported root export of type {type(root).__name__}", manifest.name
        )

    if manifest.main is None:
        raise UnresolvableEntryError(
            "Manifest declares no module, root export or main entry", manifest.name
        )
    return EntrySource.MAIN, manifest.main


def resolve_entry(
    manifest: Optional[Manifest], containing_directory: Union[str, Path]
) -> Optional[Path]:
    """Compute the entry file of a package.

    Args:
        manifest: Decoded manifest, or None when it could not be loaded.
        containing_directory: Directory holding the manifest.

    Returns:
        Entry path, or None when ``manifest`` is None.

    Raises:
        UnresolvableEntryError: the manifest names no usable entry.
    """
    if manifest is None:
        return None
    source, relative = select_entry(manifest)
    entry = Path(containing_directory) / relative
    if is_debug_enabled(logger):
        logger.debug(
            "Entry selected",
            extra=extra_context(
                event="decision",
                component="entry",
                action="resolve_entry",
                outcome=source.value,
                target=str(entry),
            ),
        )
    return entry
