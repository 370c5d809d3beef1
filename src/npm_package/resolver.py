"""Installed package lookup in a node_modules dependency store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants

from .entry import resolve_entry
from .errors import (
    InvalidPackageNameError,
    MissingVersionError,
    PackageNotFoundError,
    PackageResolutionError,
    PathNotFoundError,
)
from .manifest import read_manifest
from .models import Options, PackageInfo
from .name_validation import validate
from .path_resolver import resolve

logger = logging.getLogger(__name__)


def _package_json_id(name: str) -> str:
    return f"{Constants.NODE_MODULES_DIR}/{name}/{Constants.PACKAGE_JSON_FILE}"


def get_package_json_path(name: str, options: Optional[Options] = None) -> Optional[Path]:
    """Locate ``node_modules/<name>/package.json`` under the base directory.

    Returns:
        Path to the manifest, or None if it does not exist.
    """
    try:
        return resolve(_package_json_id(name), options)
    except PathNotFoundError:
        return None


def is_package_exists(name: str, options: Optional[Options] = None) -> bool:
    """Check whether a manifest is installed for ``name``.

    The name is not validated and the manifest is not decoded.
    """
    return get_package_json_path(name, options) is not None


def resolve_package_info(name: str, options: Optional[Options] = None) -> PackageInfo:
    """Resolve metadata and entry file of an installed package.

    The manifest is decoded once and shared by version extraction and entry
    resolution.

    Args:
        name: Package name as requested; copied verbatim into the result.
        options: Resolution options; ``options.cwd`` overrides the base directory.

    Returns:
        PackageInfo for the installed package.

    Raises:
        InvalidPackageNameError: name fails both current and legacy rules.
        PackageNotFoundError: no manifest installed under the base directory.
        ManifestReadError: manifest exists but cannot be read.
        ManifestDecodeError: manifest is malformed.
        UnresolvableEntryError: manifest names no usable entry file.
        MissingVersionError: manifest has no version.
    """
    with Timer() as t:
        validation = validate(name)
        if not validation.is_acceptable:
            raise InvalidPackageNameError(name, validation)

        try:
            package_json_path = resolve(_package_json_id(name), options)
        except PathNotFoundError as exc:
            raise PackageNotFoundError(
                f"Package {name} is not installed: {exc}", name
            ) from exc

        root_path = package_json_path.parent
        try:
            manifest = read_manifest(package_json_path)
            package_entry = resolve_entry(manifest, root_path)
        except PackageResolutionError as exc:
            if exc.package_name is None:
                exc.package_name = name
            raise

        if manifest.version is None:
            raise MissingVersionError(f"Manifest {package_json_path} has no version", name)

        info = PackageInfo(
            name=name,
            version=manifest.version,
            root_path=root_path,
            package_json_path=package_json_path,
            package_entry=package_entry,
            package_json=manifest,
        )

    if is_debug_enabled(logger):
        logger.debug(
            "Package resolved",
            extra=extra_context(
                event="function_exit",
                component="resolver",
                action="resolve_package_info",
                outcome="success",
                package=name,
                duration_ms=t.duration_ms(),
            ),
        )
    return info


def get_package_info(name: str, options: Optional[Options] = None) -> Optional[PackageInfo]:
    """Resolve an installed package, returning None when it cannot be resolved.

    Use ``resolve_package_info`` to learn why a lookup failed.
    """
    try:
        return resolve_package_info(name, options)
    except PackageResolutionError as exc:
        logger.debug("Package %s not resolved: %s", name, exc)
        return None
