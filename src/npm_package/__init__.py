"""Resolve metadata and entry files of packages installed in node_modules."""

from .entry import resolve_entry
from .errors import (
    InvalidPackageNameError,
    ManifestDecodeError,
    ManifestReadError,
    MissingVersionError,
    PackageNotFoundError,
    PackageResolutionError,
    PathNotFoundError,
    UnresolvableEntryError,
)
from .manifest import load_manifest, read_manifest
from .models import Manifest, Options, PackageInfo
from .name_validation import NameValidation, validate
from .resolver import (
    get_package_info,
    get_package_json_path,
    is_package_exists,
    resolve_package_info,
)

__all__ = [
    "get_package_info",
    "get_package_json_path",
    "is_package_exists",
    "resolve_package_info",
    "resolve_entry",
    "load_manifest",
    "read_manifest",
    "validate",
    "Manifest",
    "NameValidation",
    "Options",
    "PackageInfo",
    "PackageResolutionError",
    "InvalidPackageNameError",
    "PathNotFoundError",
    "PackageNotFoundError",
    "ManifestReadError",
    "ManifestDecodeError",
    "MissingVersionError",
    "UnresolvableEntryError",
]
