"""Exceptions raised while resolving installed packages.

Every failure in the resolution path is a ``PackageResolutionError``. The
convenience entry points (``get_package_info``, ``load_manifest``) turn these
into ``None``; ``resolve_package_info`` lets them propagate so callers can
tell why nothing was resolved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .name_validation import NameValidation


class PackageResolutionError(Exception):
    """Base class for resolution failures."""

    def __init__(self, message: str, package_name: Optional[str] = None):
        super().__init__(message)
        self.package_name = package_name


class InvalidPackageNameError(PackageResolutionError):
    """Raised when a name is invalid under both current and legacy rules."""

    def __init__(self, package_name: str, validation: "NameValidation"):
        problems = "; ".join(validation.errors + validation.warnings) or "invalid name"
        super().__init__(f"Invalid package name {package_name!r}: {problems}", package_name)
        self.validation = validation


class PathNotFoundError(PackageResolutionError):
    """Raised when a module id does not exist under the base directory."""

    def __init__(self, module_id: str, candidate: str):
        super().__init__(f"Cannot find module {module_id} from {candidate}")
        self.module_id = module_id
        self.candidate = candidate


class PackageNotFoundError(PackageResolutionError):
    """Raised when no manifest is installed for the package."""


class ManifestReadError(PackageResolutionError):
    """Raised when a manifest file cannot be read as UTF-8 text."""


class ManifestDecodeError(PackageResolutionError):
    """Raised when manifest text is not a well-formed package.json document."""


class MissingVersionError(PackageResolutionError):
    """Raised when a manifest has no ``version`` field."""


class UnresolvableEntryError(PackageResolutionError):
    """Raised when no entry file can be derived from a manifest."""
