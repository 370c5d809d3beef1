"""Data models for installed package resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

ExportValue = Union[str, Dict[str, Any]]

# Manifest attribute -> package.json key, in package.json field order
MANIFEST_FIELDS: Dict[str, str] = {
    "name": "name",
    "version": "version",
    "description": "description",
    "homepage": "homepage",
    "keywords": "keywords",
    "license": "license",
    "private": "private",
    "author": "author",
    "files": "files",
    "type": "type",
    "main": "main",
    "module": "module",
    "exports": "exports",
    "types": "types",
    "browser": "browser",
    "bin": "bin",
    "scripts": "scripts",
    "dependencies": "dependencies",
    "dev_dependencies": "devDependencies",
    "peer_dependencies": "peerDependencies",
    "peer_dependencies_meta": "peerDependenciesMeta",
    "optional_dependencies": "optionalDependencies",
    "engines": "engines",
}


@dataclass
class Manifest:  # pylint: disable=too-many-instance-attributes
    """Decoded package.json document.

    Only ``type``, ``main``, ``module``, ``exports`` and ``version`` are
    interpreted; everything else is carried as-is. Keys without a dedicated
    attribute are kept in ``extra``.
    """

    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None
    keywords: Optional[List[str]] = None
    license: Optional[Any] = None
    private: Optional[bool] = None
    author: Optional[Any] = None
    files: Optional[List[str]] = None
    type: Optional[str] = None
    main: Optional[str] = None
    module: Optional[str] = None
    exports: Optional[Any] = None
    types: Optional[str] = None
    browser: Optional[Any] = None
    bin: Optional[Any] = None
    scripts: Optional[Dict[str, str]] = None
    dependencies: Optional[Dict[str, str]] = None
    dev_dependencies: Optional[Dict[str, str]] = None
    peer_dependencies: Optional[Dict[str, str]] = None
    peer_dependencies_meta: Optional[Dict[str, Any]] = None
    optional_dependencies: Optional[Dict[str, str]] = None
    engines: Optional[Dict[str, str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Manifest":
        """Build a Manifest from a decoded package.json object."""
        known = {attr: data[key] for attr, key in MANIFEST_FIELDS.items() if key in data}
        keys = set(MANIFEST_FIELDS.values())
        extra = {key: value for key, value in data.items() if key not in keys}
        return cls(extra=extra, **known)

    def to_dict(self) -> Dict[str, Any]:
        """Return the package.json shaped document, omitting absent fields."""
        out: Dict[str, Any] = {}
        for attr, key in MANIFEST_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        out.update(self.extra)
        return out


@dataclass(frozen=True)
class Options:
    """Per-call resolution options.

    Attributes:
        cwd: Base directory for ``node_modules`` lookup. Used as given, without
            normalization. Falls back to the process working-directory snapshot.
    """

    cwd: Optional[str] = None


@dataclass(frozen=True)
class PackageInfo:
    """Resolved metadata of an installed package.

    Fields cannot be reassigned, but ``package_json`` is a plain Manifest whose
    dicts and lists stay mutable, so instances are deliberately unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    name: str
    version: str
    root_path: Path
    package_json_path: Path
    package_entry: Path
    package_json: Manifest

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation with paths rendered as strings."""
        return {
            "name": self.name,
            "version": self.version,
            "root_path": str(self.root_path),
            "package_json_path": str(self.package_json_path),
            "package_entry": str(self.package_entry),
            "package_json": self.package_json.to_dict(),
        }
