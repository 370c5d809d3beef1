"""package.json loading and shape validation.

``read_manifest`` raises on any failure; ``load_manifest`` is the lenient
wrapper that reports failures as ``None``.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional, Union

from jsonschema import Draft7Validator

from .errors import ManifestDecodeError, ManifestReadError
from .models import Manifest

logger = logging.getLogger(__name__)

_STRING_MAP = {"type": "object", "additionalProperties": {"type": "string"}}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}

# Only fields the resolver reads are typed strictly; pass-through fields
# accept every shape seen in published manifests.
MANIFEST_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "version": {"type": "string"},
        "description": {"type": "string"},
        "keywords": _STRING_LIST,
        "private": {"type": "boolean"},
        "files": _STRING_LIST,
        "type": {"type": "string"},
        "main": {"type": "string"},
        "module": {"type": "string"},
        "types": {"type": "string"},
        "exports": {"type": ["string", "object", "array", "null"]},
        "bin": {"type": ["string", "object"]},
        "scripts": _STRING_MAP,
        "dependencies": _STRING_MAP,
        "devDependencies": _STRING_MAP,
        "peerDependencies": _STRING_MAP,
        "optionalDependencies": _STRING_MAP,
        "peerDependenciesMeta": {"type": "object"},
        "engines": _STRING_MAP,
    },
}

_VALIDATOR = Draft7Validator(MANIFEST_SCHEMA)


def _check_shape(data: Any, path: str) -> None:
    errs = sorted(_VALIDATOR.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errs:
        first = errs[0]
        where = "/".join(str(p) for p in first.path) or "<root>"
        raise ManifestDecodeError(f"Invalid manifest {path} at '{where}': {first.message}")


def decode_manifest(text: str, path: str = "<string>") -> Manifest:
    """Decode package.json text into a Manifest.

    Raises:
        ManifestDecodeError: malformed JSON or a document of the wrong shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestDecodeError(f"Malformed JSON in {path}: {exc}") from exc
    _check_shape(data, path)
    return Manifest.from_dict(data)


def read_manifest(path: Union[str, "os.PathLike[str]"]) -> Manifest:
    """Read and decode the manifest at ``path``.

    Raises:
        ManifestReadError: the file cannot be read as UTF-8 text.
        ManifestDecodeError: the text is not a valid package.json document.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(f"Cannot read manifest {path}: {exc}") from exc
    return decode_manifest(text, str(path))


def load_manifest(path: Union[str, "os.PathLike[str]"]) -> Optional[Manifest]:
    """Read and decode the manifest at ``path``, or return None on failure."""
    try:
        return read_manifest(path)
    except ManifestReadError as exc:
        logger.debug("Manifest unreadable: %s", exc)
    except ManifestDecodeError as exc:
        logger.warning("Manifest rejected: %s", exc)
    return None
