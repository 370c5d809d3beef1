"""npm package name validation.

Mirrors the rules of npm's ``validate-npm-package-name``: errors make a name
unusable everywhere, warnings only rule it out for newly published packages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List, Optional
from urllib.parse import quote

from constants import Constants

_SCOPED_NAME = re.compile(r"^(?:@([^/]+?)[/])?([^/]+?)$")


@dataclass(frozen=True)
class NameValidation:
    """Outcome of validating a package name."""

    valid_for_new_packages: bool
    valid_for_old_packages: bool
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def is_acceptable(self) -> bool:
        """True when the name is valid under either rule set."""
        return self.valid_for_new_packages or self.valid_for_old_packages


def _encode_uri_component(value: str) -> Optional[str]:
    """URL-encode like encodeURIComponent; None where it would throw (lone surrogates)."""
    try:
        return quote(value, safe=Constants.URI_COMPONENT_SAFE)
    except UnicodeEncodeError:
        return None


def _result(warnings: List[str], errors: List[str]) -> NameValidation:
    return NameValidation(
        valid_for_new_packages=not errors and not warnings,
        valid_for_old_packages=not errors,
        warnings=warnings,
        errors=errors,
    )


def validate(name: Any) -> NameValidation:
    """Validate a package name against current and legacy npm rules.

    Args:
        name: Candidate package name, e.g. ``lodash`` or ``@types/node``.

    Returns:
        NameValidation with both validity flags and the messages behind them.
    """
    warnings: List[str] = []
    errors: List[str] = []

    if name is None:
        errors.append("name cannot be null")
        return _result(warnings, errors)
    if not isinstance(name, str):
        errors.append("name must be a string")
        return _result(warnings, errors)

    if not name:
        errors.append("name length must be greater than zero")
    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    for blocked in Constants.BLOCKED_NAMES:
        if name.lower() == blocked:
            errors.append(f"{blocked} is not a valid package name")

    if name.lower() in Constants.NODE_CORE_MODULES:
        warnings.append(f"{name} is a core module name")
    if len(name) > Constants.MAX_NAME_LENGTH:
        warnings.append(
            f"name can no longer contain more than {Constants.MAX_NAME_LENGTH} characters"
        )
    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")
    if any(ch in Constants.NAME_SPECIAL_CHARS for ch in name.split("/")[-1]):
        warnings.append(
            f'name can no longer contain special characters ("{Constants.NAME_SPECIAL_CHARS}")'
        )

    if _encode_uri_component(name) != name:
        # @scope/pkg is fine as long as each half is URL-safe on its own
        match = _SCOPED_NAME.match(name)
        if match:
            user, pkg = match.group(1), match.group(2)
            if (
                user
                and pkg
                and _encode_uri_component(user) == user
                and _encode_uri_component(pkg) == pkg
            ):
                return _result(warnings, errors)
        errors.append("name can only contain URL-friendly characters")

    return _result(warnings, errors)
