"""Tests for npm package name validation."""

import pytest

from npm_package.name_validation import validate


class TestValidNames:
    """Names accepted under the current rules."""

    @pytest.mark.parametrize("name", [
        "consola",
        "magic-string",
        "lodash.merge",
        "some_package",
        "a",
        "@types/node",
        "@babel/core",
        "pkg1",
    ])
    def test_valid_for_new_packages(self, name):
        result = validate(name)
        assert result.valid_for_new_packages is True
        assert result.valid_for_old_packages is True
        assert result.warnings == []
        assert result.errors == []
        assert result.is_acceptable


class TestErrors:
    """Names rejected outright."""

    def test_empty(self):
        result = validate("")
        assert "name length must be greater than zero" in result.errors
        assert not result.is_acceptable

    def test_none(self):
        result = validate(None)
        assert result.errors == ["name cannot be null"]
        assert not result.valid_for_old_packages

    def test_not_a_string(self):
        result = validate(42)
        assert result.errors == ["name must be a string"]

    def test_leading_period(self):
        assert "name cannot start with a period" in validate(".hidden").errors

    def test_leading_underscore(self):
        assert "name cannot start with an underscore" in validate("_private").errors

    def test_surrounding_spaces(self):
        result = validate(" padded ")
        assert "name cannot contain leading or trailing spaces" in result.errors
        assert "name can only contain URL-friendly characters" in result.errors

    @pytest.mark.parametrize("name", ["node_modules", "favicon.ico", "NODE_MODULES"])
    def test_blocked(self, name):
        result = validate(name)
        assert any("is not a valid package name" in e for e in result.errors)
        assert not result.is_acceptable

    @pytest.mark.parametrize("name", ["foo/bar", "with space", "crème", "a%20b", "@scope/"])
    def test_url_unfriendly(self, name):
        result = validate(name)
        assert "name can only contain URL-friendly characters" in result.errors
        assert result.valid_for_old_packages is False

    def test_lone_surrogate(self):
        result = validate("a\ud800")
        assert result.errors == ["name can only contain URL-friendly characters"]
        assert not result.is_acceptable

    def test_lone_surrogate_in_scope(self):
        result = validate("@sc\udfffope/pkg")
        assert "name can only contain URL-friendly characters" in result.errors

    def test_scope_with_unsafe_half(self):
        result = validate("@sco pe/pkg")
        assert "name can only contain URL-friendly characters" in result.errors


class TestWarnings:
    """Names only valid for legacy packages."""

    def test_capital_letters(self):
        result = validate("JSONStream")
        assert result.warnings == ["name can no longer contain capital letters"]
        assert result.valid_for_new_packages is False
        assert result.valid_for_old_packages is True
        assert result.is_acceptable

    def test_core_module(self):
        result = validate("http")
        assert result.warnings == ["http is a core module name"]
        assert result.valid_for_old_packages is True

    def test_too_long(self):
        result = validate("a" * 215)
        assert result.warnings == ["name can no longer contain more than 214 characters"]
        assert result.valid_for_old_packages is True

    def test_max_length_is_fine(self):
        assert validate("a" * 214).valid_for_new_packages is True

    def test_special_characters(self):
        result = validate("crazy!")
        assert result.warnings == ['name can no longer contain special characters ("~\'!()*")']
        assert result.errors == []

    def test_special_characters_in_scoped_name(self):
        result = validate("@npm/thingy*")
        assert result.valid_for_new_packages is False
        assert result.valid_for_old_packages is True
